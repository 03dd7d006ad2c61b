"""Course scheduling: lesson calendar, session planning and instructor allocation.

The pipeline for one course is:
- generate_lesson_slots: course date range + weekdays -> lesson days
- plan_sessions: ordered competencies -> one 4-hour session per lesson day
- InstructorAllocator: first free instructor by proficiency, or a conflict

Main classes:
- CourseScheduler: Runs the whole pipeline for a course
- InstructorAllocator: Greedy instructor allocation
- ConflictTracker: Conflicts of one allocation run
- DataLoader: Loads courses, instructors and the agenda from data/

Usage:
    from course_scheduler.scheduler import CourseScheduler, DataLoader

    repository = DataLoader(Path("data")).build_repository()
    result = CourseScheduler(repository).schedule_course(1)
"""

from .allocator import InstructorAllocator
from .config import DataLoader
from .conflicts import ConflictTracker
from .constants import BLOCK_HOURS, SHIFT_WINDOWS, get_shift_window
from .dates import count_lesson_days, generate_lesson_slots
from .models import (
    AllocationResult,
    Competency,
    ConflictRecord,
    ConflictType,
    Course,
    Instructor,
    LessonSlot,
    PlanResult,
    ProficiencyLevel,
    ScheduleEntry,
    ScheduleResult,
    ScheduleStatus,
    Session,
    Shift,
    Weekday,
)
from .planner import plan_sessions
from .repository import InMemoryRepository, JSONRepository, ScheduleRepository
from .scheduler import CourseScheduler
from .utils import rank_candidates, required_sessions, windows_overlap

__all__ = [
    # Main scheduler
    "CourseScheduler",
    "InstructorAllocator",
    "ConflictTracker",
    # Pipeline steps
    "generate_lesson_slots",
    "count_lesson_days",
    "plan_sessions",
    # Persistence
    "ScheduleRepository",
    "InMemoryRepository",
    "JSONRepository",
    "DataLoader",
    # Models
    "AllocationResult",
    "Competency",
    "ConflictRecord",
    "ConflictType",
    "Course",
    "Instructor",
    "LessonSlot",
    "PlanResult",
    "ProficiencyLevel",
    "ScheduleEntry",
    "ScheduleResult",
    "ScheduleStatus",
    "Session",
    "Shift",
    "Weekday",
    # Constants
    "BLOCK_HOURS",
    "SHIFT_WINDOWS",
    "get_shift_window",
    # Utilities
    "rank_candidates",
    "required_sessions",
    "windows_overlap",
]
