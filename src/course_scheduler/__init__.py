"""Course Scheduler - instructor allocation for recurring training courses.

This package builds the lesson calendar of a course from its date range and
weekly meeting days, splits the course's competencies into 4-hour sessions
and assigns each session the most proficient qualified instructor who is
free at that time. Sessions nobody can take are recorded as conflicts.

Example usage:
    from course_scheduler import CourseScheduler, DataLoader

    repository = DataLoader(Path("data")).build_repository()
    result = CourseScheduler(repository).schedule_course(1)

    print(f"Allocated {result.sessions_allocated} of {result.sessions_total}")
    for conflict in result.conflicts:
        print(conflict)

    # Export to Excel
    from course_scheduler.exporters import ExcelExporter
    ExcelExporter().export(result, "schedule.xlsx")
"""

from .exceptions import (
    CollaboratorError,
    CourseNotFoundError,
    InvalidInputError,
    NoCompetenciesError,
    NotFoundError,
    SchedulingError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .scheduler import (
    Competency,
    ConflictRecord,
    Course,
    CourseScheduler,
    DataLoader,
    InMemoryRepository,
    Instructor,
    InstructorAllocator,
    ProficiencyLevel,
    ScheduleEntry,
    ScheduleRepository,
    ScheduleResult,
    Shift,
    Weekday,
)

__version__ = "0.1.0"

__all__ = [
    # Main scheduler
    "CourseScheduler",
    "InstructorAllocator",
    # Persistence
    "ScheduleRepository",
    "InMemoryRepository",
    "DataLoader",
    # Models
    "Course",
    "Competency",
    "Instructor",
    "ProficiencyLevel",
    "ScheduleEntry",
    "ConflictRecord",
    "ScheduleResult",
    "Shift",
    "Weekday",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "SchedulingError",
    "NotFoundError",
    "CourseNotFoundError",
    "NoCompetenciesError",
    "InvalidInputError",
    "CollaboratorError",
]
