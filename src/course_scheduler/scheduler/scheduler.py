"""Main scheduler class running the whole pipeline for one course."""

import logging

from ..exceptions import CourseNotFoundError, NoCompetenciesError, NotFoundError
from .allocator import InstructorAllocator
from .constants import BLOCK_HOURS
from .dates import generate_lesson_slots
from .models import Competency, Course, PlanResult, ScheduleResult
from .planner import plan_sessions
from .repository import ScheduleRepository
from .utils import sort_competencies

logger = logging.getLogger(__name__)


class CourseScheduler:
    """
    Schedules the lessons of a course and allocates instructors to them.

    The pipeline is: lesson calendar → session plan → instructor allocation.
    Runs are synchronous and independent; each ``schedule_course`` call uses
    a fresh allocator, so the scheduler can be reused across courses.
    """

    def __init__(self, repository: ScheduleRepository, block_hours: int = BLOCK_HOURS):
        """
        Initialize the scheduler.

        Args:
            repository: Source of course data and sink for decisions.
            block_hours: Length of one session in hours.
        """
        self.repository = repository
        self.block_hours = block_hours

    def load_course(self, course_id: int) -> tuple[Course, list[Competency]]:
        """
        Fetch a course and its competencies in processing order.

        Raises:
            CourseNotFoundError: If the course does not exist.
            NoCompetenciesError: If the course has no competencies.
        """
        course = self.repository.fetch_course(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)

        competencies = self.repository.fetch_competencies(course_id)
        if not competencies:
            raise NoCompetenciesError(course_id)

        return course, sort_competencies(competencies)

    def plan_course(self, course_id: int) -> PlanResult:
        """Plan the sessions of a course without allocating instructors."""
        course, competencies = self.load_course(course_id)
        slots = generate_lesson_slots(course)
        return plan_sessions(course.id, competencies, slots, self.block_hours)

    def schedule_course(self, course_id: int) -> ScheduleResult:
        """
        Schedule a course end to end.

        Args:
            course_id: Id of the course to schedule.

        Returns:
            ScheduleResult. A missing course or a course without competencies
            gives a rejected result and nothing is written.

        Raises:
            InvalidInputError: If the course's weekday set is malformed.
            CollaboratorError: If storing a decision fails. Earlier decisions
                of the run stay stored.
        """
        try:
            course, competencies = self.load_course(course_id)
        except NotFoundError as e:
            logger.warning(str(e))
            return ScheduleResult.rejected(course_id, str(e))

        logger.info(
            f"Scheduling course {course.id} ({course.name}): "
            f"{course.start_date.isoformat()} to {course.end_date.isoformat()}, "
            f"{len(competencies)} competencies"
        )

        slots = generate_lesson_slots(course)
        plan = plan_sessions(course.id, competencies, slots, self.block_hours)

        allocator = InstructorAllocator(self.repository)
        allocation = allocator.allocate(plan.sessions)

        warnings = []
        by_id = {c.id: c for c in competencies}
        for competency_id, missing in plan.shortfall.items():
            warnings.append(
                f"{by_id[competency_id].name}: {missing} session(s) did not fit "
                f"in the course calendar"
            )

        logger.info(
            f"Course {course.id}: allocated {allocation.sessions_allocated} of "
            f"{allocation.sessions_considered} sessions"
        )

        return ScheduleResult(
            accepted=True,
            course_id=course.id,
            sessions_total=allocation.sessions_considered,
            sessions_allocated=allocation.sessions_allocated,
            sessions_expected=plan.sessions_expected,
            unused_slots=plan.unused_slots,
            conflicts=list(allocation.conflicts),
            entries=list(allocation.entries),
            conflict_records=list(allocation.conflict_records),
            warnings=warnings,
        )
