"""Distribution of competencies over the lesson calendar."""

import logging

from .constants import BLOCK_HOURS, get_shift_window
from .models import Competency, LessonSlot, PlanResult, Session
from .utils import required_sessions

logger = logging.getLogger(__name__)


def plan_sessions(
    course_id: int,
    competencies: list[Competency],
    slots: list[LessonSlot],
    block_hours: int = BLOCK_HOURS,
) -> PlanResult:
    """Turn ordered competencies into sessions on consecutive lesson slots.

    Each competency needs ceil(hours / block_hours) sessions, taken in order
    from the front of the slots not yet used. When the calendar runs out,
    planning stops: the current competency keeps the sessions it already got
    and later competencies get none. No error is raised; compare
    ``sessions_expected`` with ``len(sessions)`` or inspect ``shortfall`` to
    detect under-allocation.

    Args:
        course_id: Course the sessions belong to
        competencies: Competencies in processing order
        slots: Lesson slots in chronological order
        block_hours: Length of one session in hours

    Returns:
        PlanResult with sessions in competency order, then by date
    """
    result = PlanResult()
    cursor = 0

    for competency in competencies:
        needed = required_sessions(competency.hours, block_hours)
        result.sessions_expected += needed

        taken = 0
        while taken < needed and cursor < len(slots):
            slot = slots[cursor]
            start, end = get_shift_window(slot.shift)
            result.sessions.append(
                Session(
                    course_id=course_id,
                    competency_id=competency.id,
                    competency_name=competency.name,
                    date=slot.date,
                    start=start,
                    end=end,
                )
            )
            cursor += 1
            taken += 1

        if taken < needed:
            result.shortfall[competency.id] = needed - taken

    result.unused_slots = len(slots) - cursor

    if result.shortfall:
        logger.warning(
            f"Course {course_id}: calendar has {len(slots)} lesson days but "
            f"{result.sessions_expected} sessions are required; "
            f"{len(result.shortfall)} competencies were left short"
        )
    else:
        logger.info(
            f"Course {course_id}: planned {len(result.sessions)} sessions, "
            f"{result.unused_slots} lesson days unused"
        )

    return result
