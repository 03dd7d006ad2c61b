"""Lesson calendar generation.

Turns a course's date range and weekday set into the ordered list of days
on which the course meets.
"""

from datetime import date, timedelta

from ..exceptions import InvalidInputError
from .models import Course, LessonSlot, Weekday


def _validate_weekdays(weekdays) -> frozenset[Weekday]:
    if not weekdays:
        raise InvalidInputError("weekday set is empty", "weekdays")
    invalid = [d for d in weekdays if not isinstance(d, Weekday)]
    if invalid:
        raise InvalidInputError(
            f"not a weekday: {', '.join(map(repr, invalid))}", "weekdays"
        )
    return frozenset(weekdays)


def _iter_days(start: date, end: date):
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


def generate_lesson_slots(course: Course) -> list[LessonSlot]:
    """Generate one lesson slot per course day between start and end.

    Every calendar day from ``course.start_date`` to ``course.end_date``
    (inclusive) whose weekday is in ``course.weekdays`` yields a slot with the
    course's shift. Slots are strictly increasing by date.

    Args:
        course: Course to generate the calendar for

    Returns:
        Ordered list of LessonSlot; empty when start is after end

    Raises:
        InvalidInputError: If the weekday set is empty or malformed
    """
    weekdays = _validate_weekdays(course.weekdays)
    day_numbers = {d.value for d in weekdays}

    return [
        LessonSlot(date=day, shift=course.shift)
        for day in _iter_days(course.start_date, course.end_date)
        if day.weekday() in day_numbers
    ]


def count_lesson_days(start: date, end: date, weekdays) -> int:
    """Count days between start and end (inclusive) falling on the given weekdays."""
    day_numbers = {d.value for d in _validate_weekdays(weekdays)}
    return sum(1 for day in _iter_days(start, end) if day.weekday() in day_numbers)
