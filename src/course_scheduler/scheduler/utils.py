"""Utility functions for schedule generation."""

import math
from datetime import date, datetime, time

from ..exceptions import InvalidInputError
from .constants import BLOCK_HOURS
from .models import Competency, Instructor


def required_sessions(hours: int, block_hours: int = BLOCK_HOURS) -> int:
    """Number of sessions needed to cover a competency's hours.

    Args:
        hours: Required instructional hours
        block_hours: Length of one session in hours

    Returns:
        ceil(hours / block_hours), or 0 for non-positive hours
    """
    if hours <= 0:
        return 0
    return math.ceil(hours / block_hours)


def windows_overlap(
    existing_start: time,
    existing_end: time,
    new_start: time,
    new_end: time,
) -> bool:
    """Check whether two time windows on the same day overlap.

    Covers containment in either direction and partial overlap on either
    edge. Adjacent windows (one ends exactly when the other starts) do not
    overlap.
    """
    return not (existing_end <= new_start or existing_start >= new_end)


def sort_competencies(competencies: list[Competency]) -> list[Competency]:
    """Sort competencies by their order key, keeping input order for ties."""
    return sorted(competencies, key=lambda c: c.order)


def rank_candidates(
    instructors: list[Instructor], competency_id: int
) -> list[Instructor]:
    """Filter active qualified instructors and order them by proficiency.

    Expert comes first, basic last. The sort is stable, so instructors with
    the same level keep the order they were given in.
    """
    candidates = [
        i
        for i in instructors
        if i.active and i.proficiency_for(competency_id) is not None
    ]
    return sorted(candidates, key=lambda i: i.proficiency_for(competency_id).rank)


def parse_date(value: str | date, field: str = "date") -> date:
    """Parse an ISO date (YYYY-MM-DD).

    Raises:
        InvalidInputError: If the value is not a valid date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidInputError(f"expected YYYY-MM-DD, got '{value}'", field) from e


def parse_time(value: str | time, field: str = "time") -> time:
    """Parse a time of day in HH:MM or HH:MM:SS format.

    Raises:
        InvalidInputError: If the value is not a valid time
    """
    if isinstance(value, time):
        return value
    text = str(value).strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise InvalidInputError(f"expected HH:MM, got '{value}'", field)
