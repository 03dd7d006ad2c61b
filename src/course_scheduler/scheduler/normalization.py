"""Label normalization for weekdays, shifts, proficiency levels and statuses.

Records exported from the legacy course-management database use Portuguese
labels ("Segunda", "Manhã", "avançado", "ativo"); English names are accepted
as well. Matching is case- and accent-insensitive.
"""

import unicodedata

import pandas as pd

from ..exceptions import InvalidInputError
from .models import ProficiencyLevel, Shift, Weekday

WEEKDAY_ALIASES = {
    "monday": Weekday.MONDAY,
    "mon": Weekday.MONDAY,
    "segunda": Weekday.MONDAY,
    "segunda-feira": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "tue": Weekday.TUESDAY,
    "terca": Weekday.TUESDAY,
    "terca-feira": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "wed": Weekday.WEDNESDAY,
    "quarta": Weekday.WEDNESDAY,
    "quarta-feira": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "thu": Weekday.THURSDAY,
    "quinta": Weekday.THURSDAY,
    "quinta-feira": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "fri": Weekday.FRIDAY,
    "sexta": Weekday.FRIDAY,
    "sexta-feira": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sat": Weekday.SATURDAY,
    "sabado": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "sun": Weekday.SUNDAY,
    "domingo": Weekday.SUNDAY,
}

SHIFT_ALIASES = {
    "morning": Shift.MORNING,
    "manha": Shift.MORNING,
    "afternoon": Shift.AFTERNOON,
    "tarde": Shift.AFTERNOON,
    "evening": Shift.EVENING,
    "night": Shift.EVENING,
    "noite": Shift.EVENING,
}

PROFICIENCY_ALIASES = {
    "expert": ProficiencyLevel.EXPERT,
    "especialista": ProficiencyLevel.EXPERT,
    "advanced": ProficiencyLevel.ADVANCED,
    "avancado": ProficiencyLevel.ADVANCED,
    "intermediate": ProficiencyLevel.INTERMEDIATE,
    "intermediario": ProficiencyLevel.INTERMEDIATE,
    "basic": ProficiencyLevel.BASIC,
    "basico": ProficiencyLevel.BASIC,
}

ACTIVE_STATUSES = {"active", "ativo"}


def normalize_label(label: str) -> str:
    """Lowercase a label, strip accents and collapse whitespace.

    Args:
        label: Raw label such as "Terça" or " Manhã "

    Returns:
        Normalized key like "terca" or "manha"; empty string for missing values
    """
    if label is None or pd.isna(label):
        return ""

    decomposed = unicodedata.normalize("NFKD", str(label))
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(stripped.lower().split())


def normalize_weekday(label: str | int) -> Weekday:
    """Convert a weekday label or ISO number (1=Monday .. 7=Sunday) to Weekday.

    Raises:
        InvalidInputError: If the label is not a known weekday
    """
    if isinstance(label, Weekday):
        return label
    if isinstance(label, int) and not isinstance(label, bool):
        if 1 <= label <= 7:
            return Weekday(label - 1)
        raise InvalidInputError(f"weekday number out of range: {label}", "weekdays")

    key = normalize_label(label)
    if key.isdigit():
        return normalize_weekday(int(key))
    if key not in WEEKDAY_ALIASES:
        raise InvalidInputError(f"unknown weekday '{label}'", "weekdays")
    return WEEKDAY_ALIASES[key]


def parse_weekdays(value: str | list) -> frozenset[Weekday]:
    """Parse a weekday set from a comma-separated string or a list.

    Examples:
        >>> sorted(d.name for d in parse_weekdays("Segunda,Quarta"))
        ['MONDAY', 'WEDNESDAY']

    Raises:
        InvalidInputError: If the set is empty or contains an unknown weekday
    """
    if isinstance(value, str):
        items = [part for part in value.split(",") if part.strip()]
    else:
        items = list(value or [])

    if not items:
        raise InvalidInputError("weekday set is empty", "weekdays")

    return frozenset(normalize_weekday(item) for item in items)


def normalize_shift(label: str) -> Shift | str:
    """Convert a shift label to Shift.

    Unknown labels are returned unchanged; they resolve to the morning
    window when sessions are planned.
    """
    if isinstance(label, Shift):
        return label
    key = normalize_label(label)
    return SHIFT_ALIASES.get(key, label)


def normalize_proficiency(label: str) -> ProficiencyLevel:
    """Convert a proficiency label to ProficiencyLevel.

    Raises:
        InvalidInputError: If the label is not one of the four known levels
    """
    if isinstance(label, ProficiencyLevel):
        return label
    key = normalize_label(label)
    if key not in PROFICIENCY_ALIASES:
        raise InvalidInputError(f"unknown proficiency level '{label}'", "level")
    return PROFICIENCY_ALIASES[key]


def is_active_status(status: str | bool | None) -> bool:
    """Check whether an instructor status value means active."""
    if isinstance(status, bool):
        return status
    return normalize_label(status) in ACTIVE_STATUSES
