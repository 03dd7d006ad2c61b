"""Constants for schedule generation."""

from datetime import time

from .models import Shift

# Length of one teaching session in hours
BLOCK_HOURS = 4

# Time window of a session for each shift
SHIFT_WINDOWS = {
    Shift.MORNING: (time(8, 0), time(12, 0)),
    Shift.AFTERNOON: (time(13, 0), time(17, 0)),
    Shift.EVENING: (time(18, 30), time(22, 30)),
}

# Unrecognized shifts fall back to this shift's window
DEFAULT_SHIFT = Shift.MORNING

# Default directory holding courses.json, competencies.json, etc.
DEFAULT_DATA_DIR = "data"


def get_shift_window(shift: Shift | str) -> tuple[time, time]:
    """Get the (start, end) time window for a shift.

    Args:
        shift: Shift enum value or a raw shift label

    Returns:
        Tuple of start and end times; Morning's window for unknown shifts
    """
    try:
        return SHIFT_WINDOWS[Shift(shift)]
    except ValueError:
        return SHIFT_WINDOWS[DEFAULT_SHIFT]


def get_shift_time_range(shift: Shift | str) -> str:
    """Get time range string for a shift (e.g., '08:00-12:00')."""
    start, end = get_shift_window(shift)
    return f"{start.strftime('%H:%M')}-{end.strftime('%H:%M')}"
