"""Data loaders for the scheduler."""

from .agenda import AgendaConfig
from .courses import CourseConfig
from .instructors import InstructorConfig
from .loader import DataLoader

__all__ = [
    "DataLoader",
    "CourseConfig",
    "InstructorConfig",
    "AgendaConfig",
]
