"""Data models for the course scheduling system."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any


class Weekday(Enum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class Shift(str, Enum):
    """Daily time band a course meets in."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class ProficiencyLevel(str, Enum):
    """Instructor qualification tier for a competency.

    Levels are ranked explicitly; a lower rank is tried first during
    allocation. Never compare levels by their string values.
    """

    EXPERT = "expert"
    ADVANCED = "advanced"
    INTERMEDIATE = "intermediate"
    BASIC = "basic"

    @property
    def rank(self) -> int:
        return _PROFICIENCY_RANKS[self]


_PROFICIENCY_RANKS = {
    ProficiencyLevel.EXPERT: 1,
    ProficiencyLevel.ADVANCED: 2,
    ProficiencyLevel.INTERMEDIATE: 3,
    ProficiencyLevel.BASIC: 4,
}


class ScheduleStatus(str, Enum):
    """Status of a committed schedule entry."""

    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"


class ConflictType(str, Enum):
    """Reasons why a session could not be allocated."""

    NO_INSTRUCTOR = "no_instructor"
    OVERLAP = "overlap"


@dataclass(frozen=True)
class Course:
    """A course to be scheduled."""

    id: int
    name: str
    start_date: date
    end_date: date
    weekdays: frozenset[Weekday]
    shift: Shift | str = Shift.MORNING

    def to_dict(self) -> dict[str, Any]:
        """Convert course to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "weekdays": [d.name.lower() for d in sorted(self.weekdays, key=lambda d: d.value)],
            "shift": self.shift.value if isinstance(self.shift, Shift) else self.shift,
        }


@dataclass(frozen=True)
class Competency:
    """A competency (subject) taught in a course."""

    id: int
    name: str
    hours: int
    order: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert competency to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "hours": self.hours,
            "order": self.order,
        }


@dataclass(frozen=True)
class LessonSlot:
    """A calendar day on which the course meets."""

    date: date
    shift: Shift | str


@dataclass(frozen=True)
class Session:
    """One teaching block of a competency bound to a date and time window."""

    course_id: int
    competency_id: int
    competency_name: str
    date: date
    start: time
    end: time

    def to_dict(self) -> dict[str, Any]:
        """Convert session to dictionary."""
        return {
            "course_id": self.course_id,
            "competency_id": self.competency_id,
            "competency": self.competency_name,
            "date": self.date.isoformat(),
            "start": self.start.strftime("%H:%M"),
            "end": self.end.strftime("%H:%M"),
        }


@dataclass(frozen=True)
class Instructor:
    """An instructor and the competencies they are qualified to teach."""

    id: int
    name: str
    active: bool = True
    # dicts are unhashable, so qualifications stay out of __hash__
    qualifications: dict[int, ProficiencyLevel] = field(
        default_factory=dict, hash=False
    )

    def proficiency_for(self, competency_id: int) -> ProficiencyLevel | None:
        """Get the instructor's level for a competency, if qualified."""
        return self.qualifications.get(competency_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert instructor to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "status": "active" if self.active else "inactive",
            "qualifications": [
                {"competency_id": competency_id, "level": level.value}
                for competency_id, level in self.qualifications.items()
            ],
        }


@dataclass(frozen=True)
class ScheduleEntry:
    """An instructor committed to a session."""

    instructor_id: int
    course_id: int
    competency_id: int
    date: date
    start: time
    end: time
    status: ScheduleStatus = ScheduleStatus.SCHEDULED

    @classmethod
    def for_session(cls, instructor_id: int, session: Session) -> "ScheduleEntry":
        """Create a scheduled entry allocating an instructor to a session."""
        return cls(
            instructor_id=instructor_id,
            course_id=session.course_id,
            competency_id=session.competency_id,
            date=session.date,
            start=session.start,
            end=session.end,
        )

    @property
    def is_active(self) -> bool:
        """Whether the entry blocks the instructor's time."""
        return self.status != ScheduleStatus.CANCELLED

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "instructor_id": self.instructor_id,
            "course_id": self.course_id,
            "competency_id": self.competency_id,
            "date": self.date.isoformat(),
            "start": self.start.strftime("%H:%M"),
            "end": self.end.strftime("%H:%M"),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ConflictRecord:
    """A session that could not be allocated to any available instructor."""

    instructor_id: int | None
    course_id: int
    competency_id: int
    date: date
    start: time
    end: time
    conflict_type: ConflictType
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Convert conflict record to dictionary."""
        return {
            "instructor_id": self.instructor_id,
            "course_id": self.course_id,
            "competency_id": self.competency_id,
            "date": self.date.isoformat(),
            "start": self.start.strftime("%H:%M"),
            "end": self.end.strftime("%H:%M"),
            "conflict_type": self.conflict_type.value,
            "description": self.description,
        }


@dataclass
class PlanResult:
    """Sessions planned for a course and how much of the calendar they used."""

    sessions: list[Session] = field(default_factory=list)
    unused_slots: int = 0
    sessions_expected: int = 0
    # competency id -> sessions that did not fit in the calendar
    shortfall: dict[int, int] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """Whether every competency received all of its sessions."""
        return not self.shortfall


@dataclass
class AllocationResult:
    """Outcome of allocating instructors to a list of sessions."""

    sessions_considered: int = 0
    entries: list[ScheduleEntry] = field(default_factory=list)
    conflict_records: tuple[ConflictRecord, ...] = ()
    conflicts: tuple[str, ...] = ()

    @property
    def sessions_allocated(self) -> int:
        """Number of sessions that received an instructor."""
        return len(self.entries)


@dataclass
class ScheduleResult:
    """Result of scheduling one course."""

    accepted: bool
    course_id: int
    message: str = ""
    sessions_total: int = 0
    sessions_allocated: int = 0
    sessions_expected: int = 0
    unused_slots: int = 0
    conflicts: list[str] = field(default_factory=list)
    entries: list[ScheduleEntry] = field(default_factory=list)
    conflict_records: list[ConflictRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def rejected(cls, course_id: int, message: str) -> "ScheduleResult":
        """Create a result for a run that could not start."""
        return cls(accepted=False, course_id=course_id, message=message)

    @property
    def total_conflicts(self) -> int:
        """Number of sessions left without an instructor."""
        return len(self.conflicts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generation_date": self.generation_date,
            "accepted": self.accepted,
            "course_id": self.course_id,
            "message": self.message,
            "sessions_total": self.sessions_total,
            "sessions_allocated": self.sessions_allocated,
            "sessions_expected": self.sessions_expected,
            "unused_slots": self.unused_slots,
            "allocation_rate": (
                self.sessions_allocated / self.sessions_total
                if self.sessions_total > 0
                else 0.0
            ),
            "conflicts": self.conflicts,
            "entries": [e.to_dict() for e in self.entries],
            "conflict_records": [c.to_dict() for c in self.conflict_records],
            "warnings": self.warnings,
        }
