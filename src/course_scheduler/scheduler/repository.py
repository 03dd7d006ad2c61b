"""Persistence collaborators used by the scheduler.

The scheduler never stores anything itself. It reads courses, competencies,
instructors and the existing schedule through a ScheduleRepository and
hands every decision back to it as soon as the decision is made.
Implementations must make each committed entry visible to the next
``is_instructor_available`` call of the same run.
"""

import json
from abc import ABC, abstractmethod
from datetime import date, time
from pathlib import Path

from .models import (
    Competency,
    ConflictRecord,
    Course,
    Instructor,
    ScheduleEntry,
)
from .utils import rank_candidates, windows_overlap


class ScheduleRepository(ABC):
    """Interface to the storage holding scheduling records."""

    @abstractmethod
    def fetch_course(self, course_id: int) -> Course | None:
        """Get a course by id, or None if it does not exist."""
        pass

    @abstractmethod
    def fetch_competencies(self, course_id: int) -> list[Competency]:
        """Get the competencies of a course ordered by their order key."""
        pass

    @abstractmethod
    def fetch_qualified_instructors(self, competency_id: int) -> list[Instructor]:
        """Get active instructors qualified for a competency, best level first."""
        pass

    @abstractmethod
    def is_instructor_available(
        self, instructor_id: int, day: date, start: time, end: time
    ) -> bool:
        """Check that no active entry of the instructor overlaps the window."""
        pass

    @abstractmethod
    def commit_schedule_entry(self, entry: ScheduleEntry) -> bool:
        """Store a schedule entry. Returns True on success."""
        pass

    @abstractmethod
    def commit_conflict_record(self, record: ConflictRecord) -> bool:
        """Store a conflict record. Returns True on success."""
        pass


class InMemoryRepository(ScheduleRepository):
    """Repository keeping all records in Python lists and dictionaries."""

    def __init__(
        self,
        courses: list[Course] | None = None,
        competencies: dict[int, list[Competency]] | None = None,
        instructors: list[Instructor] | None = None,
        entries: list[ScheduleEntry] | None = None,
        conflicts: list[ConflictRecord] | None = None,
    ):
        """
        Initialize the repository.

        Args:
            courses: Known courses.
            competencies: Course id -> competencies of that course.
            instructors: Instructor pool, in natural order.
            entries: Existing schedule entries (including cancelled ones).
            conflicts: Existing conflict records.
        """
        self.courses: dict[int, Course] = {c.id: c for c in courses or []}
        self.competencies: dict[int, list[Competency]] = dict(competencies or {})
        self.instructors: list[Instructor] = list(instructors or [])
        self.entries: list[ScheduleEntry] = list(entries or [])
        self.conflicts: list[ConflictRecord] = list(conflicts or [])

    def fetch_course(self, course_id: int) -> Course | None:
        return self.courses.get(course_id)

    def fetch_competencies(self, course_id: int) -> list[Competency]:
        return sorted(self.competencies.get(course_id, []), key=lambda c: c.order)

    def fetch_qualified_instructors(self, competency_id: int) -> list[Instructor]:
        return rank_candidates(self.instructors, competency_id)

    def is_instructor_available(
        self, instructor_id: int, day: date, start: time, end: time
    ) -> bool:
        for entry in self.entries:
            if entry.instructor_id != instructor_id or entry.date != day:
                continue
            if not entry.is_active:
                continue
            if windows_overlap(entry.start, entry.end, start, end):
                return False
        return True

    def commit_schedule_entry(self, entry: ScheduleEntry) -> bool:
        self.entries.append(entry)
        return True

    def commit_conflict_record(self, record: ConflictRecord) -> bool:
        self.conflicts.append(record)
        return True

    def entries_for_course(self, course_id: int) -> list[ScheduleEntry]:
        """Get committed entries of a course in commit order."""
        return [e for e in self.entries if e.course_id == course_id]


class JSONRepository(InMemoryRepository):
    """In-memory repository that also writes the agenda and conflicts to JSON.

    Both files are rewritten after every commit, so the decisions made before
    a failed run are already on disk.
    """

    def __init__(self, agenda_path: Path, conflicts_path: Path, **kwargs):
        super().__init__(**kwargs)
        self.agenda_path = Path(agenda_path)
        self.conflicts_path = Path(conflicts_path)

    def commit_schedule_entry(self, entry: ScheduleEntry) -> bool:
        super().commit_schedule_entry(entry)
        self._write(self.agenda_path, [e.to_dict() for e in self.entries])
        return True

    def commit_conflict_record(self, record: ConflictRecord) -> bool:
        super().commit_conflict_record(record)
        self._write(self.conflicts_path, [c.to_dict() for c in self.conflicts])
        return True

    def _write(self, path: Path, rows: list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
