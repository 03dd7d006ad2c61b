"""Existing schedule (agenda) and conflict record loader."""

import json
from pathlib import Path
from typing import Any

from ...exceptions import InvalidInputError
from ..models import ConflictRecord, ConflictType, ScheduleEntry, ScheduleStatus
from ..utils import parse_date, parse_time


class AgendaConfig:
    """Loader for already committed schedule entries and conflicts."""

    def __init__(
        self,
        agenda_path: Path | None = None,
        conflicts_path: Path | None = None,
    ):
        self.entries: list[ScheduleEntry] = []
        self.conflicts: list[ConflictRecord] = []

        if agenda_path and agenda_path.exists():
            with open(agenda_path, encoding="utf-8") as f:
                self.entries = [parse_entry(e) for e in json.load(f)]
        if conflicts_path and conflicts_path.exists():
            with open(conflicts_path, encoding="utf-8") as f:
                self.conflicts = [parse_conflict(c) for c in json.load(f)]


def parse_entry(entry: dict[str, Any]) -> ScheduleEntry:
    """Create a ScheduleEntry from a JSON record."""
    try:
        status = ScheduleStatus(entry.get("status", "scheduled"))
    except ValueError as e:
        raise InvalidInputError(f"unknown status '{entry.get('status')}'", "status") from e

    return ScheduleEntry(
        instructor_id=int(entry["instructor_id"]),
        course_id=int(entry["course_id"]),
        competency_id=int(entry["competency_id"]),
        date=parse_date(entry["date"]),
        start=parse_time(entry["start"], "start"),
        end=parse_time(entry["end"], "end"),
        status=status,
    )


def parse_conflict(entry: dict[str, Any]) -> ConflictRecord:
    """Create a ConflictRecord from a JSON record."""
    instructor_id = entry.get("instructor_id")
    return ConflictRecord(
        instructor_id=int(instructor_id) if instructor_id is not None else None,
        course_id=int(entry["course_id"]),
        competency_id=int(entry["competency_id"]),
        date=parse_date(entry["date"]),
        start=parse_time(entry["start"], "start"),
        end=parse_time(entry["end"], "end"),
        conflict_type=ConflictType(entry.get("conflict_type", "overlap")),
        description=entry.get("description", ""),
    )
