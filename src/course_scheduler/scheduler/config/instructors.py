"""Instructor configuration loader."""

import json
from pathlib import Path
from typing import Any

from ..models import Instructor
from ..normalization import is_active_status, normalize_proficiency


class InstructorConfig:
    """Loader for instructors and their competency qualifications."""

    def __init__(self, instructors_path: Path | None = None):
        # Instructors in file order; that order breaks ties between equal levels
        self.instructors: list[Instructor] = []

        if instructors_path and instructors_path.exists():
            self._load(instructors_path)

    def _load(self, path: Path) -> None:
        """Load instructors from JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        for entry in data:
            self.instructors.append(parse_instructor(entry))

    def get_instructor(self, instructor_id: int) -> Instructor | None:
        """Get an instructor by id."""
        for instructor in self.instructors:
            if instructor.id == instructor_id:
                return instructor
        return None

    def get_referenced_competencies(self) -> set[int]:
        """Get ids of all competencies some instructor is qualified for."""
        return {
            competency_id
            for instructor in self.instructors
            for competency_id in instructor.qualifications
        }


def parse_instructor(entry: dict[str, Any]) -> Instructor:
    """Create an Instructor from a JSON record.

    Qualifications may be a list of ``{"competency_id", "level"}`` objects or
    a mapping of competency id to level.
    """
    raw = entry.get("qualifications", [])
    if isinstance(raw, dict):
        pairs = raw.items()
    else:
        pairs = ((q["competency_id"], q["level"]) for q in raw)

    instructor_id = int(entry["id"])
    return Instructor(
        id=instructor_id,
        name=entry.get("name", f"Instructor {instructor_id}"),
        active=is_active_status(entry.get("status", "active")),
        qualifications={
            int(competency_id): normalize_proficiency(level)
            for competency_id, level in pairs
        },
    )
