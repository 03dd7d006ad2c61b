"""Course and competency configuration loader."""

import json
import logging
from pathlib import Path
from typing import Any

from ...exceptions import InvalidInputError
from ..models import Competency, Course, Shift
from ..normalization import normalize_shift, parse_weekdays
from ..utils import parse_date

logger = logging.getLogger(__name__)


class CourseConfig:
    """Loader for courses, competencies and their course links."""

    def __init__(
        self,
        courses_path: Path | None = None,
        competencies_path: Path | None = None,
        links_path: Path | None = None,
    ):
        self.courses: dict[int, Course] = {}
        # course id -> error for records that could not be parsed
        self.errors: dict[int, InvalidInputError] = {}
        # competency id -> {"name", "hours"}
        self._competencies: dict[int, dict[str, Any]] = {}
        # course id -> competencies in file order
        self.course_competencies: dict[int, list[Competency]] = {}

        if courses_path and courses_path.exists():
            self._load_courses(courses_path)
        if competencies_path and competencies_path.exists():
            self._load_competencies(competencies_path)
        if links_path and links_path.exists():
            self._load_links(links_path)

    def _load_courses(self, path: Path) -> None:
        """Load courses from JSON.

        Records with malformed dates or weekdays are skipped and kept in
        ``errors`` so the remaining courses stay usable.
        """
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        for entry in data:
            try:
                course = parse_course(entry)
            except InvalidInputError as e:
                course_id = int(entry["id"])
                logger.warning(f"Skipping course {course_id}: {e}")
                self.errors[course_id] = e
                continue
            self.courses[course.id] = course

    def _load_competencies(self, path: Path) -> None:
        """Load the competency catalogue from JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        for entry in data:
            competency_id = int(entry["id"])
            self._competencies[competency_id] = {
                "name": entry.get("name", f"Competency {competency_id}"),
                "hours": int(entry.get("hours", 0)),
            }

    def _load_links(self, path: Path) -> None:
        """Load course → competency links (with order) from JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        for entry in data:
            course_id = int(entry["course_id"])
            competency_id = int(entry["competency_id"])
            info = self._competencies.get(competency_id)
            if info is None:
                raise InvalidInputError(
                    f"course {course_id} references unknown competency {competency_id}",
                    "course-competencies",
                )
            self.course_competencies.setdefault(course_id, []).append(
                Competency(
                    id=competency_id,
                    name=info["name"],
                    hours=info["hours"],
                    order=int(entry.get("order", 0)),
                )
            )

    def get_course(self, course_id: int) -> Course | None:
        """Get a course by id."""
        return self.courses.get(course_id)

    def get_competencies(self, course_id: int) -> list[Competency]:
        """Get competencies linked to a course, in file order."""
        return self.course_competencies.get(course_id, [])

    def get_competency_ids(self) -> set[int]:
        """Get ids of all competencies in the catalogue."""
        return set(self._competencies)


def parse_course(entry: dict[str, Any]) -> Course:
    """Create a Course from a JSON record.

    Raises:
        InvalidInputError: If dates or weekdays are malformed
    """
    course_id = int(entry["id"])
    return Course(
        id=course_id,
        name=entry.get("name", f"Course {course_id}"),
        start_date=parse_date(entry["start_date"], "start_date"),
        end_date=parse_date(entry["end_date"], "end_date"),
        weekdays=parse_weekdays(entry.get("weekdays", [])),
        shift=normalize_shift(entry.get("shift") or Shift.MORNING),
    )
