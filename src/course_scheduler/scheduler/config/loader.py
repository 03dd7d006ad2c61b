"""Unified data loader."""

from pathlib import Path

from ..constants import DEFAULT_DATA_DIR
from ..repository import InMemoryRepository, JSONRepository
from .agenda import AgendaConfig
from .courses import CourseConfig
from .instructors import InstructorConfig

AGENDA_FILE = "agenda.json"
CONFLICTS_FILE = "conflicts.json"


class DataLoader:
    """Unified loader for all scheduling data files."""

    def __init__(self, data_dir: Path | None = None):
        """
        Initialize data loader.

        Args:
            data_dir: Path to directory containing data files.
                     Expected files (all optional):
                     - courses.json
                     - competencies.json
                     - course-competencies.json
                     - instructors.json
                     - agenda.json
                     - conflicts.json
                     Defaults to 'data/'.
        """
        if data_dir is None:
            data_dir = Path(DEFAULT_DATA_DIR)

        self.data_dir = Path(data_dir)

        self.courses = CourseConfig(
            courses_path=self._get_path("courses.json"),
            competencies_path=self._get_path("competencies.json"),
            links_path=self._get_path("course-competencies.json"),
        )
        self.instructors = InstructorConfig(self._get_path("instructors.json"))
        self.agenda = AgendaConfig(
            agenda_path=self._get_path(AGENDA_FILE),
            conflicts_path=self._get_path(CONFLICTS_FILE),
        )

    def _get_path(self, filename: str) -> Path | None:
        """Get path to data file if it exists."""
        path = self.data_dir / filename
        return path if path.exists() else None

    def build_repository(self, persist: bool = True) -> InMemoryRepository:
        """
        Create a repository holding the loaded data.

        Args:
            persist: If True, commits are written back to agenda.json and
                     conflicts.json in the data directory.
        """
        kwargs = dict(
            courses=list(self.courses.courses.values()),
            competencies=self.courses.course_competencies,
            instructors=self.instructors.instructors,
            entries=self.agenda.entries,
            conflicts=self.agenda.conflicts,
        )
        if not persist:
            return InMemoryRepository(**kwargs)
        return JSONRepository(
            agenda_path=self.data_dir / AGENDA_FILE,
            conflicts_path=self.data_dir / CONFLICTS_FILE,
            **kwargs,
        )

    def validate(self) -> list[str]:
        """
        Check the loaded data for problems that would hurt scheduling.

        Returns:
            List of human-readable issues; empty when the data looks fine.
        """
        issues = []
        known_competencies = self.courses.get_competency_ids()

        for course_id, error in self.courses.errors.items():
            issues.append(f"Course {course_id} could not be loaded: {error}")

        for course in self.courses.courses.values():
            if not self.courses.get_competencies(course.id):
                issues.append(f"Course {course.id} ({course.name}) has no competencies")
            if course.start_date > course.end_date:
                issues.append(
                    f"Course {course.id} ({course.name}) ends before it starts"
                )

        loaded_or_failed = set(self.courses.courses) | set(self.courses.errors)
        for course_id in self.courses.course_competencies:
            if course_id not in loaded_or_failed:
                issues.append(f"Competencies linked to unknown course {course_id}")

        for instructor in self.instructors.instructors:
            for competency_id in instructor.qualifications:
                if competency_id not in known_competencies:
                    issues.append(
                        f"Instructor {instructor.id} ({instructor.name}) is qualified "
                        f"for unknown competency {competency_id}"
                    )

        qualified = self.instructors.get_referenced_competencies()
        for competency_id in sorted(known_competencies - qualified):
            issues.append(f"No instructor is qualified for competency {competency_id}")

        return issues
