"""Tests for data directory loading."""

import json
from datetime import date, time

import pytest

from course_scheduler.exceptions import InvalidInputError
from course_scheduler.scheduler.config import DataLoader
from course_scheduler.scheduler.config.agenda import parse_conflict, parse_entry
from course_scheduler.scheduler.config.courses import parse_course
from course_scheduler.scheduler.models import (
    ConflictType,
    ProficiencyLevel,
    ScheduleStatus,
    Shift,
    Weekday,
)
from course_scheduler.scheduler.repository import InMemoryRepository, JSONRepository
from course_scheduler.scheduler.scheduler import CourseScheduler


def _write_malformed_course(data_dir):
    """Append a course with an unknown weekday label to courses.json."""
    with open(data_dir / "courses.json", encoding="utf-8") as f:
        courses = json.load(f)
    courses.append(
        {
            "id": 3,
            "name": "Broken Course",
            "start_date": "2024-03-01",
            "end_date": "2024-03-31",
            "weekdays": "Funday",
        }
    )
    with open(data_dir / "courses.json", "w", encoding="utf-8") as f:
        json.dump(courses, f)


class TestDataLoader:
    """Tests for DataLoader class."""

    def test_loads_courses(self, data_dir):
        loader = DataLoader(data_dir)
        course = loader.courses.get_course(1)

        assert course.start_date == date(2024, 1, 1)
        assert course.weekdays == {Weekday.MONDAY, Weekday.WEDNESDAY}
        assert course.shift == Shift.MORNING

    def test_loads_course_competencies(self, data_dir):
        loader = DataLoader(data_dir)
        competencies = loader.courses.get_competencies(1)

        assert [c.id for c in competencies] == [11, 10]
        assert [c.order for c in competencies] == [2, 1]
        assert competencies[0].hours == 10

    def test_loads_instructors(self, data_dir):
        loader = DataLoader(data_dir)
        basic = loader.instructors.get_instructor(200)
        inactive = loader.instructors.get_instructor(300)

        assert basic.active
        assert basic.proficiency_for(10) == ProficiencyLevel.BASIC
        assert not inactive.active
        assert inactive.proficiency_for(11) == ProficiencyLevel.EXPERT

    def test_missing_files_mean_empty_data(self, tmp_path):
        loader = DataLoader(tmp_path)
        assert loader.courses.courses == {}
        assert loader.instructors.instructors == []
        assert loader.agenda.entries == []

    def test_unknown_competency_link_raises(self, data_dir):
        with open(data_dir / "course-competencies.json", "w", encoding="utf-8") as f:
            json.dump([{"course_id": 1, "competency_id": 77, "order": 1}], f)
        with pytest.raises(InvalidInputError):
            DataLoader(data_dir)

    def test_build_repository(self, data_dir):
        loader = DataLoader(data_dir)
        assert isinstance(loader.build_repository(), JSONRepository)
        repository = loader.build_repository(persist=False)
        assert type(repository) is InMemoryRepository
        assert [c.id for c in repository.fetch_competencies(1)] == [10, 11]

    def test_schedule_from_data_dir_persists_agenda(self, data_dir):
        repository = DataLoader(data_dir).build_repository()
        result = CourseScheduler(repository).schedule_course(1)

        assert result.sessions_total == 5
        assert result.sessions_allocated == 5
        assert [e.competency_id for e in result.entries] == [10, 10, 11, 11, 11]
        assert {e.instructor_id for e in result.entries} == {100}

        reloaded = DataLoader(data_dir)
        assert reloaded.agenda.entries == result.entries

    def test_reloaded_agenda_blocks_second_course(self, data_dir):
        CourseScheduler(DataLoader(data_dir).build_repository()).schedule_course(1)

        loader = DataLoader(data_dir)
        repository = loader.build_repository(persist=False)
        assert not repository.is_instructor_available(
            100, date(2024, 1, 1), time(10), time(11)
        )

    def test_validate_reports_issues(self, data_dir):
        issues = DataLoader(data_dir).validate()
        assert "Course 2 (Empty Course) has no competencies" in issues

    def test_validate_clean_data(self, data_dir):
        with open(data_dir / "courses.json", encoding="utf-8") as f:
            courses = json.load(f)
        with open(data_dir / "courses.json", "w", encoding="utf-8") as f:
            json.dump(courses[:1], f)
        assert DataLoader(data_dir).validate() == []

    def test_malformed_course_is_skipped(self, data_dir):
        _write_malformed_course(data_dir)
        loader = DataLoader(data_dir)

        assert set(loader.courses.courses) == {1, 2}
        assert isinstance(loader.courses.errors[3], InvalidInputError)
        assert loader.courses.get_course(3) is None

    def test_malformed_course_does_not_block_others(self, data_dir):
        _write_malformed_course(data_dir)
        repository = DataLoader(data_dir).build_repository(persist=False)
        scheduler = CourseScheduler(repository)

        assert scheduler.schedule_course(1).sessions_allocated == 5
        rejected = scheduler.schedule_course(3)
        assert not rejected.accepted
        assert "Course not found" in rejected.message

    def test_validate_reports_malformed_course(self, data_dir):
        _write_malformed_course(data_dir)
        issues = DataLoader(data_dir).validate()

        assert any(
            issue.startswith("Course 3 could not be loaded") and "Funday" in issue
            for issue in issues
        )


class TestParseRecords:
    """Tests for JSON record parsing."""

    def test_parse_course_defaults_shift(self):
        course = parse_course(
            {"id": 5, "start_date": "2024-01-01", "end_date": "2024-01-31", "weekdays": [1]}
        )
        assert course.shift == Shift.MORNING
        assert course.name == "Course 5"

    def test_parse_course_keeps_unknown_shift(self):
        course = parse_course(
            {
                "id": 5,
                "start_date": "2024-01-01",
                "end_date": "2024-01-31",
                "weekdays": "Sexta",
                "shift": "Integral",
            }
        )
        assert course.shift == "Integral"

    def test_parse_course_without_weekdays(self):
        with pytest.raises(InvalidInputError):
            parse_course({"id": 5, "start_date": "2024-01-01", "end_date": "2024-01-31"})

    def test_parse_entry(self):
        entry = parse_entry(
            {
                "instructor_id": 1,
                "course_id": 2,
                "competency_id": 3,
                "date": "2024-01-01",
                "start": "08:00:00",
                "end": "12:00:00",
                "status": "cancelled",
            }
        )
        assert entry.start == time(8)
        assert entry.status == ScheduleStatus.CANCELLED
        assert not entry.is_active

    def test_parse_entry_unknown_status(self):
        with pytest.raises(InvalidInputError):
            parse_entry(
                {
                    "instructor_id": 1,
                    "course_id": 2,
                    "competency_id": 3,
                    "date": "2024-01-01",
                    "start": "08:00",
                    "end": "12:00",
                    "status": "postponed",
                }
            )

    def test_parse_conflict_without_instructor(self):
        record = parse_conflict(
            {
                "instructor_id": None,
                "course_id": 2,
                "competency_id": 3,
                "date": "2024-01-01",
                "start": "08:00",
                "end": "12:00",
                "conflict_type": "no_instructor",
            }
        )
        assert record.instructor_id is None
        assert record.conflict_type == ConflictType.NO_INSTRUCTOR
