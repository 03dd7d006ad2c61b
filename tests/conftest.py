"""Test fixtures for course scheduler tests."""

import json
from datetime import date, time

import pytest

from course_scheduler.scheduler.models import (
    Competency,
    Course,
    Instructor,
    ProficiencyLevel,
    ScheduleEntry,
    Shift,
    Weekday,
)
from course_scheduler.scheduler.repository import InMemoryRepository


@pytest.fixture
def mon_wed_course():
    """Course meeting Mon/Wed mornings from 2024-01-01 to 2024-01-15 (5 lesson days)."""
    return Course(
        id=1,
        name="Industrial Electrician",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 15),
        weekdays=frozenset({Weekday.MONDAY, Weekday.WEDNESDAY}),
        shift=Shift.MORNING,
    )


@pytest.fixture
def wiring_competency():
    """Competency requiring 8 hours (2 sessions)."""
    return Competency(id=10, name="Electrical Wiring", hours=8, order=1)


@pytest.fixture
def expert_and_basic():
    """Two instructors qualified for competency 10, basic listed first."""
    return [
        Instructor(
            id=200,
            name="Bruno Basic",
            qualifications={10: ProficiencyLevel.BASIC},
        ),
        Instructor(
            id=100,
            name="Erika Expert",
            qualifications={10: ProficiencyLevel.EXPERT},
        ),
    ]


@pytest.fixture
def repository(mon_wed_course, wiring_competency, expert_and_basic):
    """Repository with one course, one competency and two free instructors."""
    return InMemoryRepository(
        courses=[mon_wed_course],
        competencies={1: [wiring_competency]},
        instructors=expert_and_basic,
    )


@pytest.fixture
def busy_entry():
    """Existing entry occupying instructor 100 on 2024-01-01 09:00-11:00."""
    return ScheduleEntry(
        instructor_id=100,
        course_id=99,
        competency_id=10,
        date=date(2024, 1, 1),
        start=time(9, 0),
        end=time(11, 0),
    )


@pytest.fixture
def data_dir(tmp_path):
    """Create a data directory with courses, competencies and instructors."""
    files = {
        "courses.json": [
            {
                "id": 1,
                "name": "Eletricista Industrial",
                "start_date": "2024-01-01",
                "end_date": "2024-01-15",
                "weekdays": "Segunda,Quarta",
                "shift": "Manhã",
            },
            {
                "id": 2,
                "name": "Empty Course",
                "start_date": "2024-02-01",
                "end_date": "2024-02-28",
                "weekdays": ["tuesday"],
                "shift": "evening",
            },
        ],
        "competencies.json": [
            {"id": 10, "name": "Electrical Wiring", "hours": 8},
            {"id": 11, "name": "Safety Standards", "hours": 10},
        ],
        "course-competencies.json": [
            {"course_id": 1, "competency_id": 11, "order": 2},
            {"course_id": 1, "competency_id": 10, "order": 1},
        ],
        "instructors.json": [
            {
                "id": 200,
                "name": "Bruno Basic",
                "status": "ativo",
                "qualifications": [{"competency_id": 10, "level": "básico"}],
            },
            {
                "id": 100,
                "name": "Erika Expert",
                "status": "active",
                "qualifications": [
                    {"competency_id": 10, "level": "expert"},
                    {"competency_id": 11, "level": "avançado"},
                ],
            },
            {
                "id": 300,
                "name": "Ivo Inactive",
                "status": "inativo",
                "qualifications": {"11": "expert"},
            },
        ],
    }
    for filename, content in files.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            json.dump(content, f, ensure_ascii=False)
    return tmp_path
