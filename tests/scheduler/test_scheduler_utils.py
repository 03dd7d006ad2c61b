"""Tests for scheduler utility functions."""

from datetime import date, datetime, time

import pytest

from course_scheduler.exceptions import InvalidInputError
from course_scheduler.scheduler.constants import get_shift_time_range, get_shift_window
from course_scheduler.scheduler.models import (
    Competency,
    Instructor,
    ProficiencyLevel,
    Shift,
)
from course_scheduler.scheduler.utils import (
    parse_date,
    parse_time,
    rank_candidates,
    required_sessions,
    sort_competencies,
    windows_overlap,
)


class TestRequiredSessions:
    """Tests for required_sessions function."""

    def test_ten_hours(self):
        assert required_sessions(10) == 3

    def test_exact_multiple(self):
        assert required_sessions(8) == 2

    def test_one_hour(self):
        assert required_sessions(1) == 1

    def test_zero_hours(self):
        assert required_sessions(0) == 0

    def test_custom_block(self):
        assert required_sessions(10, block_hours=5) == 2


class TestWindowsOverlap:
    """Tests for windows_overlap function."""

    def test_partial_overlap(self):
        assert windows_overlap(time(9), time(11), time(10), time(12))

    def test_adjacent(self):
        assert not windows_overlap(time(9), time(11), time(8), time(9))

    def test_contained(self):
        assert windows_overlap(time(9), time(11), time(9, 30), time(10, 30))

    def test_containing(self):
        assert windows_overlap(time(9, 30), time(10, 30), time(9), time(11))

    def test_disjoint(self):
        assert not windows_overlap(time(8), time(12), time(13), time(17))


class TestRankCandidates:
    """Tests for rank_candidates function."""

    def test_orders_by_rank_not_alphabet(self):
        instructors = [
            Instructor(1, "a", qualifications={5: ProficiencyLevel.INTERMEDIATE}),
            Instructor(2, "b", qualifications={5: ProficiencyLevel.BASIC}),
            Instructor(3, "c", qualifications={5: ProficiencyLevel.ADVANCED}),
            Instructor(4, "d", qualifications={5: ProficiencyLevel.EXPERT}),
        ]
        assert [i.id for i in rank_candidates(instructors, 5)] == [4, 3, 1, 2]

    def test_filters_unqualified_and_inactive(self):
        instructors = [
            Instructor(1, "a", qualifications={6: ProficiencyLevel.EXPERT}),
            Instructor(2, "b", active=False, qualifications={5: ProficiencyLevel.EXPERT}),
            Instructor(3, "c", qualifications={5: ProficiencyLevel.BASIC}),
        ]
        assert [i.id for i in rank_candidates(instructors, 5)] == [3]


class TestSortCompetencies:
    """Tests for sort_competencies function."""

    def test_stable_for_equal_order(self):
        competencies = [
            Competency(1, "x", 4, order=3),
            Competency(2, "y", 4, order=1),
            Competency(3, "z", 4, order=3),
        ]
        assert [c.id for c in sort_competencies(competencies)] == [2, 1, 3]


class TestParsing:
    """Tests for date and time parsing."""

    def test_parse_date_string(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_parse_date_datetime(self):
        assert parse_date(datetime(2024, 1, 15, 10, 30)) == date(2024, 1, 15)

    def test_parse_date_invalid(self):
        with pytest.raises(InvalidInputError, match="start_date"):
            parse_date("15/01/2024", "start_date")

    def test_parse_time_short(self):
        assert parse_time("18:30") == time(18, 30)

    def test_parse_time_with_seconds(self):
        assert parse_time("08:00:00") == time(8)

    def test_parse_time_invalid(self):
        with pytest.raises(InvalidInputError):
            parse_time("8 am")


class TestShiftWindows:
    """Tests for shift time window lookup."""

    def test_known_shifts(self):
        assert get_shift_window(Shift.AFTERNOON) == (time(13), time(17))
        assert get_shift_window("evening") == (time(18, 30), time(22, 30))

    def test_unknown_shift_defaults_to_morning(self):
        assert get_shift_window("Integral") == (time(8), time(12))

    def test_time_range_string(self):
        assert get_shift_time_range(Shift.EVENING) == "18:30-22:30"
