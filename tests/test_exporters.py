"""Tests for schedule result exporters."""

import csv
import json

import pandas as pd
import pytest

from course_scheduler.exporters import (
    CSVExporter,
    ExcelExporter,
    JSONExporter,
    get_exporter,
)
from course_scheduler.scheduler.models import Competency, ScheduleResult
from course_scheduler.scheduler.scheduler import CourseScheduler


@pytest.fixture
def result_with_conflict(repository):
    """Schedule result with two allocations and one conflict."""
    repository.competencies[1].append(
        Competency(id=11, name="Safety", hours=4, order=2)
    )
    return CourseScheduler(repository).schedule_course(1)


class TestJSONExporter:
    """Tests for JSONExporter."""

    def test_export(self, tmp_path, result_with_conflict):
        output = tmp_path / "out" / "schedule.json"
        JSONExporter().export(result_with_conflict, output)

        with open(output, encoding="utf-8") as f:
            data = json.load(f)
        assert data["sessions_total"] == 3
        assert data["sessions_allocated"] == 2
        assert data["conflicts"] == ["No instructor available for: Safety"]
        assert data["conflict_records"][0]["instructor_id"] is None

    def test_export_rejected_result(self, tmp_path):
        output = tmp_path / "rejected.json"
        JSONExporter().export(ScheduleResult.rejected(9, "Course not found: 9"), output)

        with open(output, encoding="utf-8") as f:
            data = json.load(f)
        assert data["accepted"] is False
        assert data["allocation_rate"] == 0.0


class TestCSVExporter:
    """Tests for CSVExporter."""

    def test_export_creates_files(self, tmp_path, result_with_conflict):
        CSVExporter().export(result_with_conflict, tmp_path / "csv")

        with open(tmp_path / "csv" / "entries.csv", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 2
        assert rows[0]["instructor_id"] == "100"
        assert (tmp_path / "csv" / "conflicts.csv").exists()
        assert (tmp_path / "csv" / "summary.csv").exists()

    def test_no_conflicts_file_when_empty(self, tmp_path, repository):
        result = CourseScheduler(repository).schedule_course(1)
        CSVExporter().export(result, tmp_path)
        assert not (tmp_path / "conflicts.csv").exists()


class TestExcelExporter:
    """Tests for ExcelExporter."""

    def test_export_sheets(self, tmp_path, result_with_conflict):
        output = tmp_path / "schedule.xlsx"
        ExcelExporter().export(result_with_conflict, output)

        sheets = pd.read_excel(output, sheet_name=None)
        assert set(sheets) == {"Schedule", "Conflicts", "Summary", "Warnings"}
        assert len(sheets["Schedule"]) == 2
        assert list(sheets["Schedule"]["Instructor"]) == [100, 100]
        assert sheets["Conflicts"]["Type"].tolist() == ["no_instructor"]

    def test_export_empty_result(self, tmp_path):
        output = tmp_path / "empty.xlsx"
        ExcelExporter().export(ScheduleResult(accepted=True, course_id=1), output)

        sheets = pd.read_excel(output, sheet_name=None)
        assert sheets["Schedule"].empty
        assert list(sheets["Schedule"].columns) == [
            "Date",
            "Start",
            "End",
            "Competency",
            "Instructor",
            "Status",
        ]


class TestGetExporter:
    """Tests for get_exporter function."""

    def test_known_formats(self):
        assert isinstance(get_exporter("json"), JSONExporter)
        assert isinstance(get_exporter("csv"), CSVExporter)
        assert isinstance(get_exporter("excel"), ExcelExporter)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_exporter("pdf")
