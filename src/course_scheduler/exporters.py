"""Export functionality for schedule results."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .scheduler.models import ScheduleResult


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to file.

        Args:
            result: ScheduleResult to export
            output_path: Path to output file or directory
        """
        pass


def _summary_rows(result: ScheduleResult) -> list[tuple[str, object]]:
    return [
        ("Course", result.course_id),
        ("Generation Date", result.generation_date),
        ("Accepted", result.accepted),
        ("Message", result.message),
        ("Sessions Expected", result.sessions_expected),
        ("Sessions Total", result.sessions_total),
        ("Sessions Allocated", result.sessions_allocated),
        ("Conflicts", result.total_conflicts),
        ("Unused Lesson Days", result.unused_slots),
    ]


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to JSON file.

        Args:
            result: ScheduleResult to export
            output_path: Path to output JSON file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                result.to_dict(),
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to CSV files.

        Creates three files:
        - entries.csv: Committed schedule entries
        - conflicts.csv: Conflict records
        - summary.csv: Run summary

        Args:
            result: ScheduleResult to export
            output_path: Path to output directory
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._write_csv(
            output_dir / "entries.csv", [e.to_dict() for e in result.entries]
        )
        self._write_csv(
            output_dir / "conflicts.csv",
            [c.to_dict() for c in result.conflict_records],
        )
        self._write_csv(
            output_dir / "summary.csv",
            [{"metric": m, "value": v} for m, v in _summary_rows(result)],
        )

    def _write_csv(self, output_path: Path, rows: list[dict]) -> None:
        """Write rows to CSV file."""
        if not rows:
            return

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=rows[0].keys())
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with multiple sheets)."""

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to Excel file.

        Creates workbook with sheets:
        - Schedule: Committed entries
        - Conflicts: Conflict records
        - Summary: Run summary
        - Warnings: Under-allocation warnings

        Args:
            result: ScheduleResult to export
            output_path: Path to output Excel file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_schedule_sheet(result, writer)
            self._export_conflicts_sheet(result, writer)
            self._export_summary_sheet(result, writer)
            self._export_warnings_sheet(result, writer)

    def _export_schedule_sheet(
        self, result: ScheduleResult, writer: pd.ExcelWriter
    ) -> None:
        """Export schedule entries to Excel sheet."""
        columns = ["Date", "Start", "End", "Competency", "Instructor", "Status"]
        rows = [
            {
                "Date": entry.date.isoformat(),
                "Start": entry.start.strftime("%H:%M"),
                "End": entry.end.strftime("%H:%M"),
                "Competency": entry.competency_id,
                "Instructor": entry.instructor_id,
                "Status": entry.status.value,
            }
            for entry in result.entries
        ]

        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(writer, sheet_name="Schedule", index=False)

    def _export_conflicts_sheet(
        self, result: ScheduleResult, writer: pd.ExcelWriter
    ) -> None:
        """Export conflict records to Excel sheet."""
        columns = ["Date", "Start", "End", "Competency", "Instructor", "Type", "Description"]
        rows = [
            {
                "Date": record.date.isoformat(),
                "Start": record.start.strftime("%H:%M"),
                "End": record.end.strftime("%H:%M"),
                "Competency": record.competency_id,
                "Instructor": record.instructor_id,
                "Type": record.conflict_type.value,
                "Description": record.description,
            }
            for record in result.conflict_records
        ]

        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(writer, sheet_name="Conflicts", index=False)

    def _export_summary_sheet(
        self, result: ScheduleResult, writer: pd.ExcelWriter
    ) -> None:
        """Export summary to Excel sheet."""
        rows = [{"Metric": m, "Value": v} for m, v in _summary_rows(result)]
        df = pd.DataFrame(rows)
        df.to_excel(writer, sheet_name="Summary", index=False)

    def _export_warnings_sheet(
        self, result: ScheduleResult, writer: pd.ExcelWriter
    ) -> None:
        """Export warnings to Excel sheet."""
        rows = [{"Warning": warning} for warning in result.warnings]
        df = pd.DataFrame(rows) if rows else pd.DataFrame(columns=["Warning"])
        df.to_excel(writer, sheet_name="Warnings", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
