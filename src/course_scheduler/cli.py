"""CLI entry point for the course scheduler."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .exceptions import SchedulingError
from .exporters import get_exporter
from .scheduler import CourseScheduler, DataLoader, generate_lesson_slots
from .scheduler.constants import DEFAULT_DATA_DIR, get_shift_time_range

app = typer.Typer(
    name="course-scheduler",
    help="Generate lesson calendars and allocate instructors to course sessions",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


DataDirOption = Annotated[
    Path,
    typer.Option("--data-dir", "-d", help="Directory with courses.json, instructors.json, ..."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("-v", "--verbose", help="Show detailed output"),
]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(data_dir: Path) -> DataLoader:
    if not data_dir.is_dir():
        console.print(f"[bold red]Error:[/bold red] Data directory not found: {data_dir}")
        raise typer.Exit(1)
    try:
        return DataLoader(data_dir)
    except SchedulingError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def schedule(
    course_id: Annotated[int, typer.Argument(help="Id of the course to schedule")],
    data_dir: DataDirOption = Path(DEFAULT_DATA_DIR),
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Export the result to this file or directory"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Export format"),
    ] = OutputFormat.json,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Do not write agenda.json / conflicts.json"),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Schedule a course and allocate instructors to its sessions."""
    _setup_logging(verbose)
    loader = _load(data_dir)
    scheduler = CourseScheduler(loader.build_repository(persist=not dry_run))

    try:
        with console.status("[bold green]Scheduling course..."):
            result = scheduler.schedule_course(course_id)
    except SchedulingError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not result.accepted:
        console.print(f"[bold red]Rejected:[/bold red] {result.message}")
        raise typer.Exit(1)

    course = loader.courses.get_course(course_id)
    console.print(f"\n[bold]Schedule Results for:[/bold] {course.name}")

    summary = Table(title="Summary", show_header=False)
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="green")
    summary.add_row("Sessions Expected", str(result.sessions_expected))
    summary.add_row("Sessions Planned", str(result.sessions_total))
    summary.add_row("Sessions Allocated", str(result.sessions_allocated))
    summary.add_row("Conflicts", str(result.total_conflicts))
    summary.add_row("Unused Lesson Days", str(result.unused_slots))
    console.print(summary)

    if result.warnings:
        console.print(f"\n[bold yellow]Warnings ({len(result.warnings)}):[/bold yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]• {warning}[/yellow]")

    if result.conflicts:
        console.print(f"\n[bold red]Conflicts ({len(result.conflicts)}):[/bold red]")
        for conflict in result.conflicts[:20]:
            console.print(f"  [red]• {conflict}[/red]")
        if len(result.conflicts) > 20:
            console.print(f"  [red]... and {len(result.conflicts) - 20} more[/red]")

    if verbose and result.entries:
        names = {i.id: i.name for i in loader.instructors.instructors}
        entries_table = Table(title="Allocated Sessions")
        entries_table.add_column("Date", style="cyan")
        entries_table.add_column("Time", style="blue")
        entries_table.add_column("Competency", style="magenta")
        entries_table.add_column("Instructor", style="green")
        for entry in result.entries:
            entries_table.add_row(
                entry.date.isoformat(),
                f"{entry.start.strftime('%H:%M')}-{entry.end.strftime('%H:%M')}",
                str(entry.competency_id),
                names.get(entry.instructor_id, str(entry.instructor_id)),
            )
        console.print(entries_table)

    if not dry_run:
        console.print(f"\n[bold green]✓[/bold green] Agenda updated in: {data_dir}")

    if output:
        if format != OutputFormat.csv and not output.suffix:
            output = output.with_suffix(".xlsx" if format == OutputFormat.excel else ".json")
        with console.status(f"[bold green]Exporting to {format.value}..."):
            get_exporter(format.value).export(result, output)
        console.print(f"[bold green]✓[/bold green] Exported to: {output}")


@app.command()
def slots(
    course_id: Annotated[int, typer.Argument(help="Id of the course")],
    data_dir: DataDirOption = Path(DEFAULT_DATA_DIR),
) -> None:
    """Show the lesson calendar of a course."""
    loader = _load(data_dir)
    course = loader.courses.get_course(course_id)
    if course is None:
        console.print(f"[bold red]Error:[/bold red] Course not found: {course_id}")
        raise typer.Exit(1)

    try:
        lesson_slots = generate_lesson_slots(course)
    except SchedulingError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(title=f"Lesson days of {course.name}")
    table.add_column("#", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Weekday", style="blue")
    table.add_column("Time", style="magenta")
    for number, slot in enumerate(lesson_slots, start=1):
        table.add_row(
            str(number),
            slot.date.isoformat(),
            slot.date.strftime("%A"),
            get_shift_time_range(slot.shift),
        )
    console.print(table)
    console.print(f"  Total lesson days: {len(lesson_slots)}")


@app.command()
def plan(
    course_id: Annotated[int, typer.Argument(help="Id of the course")],
    data_dir: DataDirOption = Path(DEFAULT_DATA_DIR),
) -> None:
    """Show how competencies are spread over the lesson calendar."""
    loader = _load(data_dir)
    scheduler = CourseScheduler(loader.build_repository(persist=False))

    try:
        result = scheduler.plan_course(course_id)
    except SchedulingError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(title="Planned Sessions")
    table.add_column("Date", style="cyan")
    table.add_column("Time", style="blue")
    table.add_column("Competency", style="green")
    for session in result.sessions:
        table.add_row(
            session.date.isoformat(),
            f"{session.start.strftime('%H:%M')}-{session.end.strftime('%H:%M')}",
            session.competency_name,
        )
    console.print(table)

    console.print(f"  Sessions required: {result.sessions_expected}")
    console.print(f"  Sessions planned: {len(result.sessions)}")
    console.print(f"  Unused lesson days: {result.unused_slots}")

    if not result.is_complete:
        console.print("\n[bold yellow]Competencies that did not fit:[/bold yellow]")
        for competency_id, missing in result.shortfall.items():
            console.print(f"  [yellow]• {competency_id}: {missing} session(s) missing[/yellow]")


@app.command()
def validate(
    data_dir: DataDirOption = Path(DEFAULT_DATA_DIR),
) -> None:
    """Check the data directory for problems before scheduling."""
    loader = _load(data_dir)
    issues = loader.validate()

    console.print(f"\n[bold]Validation Results for:[/bold] {data_dir}")
    console.print(f"  Courses: {len(loader.courses.courses)}")
    console.print(f"  Instructors: {len(loader.instructors.instructors)}")
    console.print(f"  Agenda entries: {len(loader.agenda.entries)}")

    if not issues:
        console.print("[bold green]✓ Data is valid[/bold green]")
        return

    console.print(f"\n[bold yellow]Issues ({len(issues)}):[/bold yellow]")
    for issue in issues:
        console.print(f"  [yellow]• {issue}[/yellow]")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
