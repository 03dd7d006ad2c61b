"""Conflict tracking for a single allocation run."""

from .models import ConflictRecord, ConflictType, Session


class ConflictTracker:
    """Accumulates the conflicts of one allocation run.

    Keeps two parallel views of every conflict:
    - descriptions: short human-readable messages returned to the caller
    - records: structured ConflictRecords handed to the persistence layer

    A tracker belongs to exactly one run. ``reset()`` is called when a run
    starts so nothing carries over between courses.
    """

    def __init__(self) -> None:
        self._descriptions: list[str] = []
        self._records: list[ConflictRecord] = []

    def reset(self) -> None:
        """Forget all conflicts recorded so far."""
        self._descriptions = []
        self._records = []

    def record_no_instructor(self, session: Session) -> ConflictRecord:
        """Record a session for which no qualified active instructor exists."""
        record = ConflictRecord(
            instructor_id=None,
            course_id=session.course_id,
            competency_id=session.competency_id,
            date=session.date,
            start=session.start,
            end=session.end,
            conflict_type=ConflictType.NO_INSTRUCTOR,
            description=f"No qualified instructor for: {session.competency_name}",
        )
        self._descriptions.append(
            f"No instructor available for: {session.competency_name}"
        )
        self._records.append(record)
        return record

    def record_overlap(self, session: Session, instructor_id: int) -> ConflictRecord:
        """Record a session whose candidates were all busy.

        Args:
            session: Session that could not be allocated
            instructor_id: Top-ranked candidate, kept for manual review
        """
        record = ConflictRecord(
            instructor_id=instructor_id,
            course_id=session.course_id,
            competency_id=session.competency_id,
            date=session.date,
            start=session.start,
            end=session.end,
            conflict_type=ConflictType.OVERLAP,
            description=f"Conflict while allocating: {session.competency_name}",
        )
        self._descriptions.append(
            f"Schedule conflict on {session.date.isoformat()} "
            f"for {session.competency_name}"
        )
        self._records.append(record)
        return record

    @property
    def descriptions(self) -> tuple[str, ...]:
        """Conflict messages in the order they were recorded."""
        return tuple(self._descriptions)

    @property
    def records(self) -> tuple[ConflictRecord, ...]:
        """Conflict records in the order they were recorded."""
        return tuple(self._records)

    @property
    def has_conflicts(self) -> bool:
        return bool(self._records)

    def __len__(self) -> int:
        return len(self._records)
