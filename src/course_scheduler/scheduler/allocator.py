"""Greedy allocation of instructors to planned sessions."""

import logging

from ..exceptions import CollaboratorError
from .conflicts import ConflictTracker
from .models import AllocationResult, ConflictRecord, ScheduleEntry, Session
from .repository import ScheduleRepository
from .utils import rank_candidates

logger = logging.getLogger(__name__)


class InstructorAllocator:
    """
    Allocates one instructor to each session, first fit by proficiency.

    Sessions are processed in the order given. For each session the
    qualified active instructors are ranked expert → basic and the first one
    free for the session's window is committed. When nobody qualifies, or
    every candidate is busy, a conflict is recorded instead. There is no
    backtracking: a session is decided once.

    Every decision is written to the repository immediately, so an
    instructor allocated to one session is seen as busy by the next.
    """

    def __init__(self, repository: ScheduleRepository):
        self.repository = repository
        self.tracker = ConflictTracker()

    def allocate(self, sessions: list[Session]) -> AllocationResult:
        """
        Allocate instructors to sessions.

        Args:
            sessions: Sessions in processing order.

        Returns:
            AllocationResult with committed entries and the run's conflicts.

        Raises:
            CollaboratorError: If the repository fails to store a decision.
                Decisions committed before the failure are kept.
        """
        self.tracker.reset()
        entries: list[ScheduleEntry] = []

        for session in sessions:
            entry = self._allocate_session(session)
            if entry is not None:
                entries.append(entry)

        logger.info(
            f"Allocated {len(entries)} of {len(sessions)} sessions, "
            f"{len(self.tracker)} conflicts"
        )

        return AllocationResult(
            sessions_considered=len(sessions),
            entries=entries,
            conflict_records=self.tracker.records,
            conflicts=self.tracker.descriptions,
        )

    def _allocate_session(self, session: Session) -> ScheduleEntry | None:
        """Allocate a single session; return the entry or None on conflict."""
        candidates = rank_candidates(
            self.repository.fetch_qualified_instructors(session.competency_id),
            session.competency_id,
        )

        if not candidates:
            logger.warning(
                f"No qualified instructor for '{session.competency_name}' "
                f"on {session.date.isoformat()}"
            )
            self._commit_conflict(self.tracker.record_no_instructor(session))
            return None

        for instructor in candidates:
            if self.repository.is_instructor_available(
                instructor.id, session.date, session.start, session.end
            ):
                entry = ScheduleEntry.for_session(instructor.id, session)
                self._commit_entry(entry)
                logger.debug(
                    f"{session.date.isoformat()} {session.competency_name}: "
                    f"allocated instructor {instructor.id}"
                )
                return entry
            logger.debug(
                f"{session.date.isoformat()} {session.competency_name}: "
                f"instructor {instructor.id} is busy"
            )

        logger.warning(
            f"All {len(candidates)} candidates busy for "
            f"'{session.competency_name}' on {session.date.isoformat()}"
        )
        self._commit_conflict(self.tracker.record_overlap(session, candidates[0].id))
        return None

    def _commit_entry(self, entry: ScheduleEntry) -> None:
        try:
            ok = self.repository.commit_schedule_entry(entry)
        except Exception as e:
            raise CollaboratorError("commit_schedule_entry", str(e)) from e
        if not ok:
            raise CollaboratorError("commit_schedule_entry", "entry was not stored")

    def _commit_conflict(self, record: ConflictRecord) -> None:
        try:
            ok = self.repository.commit_conflict_record(record)
        except Exception as e:
            raise CollaboratorError("commit_conflict_record", str(e)) from e
        if not ok:
            raise CollaboratorError("commit_conflict_record", "record was not stored")
