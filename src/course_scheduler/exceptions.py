"""Custom exceptions for the course scheduler.

Partial results are never rolled back: when a ``CollaboratorError`` aborts a
run, schedule entries and conflict records committed before the failure stay
committed. Integrators that need all-or-nothing semantics must wrap the run in
their own transaction.
"""


class SchedulingError(Exception):
    """Base exception for scheduler errors."""

    pass


class NotFoundError(SchedulingError):
    """A record required to start a run does not exist."""

    pass


class CourseNotFoundError(NotFoundError):
    """Course not found."""

    def __init__(self, course_id: int):
        self.course_id = course_id
        super().__init__(f"Course not found: {course_id}")


class NoCompetenciesError(NotFoundError):
    """Course has no competencies associated with it."""

    def __init__(self, course_id: int):
        self.course_id = course_id
        super().__init__(f"No competencies associated with course {course_id}")


class InvalidInputError(SchedulingError):
    """Input data is malformed."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        location = f" in '{field}'" if field else ""
        super().__init__(f"Invalid input{location}: {message}")


class CollaboratorError(SchedulingError):
    """A persistence collaborator failed while committing a decision."""

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        self.reason = reason
        message = f"Collaborator call '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
