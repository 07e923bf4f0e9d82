"""
Typed failures raised by the planting register and task engine.

Every failure path raises one of these; the API layer maps them to HTTP
responses in green.main.
"""
from datetime import date


class GreenError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GreenError):
    """Malformed or out-of-range input to a create/update operation."""

    status_code = 422


class NotFoundError(GreenError):
    """Planting, task, garden or area not owned by the caller."""

    status_code = 404


class NotYetDueError(GreenError):
    """Completion attempted before the task's due day."""

    status_code = 409

    def __init__(self, due_date: date):
        super().__init__(
            f"This task cannot be completed yet. It is scheduled for {format_due_date(due_date)}."
        )
        self.due_date = due_date


class InternalError(GreenError):
    """Persistence or catalog failure beneath the service layer."""

    status_code = 500


def format_due_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"
