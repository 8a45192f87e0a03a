"""
Typed domain errors for teamlog.

Callers distinguish specific failure modes (missing log vs. rejected
submission vs. role violation) and map each to a user-facing message.
"""

from typing import Iterable, List


class DomainError(Exception):
    """Base class for all domain-specific errors."""


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class WorkLogNotFound(DomainError):
    """Work log with the given ID does not exist."""

    def __init__(self, log_id: str) -> None:
        self.log_id = log_id
        super().__init__(f"Work log {log_id} not found")


class TaskNotFound(DomainError):
    """Task with the given ID does not exist inside its work log."""

    def __init__(self, log_id: str, task_id: str) -> None:
        self.log_id = log_id
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found in work log {log_id}")


# ---------------------------------------------------------------------------
# Submission
# ---------------------------------------------------------------------------


class WorkLogValidationError(DomainError):
    """A submission was rejected before reaching the store."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems: List[str] = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid work log")


class InvalidMood(WorkLogValidationError, ValueError):
    """Mood outside the 1-5 scale."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__([f"Mood must be an integer from 1 to 5, got {value!r}"])


class DuplicateWorkLog(WorkLogValidationError):
    """The owner already has a work log for that day."""

    def __init__(self, user_id: str, day: object) -> None:
        self.user_id = user_id
        self.day = day
        super().__init__([f"User {user_id} already has a work log for {day}"])


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------


class NotAuthorized(DomainError):
    """The acting user may not perform the action on this work log."""

    def __init__(self, user_id: str, action: str) -> None:
        self.user_id = user_id
        self.action = action
        super().__init__(f"User {user_id} is not allowed to {action}")
