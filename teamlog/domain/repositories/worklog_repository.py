"""WorkLogRepository protocol: the work log store contract."""

from datetime import date
from typing import Any, List, Optional, Protocol, runtime_checkable

from ...models.worklog import WorkLog, WorkLogDraft


@runtime_checkable
class WorkLogRepository(Protocol):
    """Repository interface for WorkLog access and persistence.

    Every operation is a coroutine. Lookups of a missing identifier raise
    :class:`~teamlog.domain.errors.WorkLogNotFound`.
    """

    async def list(
        self,
        owner_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WorkLog]:
        """List logs, optionally narrowed by owner and inclusive date range.

        Args:
            owner_id: Only logs owned by this user.
            start_date: Only logs dated on or after this day.
            end_date: Only logs dated on or before this day.

        Returns:
            Matching WorkLog objects, each with its full task sequence.
        """
        ...

    async def get(self, log_id: str) -> WorkLog:
        """Fetch a single log by identifier."""
        ...

    async def create(self, draft: WorkLogDraft) -> WorkLog:
        """Persist a new log and return it with a generated identifier.

        New logs are always unreviewed.
        """
        ...

    async def update(self, log_id: str, **fields: Any) -> WorkLog:
        """Merge *fields* into an existing log and return the result."""
        ...

    async def delete(self, log_id: str) -> None:
        """Remove a log."""
        ...
