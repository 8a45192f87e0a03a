"""In-memory implementation of WorkLogRepository.

Stands in for a network API in development and tests. The backing dict is
injected, so each instance owns its data; every mutation runs under one
``asyncio.Lock`` to keep a single writer.
"""

import asyncio
import copy
import dataclasses
import logging
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Optional

from ...domain.errors import WorkLogNotFound
from ...models.worklog import (
    UPDATABLE_FIELDS,
    WorkLog,
    WorkLogDraft,
    generate_id,
    worklog_from_draft,
)

logger = logging.getLogger(__name__)


class InMemoryWorkLogRepository:
    """Concrete WorkLogRepository backed by a dict keyed by log ID."""

    def __init__(
        self,
        logs: Optional[Iterable[WorkLog]] = None,
        latency: float = 0.0,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._logs: Dict[str, WorkLog] = {log.id: log.copy() for log in logs or ()}
        self._latency = latency
        self._new_id = id_factory
        self._lock = asyncio.Lock()

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def list(
        self,
        owner_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WorkLog]:
        await self._simulate_latency()
        result = []
        for log in self._logs.values():
            if owner_id and log.user_id != owner_id:
                continue
            if start_date and log.date < start_date:
                continue
            if end_date and log.date > end_date:
                continue
            result.append(log.copy())
        return result

    async def get(self, log_id: str) -> WorkLog:
        await self._simulate_latency()
        log = self._logs.get(log_id)
        if log is None:
            logger.warning("Work log %s not found", log_id)
            raise WorkLogNotFound(log_id)
        return log.copy()

    async def create(self, draft: WorkLogDraft) -> WorkLog:
        await self._simulate_latency()
        async with self._lock:
            log = worklog_from_draft(draft, self._new_id(), self._new_id)
            self._logs[log.id] = log
        logger.info("Created work log %s for user %s on %s", log.id, log.user_id, log.date)
        return log.copy()

    async def update(self, log_id: str, **fields: Any) -> WorkLog:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update work log fields: {sorted(unknown)}")

        await self._simulate_latency()
        async with self._lock:
            current = self._logs.get(log_id)
            if current is None:
                logger.warning("Work log %s not found", log_id)
                raise WorkLogNotFound(log_id)
            merged = dataclasses.replace(current, **copy.deepcopy(fields))
            self._logs[log_id] = merged
        logger.debug("Updated work log %s: %s", log_id, sorted(fields))
        return merged.copy()

    async def delete(self, log_id: str) -> None:
        await self._simulate_latency()
        async with self._lock:
            if log_id not in self._logs:
                logger.warning("Work log %s not found", log_id)
                raise WorkLogNotFound(log_id)
            del self._logs[log_id]
        logger.info("Deleted work log %s", log_id)
