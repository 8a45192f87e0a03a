"""SQLAlchemy implementation of WorkLogRepository."""

import dataclasses
import logging
from datetime import date
from typing import Any, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from teamlog.domain.errors import WorkLogNotFound
from teamlog.models.tables import TaskRow, WorkLogRow
from teamlog.models.worklog import (
    UPDATABLE_FIELDS,
    Task,
    WorkLog,
    WorkLogDraft,
    generate_id,
    worklog_from_draft,
)

logger = logging.getLogger(__name__)


def _to_domain(row: WorkLogRow) -> WorkLog:
    return WorkLog(
        id=row.id,
        user_id=row.user_id,
        date=row.date,
        tasks=[
            Task(
                id=t.id,
                title=t.title,
                description=t.description or "",
                time_spent=t.time_spent,
                tags=list(t.tags or []),
                completed=t.completed,
            )
            for t in row.tasks
        ],
        mood=row.mood,
        blockers=row.blockers,
        notes=row.notes,
        reviewed=row.reviewed,
        reviewed_by=row.reviewed_by,
        review_notes=row.review_notes,
    )


def _apply(row: WorkLogRow, log: WorkLog) -> None:
    row.user_id = log.user_id
    row.date = log.date
    row.mood = int(log.mood)
    row.blockers = log.blockers
    row.notes = log.notes
    row.reviewed = log.reviewed
    row.reviewed_by = log.reviewed_by
    row.review_notes = log.review_notes
    row.tasks = [
        TaskRow(
            id=t.id,
            position=i,
            title=t.title,
            description=t.description,
            time_spent=t.time_spent,
            tags=list(t.tags),
            completed=t.completed,
        )
        for i, t in enumerate(log.tasks)
    ]


class SqlAlchemyWorkLogRepository:
    """Concrete WorkLogRepository backed by SQLAlchemy async sessions.

    The repository flushes but never commits; the session owner decides
    the transaction boundary.
    """

    def __init__(
        self, session: AsyncSession, id_factory: Callable[[], str] = generate_id
    ) -> None:
        self._session = session
        self._new_id = id_factory

    async def _get_row(self, log_id: str) -> WorkLogRow:
        row = await self._session.get(WorkLogRow, log_id)
        if row is None:
            logger.warning("Work log %s not found", log_id)
            raise WorkLogNotFound(log_id)
        return row

    async def list(
        self,
        owner_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WorkLog]:
        query = select(WorkLogRow)
        if owner_id:
            query = query.where(WorkLogRow.user_id == owner_id)
        if start_date:
            query = query.where(WorkLogRow.date >= start_date)
        if end_date:
            query = query.where(WorkLogRow.date <= end_date)
        query = query.order_by(WorkLogRow.date, WorkLogRow.id)

        result = await self._session.execute(query)
        return [_to_domain(row) for row in result.scalars().all()]

    async def get(self, log_id: str) -> WorkLog:
        return _to_domain(await self._get_row(log_id))

    async def create(self, draft: WorkLogDraft) -> WorkLog:
        log = worklog_from_draft(draft, self._new_id(), self._new_id)
        row = WorkLogRow(id=log.id)
        _apply(row, log)
        self._session.add(row)
        await self._session.flush()
        logger.info("Created work log %s for user %s on %s", log.id, log.user_id, log.date)
        return log

    async def update(self, log_id: str, **fields: Any) -> WorkLog:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update work log fields: {sorted(unknown)}")

        row = await self._get_row(log_id)
        merged = dataclasses.replace(_to_domain(row), **fields)
        _apply(row, merged)
        await self._session.flush()
        logger.debug("Updated work log %s: %s", log_id, sorted(fields))
        return merged

    async def delete(self, log_id: str) -> None:
        row = await self._get_row(log_id)
        await self._session.delete(row)
        await self._session.flush()
        logger.info("Deleted work log %s", log_id)
