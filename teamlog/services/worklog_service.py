"""
Work log workflows: submit, edit, review, delete.

Each mutation returns a MutationResult carrying the domain events it raised;
publishing them (and any side effects such as notifications) is left to the
caller's EventBus.
"""

import asyncio
import dataclasses
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from ..domain.errors import (
    DuplicateWorkLog,
    NotAuthorized,
    TaskNotFound,
    WorkLogValidationError,
)
from ..domain.events import (
    MutationResult,
    WorkLogDeleted,
    WorkLogReviewed,
    WorkLogSubmitted,
    WorkLogUpdated,
)
from ..domain.repositories import WorkLogRepository
from ..models.user import User
from ..models.value_objects import Mood, parse_log_date
from ..models.worklog import (
    Task,
    TaskDraft,
    WorkLog,
    WorkLogDraft,
    generate_id,
    task_from_draft,
)
from .log_queries import matches_search
from .validation import normalize_tags, task_problems, validate_draft, validate_tasks

logger = logging.getLogger(__name__)

# Owner-editable fields; review fields belong to managers.
EDITABLE_FIELDS = frozenset({"date", "tasks", "mood", "blockers", "notes"})
TASK_FIELDS = frozenset({"title", "description", "time_spent", "tags", "completed"})


class WorkLogService:
    """Validates and applies work log mutations against a repository."""

    def __init__(self, repository: WorkLogRepository) -> None:
        self._repo = repository
        self._lock = asyncio.Lock()

    # --- Queries ---

    async def get(self, log_id: str) -> WorkLog:
        return await self._repo.get(log_id)

    async def list(
        self,
        owner_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        query: Optional[str] = None,
    ) -> List[WorkLog]:
        start_date = parse_log_date(start_date) if start_date else None
        end_date = parse_log_date(end_date) if end_date else None
        logs = await self._repo.list(owner_id, start_date, end_date)
        return [log for log in logs if matches_search(log, query)]

    # --- Commands ---
    # Mutations are serialized on self._lock, checks included.

    async def submit(self, draft: WorkLogDraft) -> MutationResult[WorkLog]:
        """Validate and create a log. Always raises WorkLogSubmitted."""
        try:
            draft = validate_draft(draft)
        except WorkLogValidationError as e:
            logger.warning("Rejected work log from %s: %s", draft.user_id, e)
            raise

        async with self._lock:
            await self._ensure_unique_day(draft.user_id, draft.date)
            log = await self._repo.create(draft)
        logger.info("Work log %s submitted by %s for %s", log.id, log.user_id, log.date)
        return MutationResult(
            log, [WorkLogSubmitted(log_id=log.id, user_id=log.user_id, log_date=log.date)]
        )

    async def edit(self, log_id: str, editor: User, **fields: Any) -> MutationResult[WorkLog]:
        """Owner edit of date, tasks, mood, blockers or notes."""
        forbidden = set(fields) - EDITABLE_FIELDS
        if forbidden:
            raise WorkLogValidationError(
                [f"Field {name!r} cannot be edited" for name in sorted(forbidden)]
            )
        async with self._lock:
            current = await self._repo.get(log_id)
            return await self._apply_edit(current, editor, fields)

    async def review(
        self,
        log_id: str,
        reviewer: User,
        reviewed: bool = True,
        review_notes: Optional[str] = None,
    ) -> MutationResult[WorkLog]:
        """Manager sets or clears the review flag.

        Clearing the flag also clears the reviewer and the review notes.
        """
        if not reviewer.is_manager:
            raise NotAuthorized(reviewer.id, f"review work log {log_id}")

        async with self._lock:
            current = await self._repo.get(log_id)
            updated = await self._repo.update(
                log_id,
                reviewed=reviewed,
                reviewed_by=reviewer.id if reviewed else None,
                review_notes=(review_notes or None) if reviewed else None,
            )
        logger.info("Work log %s reviewed=%s by %s", log_id, reviewed, reviewer.id)
        return MutationResult(
            updated,
            [
                WorkLogReviewed(
                    log_id=log_id,
                    user_id=current.user_id,
                    reviewer_id=reviewer.id,
                    reviewed=reviewed,
                    review_notes=updated.review_notes,
                )
            ],
        )

    async def delete(self, log_id: str, actor: User) -> MutationResult[None]:
        """Owner or manager removes a log."""
        async with self._lock:
            current = await self._repo.get(log_id)
            if not actor.is_manager:
                self._require_owner(current, actor, "delete")
            await self._repo.delete(log_id)
        return MutationResult(
            None, [WorkLogDeleted(log_id=log_id, user_id=current.user_id, deleted_by=actor.id)]
        )

    # --- Task edits ---

    async def add_task(
        self, log_id: str, editor: User, draft: TaskDraft
    ) -> MutationResult[WorkLog]:
        problems = task_problems(draft, 1)
        if problems:
            raise WorkLogValidationError(problems)
        task = task_from_draft(
            dataclasses.replace(draft, title=draft.title.strip()), generate_id()
        )
        async with self._lock:
            current = await self._repo.get(log_id)
            return await self._apply_edit(
                current, editor, {"tasks": current.tasks + [task]}
            )

    async def update_task(
        self, log_id: str, editor: User, task_id: str, **fields: Any
    ) -> MutationResult[WorkLog]:
        unknown = set(fields) - TASK_FIELDS
        if unknown:
            raise WorkLogValidationError(
                [f"Unknown task field {name!r}" for name in sorted(unknown)]
            )
        async with self._lock:
            current = await self._repo.get(log_id)
            if not any(t.id == task_id for t in current.tasks):
                raise TaskNotFound(log_id, task_id)
            tasks = [
                dataclasses.replace(t, **fields) if t.id == task_id else t
                for t in current.tasks
            ]
            return await self._apply_edit(current, editor, {"tasks": tasks})

    async def remove_task(
        self, log_id: str, editor: User, task_id: str
    ) -> MutationResult[WorkLog]:
        async with self._lock:
            current = await self._repo.get(log_id)
            tasks: List[Task] = [t for t in current.tasks if t.id != task_id]
            if len(tasks) == len(current.tasks):
                raise TaskNotFound(log_id, task_id)
            return await self._apply_edit(current, editor, {"tasks": tasks})

    # --- Private helpers ---

    async def _apply_edit(
        self, current: WorkLog, editor: User, fields: Dict[str, Any]
    ) -> MutationResult[WorkLog]:
        """Validate and write an owner edit. Caller holds the lock."""
        self._require_owner(current, editor, "edit")

        if "mood" in fields:
            fields["mood"] = Mood.parse(fields["mood"])
        if "tasks" in fields:
            validate_tasks(fields["tasks"])
            fields["tasks"] = [
                dataclasses.replace(t, tags=normalize_tags(t.tags)) for t in fields["tasks"]
            ]
        if "date" in fields:
            fields["date"] = parse_log_date(fields["date"])
            if fields["date"] != current.date:
                await self._ensure_unique_day(current.user_id, fields["date"])

        updated = await self._repo.update(current.id, **fields)
        return MutationResult(
            updated,
            [WorkLogUpdated(log_id=current.id, user_id=updated.user_id, changed_fields=sorted(fields))],
        )

    @staticmethod
    def _require_owner(log: WorkLog, user: User, action: str) -> None:
        if log.user_id != user.id:
            raise NotAuthorized(user.id, f"{action} work log {log.id}")

    async def _ensure_unique_day(self, user_id: str, day: date) -> None:
        if await self._repo.list(user_id, day, day):
            raise DuplicateWorkLog(user_id, day)
