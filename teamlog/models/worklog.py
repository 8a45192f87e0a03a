"""
Work log entities: one developer's record of work for one calendar day.
"""

import copy
import dataclasses
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Union

from .value_objects import Mood, parse_log_date


@dataclass
class Task:
    """A single unit of work inside a WorkLog."""

    id: str
    title: str
    description: str = ""
    time_spent: int = 0  # minutes
    tags: List[str] = field(default_factory=list)
    completed: bool = False


@dataclass
class WorkLog:
    """A developer's daily log.

    Total time is always derived from the tasks, never stored.
    """

    id: str
    user_id: str
    date: date
    tasks: List[Task] = field(default_factory=list)
    mood: Mood = Mood.NEUTRAL
    blockers: Optional[str] = None
    notes: Optional[str] = None
    reviewed: bool = False
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None

    def __post_init__(self) -> None:
        self.date = parse_log_date(self.date)
        self.mood = Mood.parse(self.mood)

    @property
    def total_time(self) -> int:
        return sum(task.time_spent for task in self.tasks)

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    @property
    def completed_task_count(self) -> int:
        return sum(1 for task in self.tasks if task.completed)

    @property
    def has_blockers(self) -> bool:
        return bool(self.blockers)

    def copy(self) -> "WorkLog":
        """Deep copy, so callers never share task lists with a store."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return (
            f"<WorkLog(id={self.id}, user_id={self.user_id}, date={self.date}, "
            f"tasks={len(self.tasks)}, mood={int(self.mood)})>"
        )


@dataclass
class TaskDraft:
    """Task as submitted, before an identifier is assigned."""

    title: str
    description: str = ""
    time_spent: int = 0
    tags: List[str] = field(default_factory=list)
    completed: bool = False


@dataclass
class WorkLogDraft:
    """A submission without identifier; validated before reaching the store."""

    user_id: str
    date: Union[date, str]
    tasks: List[TaskDraft] = field(default_factory=list)
    mood: Union[Mood, int] = Mood.NEUTRAL
    blockers: Optional[str] = None
    notes: Optional[str] = None


def generate_id() -> str:
    """Opaque random identifier for logs, tasks and notifications."""
    return uuid.uuid4().hex[:12]


def task_from_draft(draft: TaskDraft, task_id: str) -> Task:
    return Task(
        id=task_id,
        title=draft.title,
        description=draft.description,
        time_spent=draft.time_spent,
        tags=list(draft.tags),
        completed=draft.completed,
    )


def worklog_from_draft(
    draft: WorkLogDraft, log_id: str, id_factory: Callable[[], str] = generate_id
) -> WorkLog:
    """Materialize a submission into an unreviewed WorkLog."""
    return WorkLog(
        id=log_id,
        user_id=draft.user_id,
        date=draft.date,
        tasks=[task_from_draft(t, id_factory()) for t in draft.tasks],
        mood=draft.mood,
        blockers=draft.blockers,
        notes=draft.notes,
        reviewed=False,
    )


# Fields a store may merge on update; the identifier never changes.
UPDATABLE_FIELDS = frozenset(
    f.name for f in dataclasses.fields(WorkLog) if f.name != "id"
)
