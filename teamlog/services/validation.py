"""
Submission checks applied before a work log reaches the store.

Failures raise WorkLogValidationError synchronously, listing every problem
found rather than only the first.
"""

from typing import Iterable, List

from ..domain.errors import WorkLogValidationError
from ..models.value_objects import Mood, parse_log_date
from ..models.worklog import Task, TaskDraft, WorkLogDraft


def normalize_tags(tags: Iterable[str]) -> List[str]:
    """Trim tags and drop blanks (``"a, , b"`` style input)."""
    return [tag.strip() for tag in tags if tag and tag.strip()]


def parse_tag_input(text: str) -> List[str]:
    """Split a comma separated tag field."""
    return normalize_tags(text.split(","))


def task_problems(task, position: int) -> List[str]:
    """Problems with one task (draft or stored), 1-based *position*."""
    problems = []
    if not task.title or not task.title.strip():
        problems.append(f"Task {position} must have a title")
    spent = task.time_spent
    if isinstance(spent, bool) or not isinstance(spent, int) or spent < 0:
        problems.append(
            f"Task {position} time spent must be a non-negative number of minutes"
        )
    return problems


def validate_tasks(tasks: List[Task]) -> None:
    problems = []
    if not tasks:
        problems.append("Please add at least one task")
    for i, task in enumerate(tasks, start=1):
        problems.extend(task_problems(task, i))
    if problems:
        raise WorkLogValidationError(problems)


def validate_draft(draft: WorkLogDraft) -> WorkLogDraft:
    """Check a submission and return a normalized copy.

    Raises:
        WorkLogValidationError: no tasks, a task without a title, negative
            time, an unparseable date, or a mood outside 1-5.
    """
    problems: List[str] = []
    if not draft.user_id:
        problems.append("Work log must have an owner")
    if not draft.tasks:
        problems.append("Please add at least one task")
    for i, task in enumerate(draft.tasks, start=1):
        problems.extend(task_problems(task, i))

    try:
        log_date = parse_log_date(draft.date)
    except WorkLogValidationError as e:
        problems.extend(e.problems)
        log_date = None
    try:
        mood = Mood.parse(draft.mood)
    except WorkLogValidationError as e:
        problems.extend(e.problems)
        mood = None

    if problems:
        raise WorkLogValidationError(problems)

    return WorkLogDraft(
        user_id=draft.user_id,
        date=log_date,
        tasks=[
            TaskDraft(
                title=t.title.strip(),
                description=t.description or "",
                time_spent=t.time_spent,
                tags=normalize_tags(t.tags),
                completed=t.completed,
            )
            for t in draft.tasks
        ],
        mood=mood,
        blockers=(draft.blockers or "").strip() or None,
        notes=draft.notes or None,
    )
