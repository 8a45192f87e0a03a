"""
Work log query helpers.

Pure functions narrowing a log collection by owner, inclusive date range
and free-text search. Each log is evaluated on its own and input order is
preserved.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional, Union

from ..models.value_objects import parse_log_date
from ..models.worklog import WorkLog

DateLike = Union[date, str]


def _as_date(value: Optional[DateLike]) -> Optional[date]:
    if value is None or value == "":
        return None
    return parse_log_date(value)


def matches_search(log: WorkLog, query: Optional[str]) -> bool:
    """Case-insensitive substring match over a log's searchable text.

    Searches task titles, descriptions and tags, then blockers and notes.
    A missing or blank query matches every log.
    """
    if not query or not query.strip():
        return True
    needle = query.strip().lower()

    for task in log.tasks:
        if needle in task.title.lower() or needle in task.description.lower():
            return True
        if any(needle in tag.lower() for tag in task.tags):
            return True
    if log.blockers and needle in log.blockers.lower():
        return True
    if log.notes and needle in log.notes.lower():
        return True
    return False


@dataclass
class LogFilter:
    """Conjunction of optional predicates; an unset field matches all."""

    owner_id: Optional[str] = None
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    query: Optional[str] = None

    def __post_init__(self) -> None:
        self.start_date = _as_date(self.start_date)
        self.end_date = _as_date(self.end_date)

    def matches(self, log: WorkLog) -> bool:
        if self.owner_id and log.user_id != self.owner_id:
            return False
        if self.start_date and log.date < self.start_date:
            return False
        if self.end_date and log.date > self.end_date:
            return False
        return matches_search(log, self.query)

    def apply(self, logs: Iterable[WorkLog]) -> List[WorkLog]:
        return [log for log in logs if self.matches(log)]


def filter_logs(
    logs: Iterable[WorkLog],
    owner_id: Optional[str] = None,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
    query: Optional[str] = None,
) -> List[WorkLog]:
    """Subsequence of *logs* satisfying every supplied predicate."""
    return LogFilter(owner_id, start_date, end_date, query).apply(logs)


def logs_on(logs: Iterable[WorkLog], day: DateLike) -> List[WorkLog]:
    day = parse_log_date(day)
    return [log for log in logs if log.date == day]


def recent_logs(
    logs: Iterable[WorkLog], days: int, today: Optional[date] = None
) -> List[WorkLog]:
    """Logs dated on or after ``today - days`` (closed window)."""
    today = today or date.today()
    cutoff = today - timedelta(days=days)
    return [log for log in logs if log.date >= cutoff]


def sort_newest_first(logs: Iterable[WorkLog]) -> List[WorkLog]:
    return sorted(logs, key=lambda log: log.date, reverse=True)


def last_n_logs(logs: Iterable[WorkLog], n: int) -> List[WorkLog]:
    """The *n* most recent logs in ascending date order (chart window)."""
    if n <= 0:
        return []
    ordered = sorted(logs, key=lambda log: log.date)
    return ordered[-n:]


def logs_with_blockers(logs: Iterable[WorkLog]) -> List[WorkLog]:
    return [log for log in logs if log.has_blockers]


def unreviewed_logs(logs: Iterable[WorkLog]) -> List[WorkLog]:
    return [log for log in logs if not log.reviewed]
