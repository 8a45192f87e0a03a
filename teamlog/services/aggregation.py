"""
Aggregation over work log collections.

Every function is pure and total: an empty collection yields zero, an
empty mapping, or ``None`` for averages ("not applicable"), never an error.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.user import User
from ..models.worklog import Task, WorkLog
from ..utils.formatting import format_chart_date, format_month_label, minutes_to_hours
from .log_queries import logs_on, logs_with_blockers, recent_logs, unreviewed_logs

# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def total_time(tasks: Iterable[Task]) -> int:
    """Sum of ``time_spent`` in minutes; 0 for no tasks."""
    return sum(task.time_spent for task in tasks)


def total_log_time(logs: Iterable[WorkLog]) -> int:
    return sum(total_time(log.tasks) for log in logs)


def total_tasks(logs: Iterable[WorkLog]) -> int:
    return sum(len(log.tasks) for log in logs)


def completed_tasks(logs: Iterable[WorkLog]) -> int:
    return sum(log.completed_task_count for log in logs)


def average_mood(logs: Iterable[WorkLog]) -> Optional[float]:
    """Mean mood, or None when there is nothing to average."""
    logs = list(logs)
    if not logs:
        return None
    return sum(int(log.mood) for log in logs) / len(logs)


# ---------------------------------------------------------------------------
# Month grouping
# ---------------------------------------------------------------------------


@dataclass
class MonthGroup:
    year: int
    month: int
    logs: List[WorkLog]

    @property
    def label(self) -> str:
        return format_month_label(self.year, self.month)


def month_groups(logs: Iterable[WorkLog]) -> List[MonthGroup]:
    """Partition by calendar (year, month), newest month first.

    Logs inside a group are ordered newest date first.
    """
    buckets: Dict[Tuple[int, int], List[WorkLog]] = defaultdict(list)
    for log in logs:
        buckets[(log.date.year, log.date.month)].append(log)

    groups = []
    for (year, month) in sorted(buckets, reverse=True):
        ordered = sorted(buckets[(year, month)], key=lambda log: log.date, reverse=True)
        groups.append(MonthGroup(year=year, month=month, logs=ordered))
    return groups


def group_by_month(logs: Iterable[WorkLog]) -> Dict[str, List[WorkLog]]:
    """Mapping of ``"October 2026"``-style labels to logs, newest month first."""
    return {group.label: group.logs for group in month_groups(logs)}


# ---------------------------------------------------------------------------
# Per-developer rollups
# ---------------------------------------------------------------------------


@dataclass
class DeveloperRollup:
    developer: User
    logs: List[WorkLog] = field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return total_log_time(self.logs)

    @property
    def task_count(self) -> int:
        return total_tasks(self.logs)

    @property
    def average_mood(self) -> Optional[float]:
        return average_mood(self.logs)

    @property
    def blocker_count(self) -> int:
        return len(logs_with_blockers(self.logs))


def developer_rollups(
    logs: Iterable[WorkLog], developers: Iterable[User]
) -> List[DeveloperRollup]:
    """One rollup per developer, in the order the developers are given."""
    logs = list(logs)
    return [
        DeveloperRollup(developer=dev, logs=[log for log in logs if log.user_id == dev.id])
        for dev in developers
    ]


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


@dataclass
class TagSummary:
    shown: List[str]
    hidden: int = 0


def unique_tags(log: WorkLog) -> List[str]:
    """Distinct tags across a log's tasks, first-seen order."""
    return list(dict.fromkeys(tag for task in log.tasks for tag in task.tags))


def top_tags(log: WorkLog, limit: int = 5) -> TagSummary:
    """The first *limit* distinct tags plus how many distinct tags were left out."""
    tags = unique_tags(log)
    return TagSummary(shown=tags[:limit], hidden=max(0, len(tags) - limit))


# ---------------------------------------------------------------------------
# Chart series
# ---------------------------------------------------------------------------


@dataclass
class DailyPoint:
    day: date
    label: str
    hours: float
    mood: int


def daily_series(logs: Iterable[WorkLog]) -> List[DailyPoint]:
    """Hours logged and mood per log, ascending by date."""
    return [
        DailyPoint(
            day=log.date,
            label=format_chart_date(log.date),
            hours=minutes_to_hours(log.total_time),
            mood=int(log.mood),
        )
        for log in sorted(logs, key=lambda log: log.date)
    ]


@dataclass
class TeamSeries:
    days: List[date]
    labels: List[str]
    hours_by_developer: Dict[str, List[float]]


def team_series(logs: Iterable[WorkLog], developers: Iterable[User]) -> TeamSeries:
    """Hours per developer per day across every day anyone logged.

    A developer without a log on a given day contributes 0.
    """
    logs = list(logs)
    days = sorted({log.date for log in logs})
    by_key = {(log.user_id, log.date): log for log in logs}
    hours = {}
    for dev in developers:
        row = []
        for day in days:
            log = by_key.get((dev.id, day))
            row.append(minutes_to_hours(log.total_time) if log else 0.0)
        hours[dev.name] = row
    return TeamSeries(
        days=days,
        labels=[format_chart_date(d) for d in days],
        hours_by_developer=hours,
    )


# ---------------------------------------------------------------------------
# Dashboards
# ---------------------------------------------------------------------------


@dataclass
class TeamSnapshot:
    developer_count: int
    logged_today: int
    logs_with_blockers: List[WorkLog]
    unreviewed: List[WorkLog]
    recent_minutes: int


def team_snapshot(
    logs: Iterable[WorkLog],
    developers: Sequence[User],
    today: Optional[date] = None,
    window_days: int = 7,
) -> TeamSnapshot:
    """Manager overview: who logged today, open blockers, review backlog."""
    logs = list(logs)
    today = today or date.today()
    return TeamSnapshot(
        developer_count=len(developers),
        logged_today=len({log.user_id for log in logs_on(logs, today)}),
        logs_with_blockers=logs_with_blockers(logs),
        unreviewed=unreviewed_logs(logs),
        recent_minutes=total_log_time(recent_logs(logs, window_days, today)),
    )


@dataclass
class DeveloperDay:
    today_log: Optional[WorkLog]
    minutes_today: int
    tasks_today: int
    completed_today: int
    has_blockers_today: bool
    recent_minutes: int


def developer_day_summary(
    logs: Iterable[WorkLog], today: Optional[date] = None, window_days: int = 7
) -> DeveloperDay:
    """Developer overview of today's log and the recent window."""
    logs = list(logs)
    today = today or date.today()
    todays = logs_on(logs, today)
    today_log = todays[0] if todays else None
    return DeveloperDay(
        today_log=today_log,
        minutes_today=today_log.total_time if today_log else 0,
        tasks_today=today_log.task_count if today_log else 0,
        completed_today=today_log.completed_task_count if today_log else 0,
        has_blockers_today=bool(today_log and today_log.has_blockers),
        recent_minutes=total_log_time(recent_logs(logs, window_days, today)),
    )
