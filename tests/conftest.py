import logging
import os
from datetime import date

import pytest

# Set test environment variables
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["STORE_LATENCY_MS"] = "0"

from teamlog.domain.events import reset_event_bus  # noqa: E402
from teamlog.infrastructure.repositories import (  # noqa: E402
    InMemoryNotificationRepository,
    InMemoryUserRepository,
    InMemoryWorkLogRepository,
)
from teamlog.infrastructure.seed import demo_logs, demo_users  # noqa: E402
from teamlog.models import Task, TaskDraft, WorkLog, WorkLogDraft  # noqa: E402

TODAY = date(2026, 10, 18)


@pytest.fixture(autouse=True)
def _strip_file_handlers():
    """Remove file handlers from root logger so tests never write to logs/app.log."""
    root = logging.getLogger()
    saved = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    for h in saved:
        root.removeHandler(h)
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
    for h in saved:
        root.addHandler(h)


@pytest.fixture(autouse=True)
def _fresh_event_bus():
    reset_event_bus()
    yield
    reset_event_bus()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def users():
    """John Developer (1), Jane Manager (2), Alex Developer (3), all team 1."""
    return {u.id: u for u in demo_users()}


@pytest.fixture
def developer(users):
    return users["1"]


@pytest.fixture
def manager(users):
    return users["2"]


@pytest.fixture
def other_developer(users):
    return users["3"]


@pytest.fixture
def seeded_logs(today):
    return demo_logs(today)


@pytest.fixture
def worklog_repo(seeded_logs):
    return InMemoryWorkLogRepository(seeded_logs)


@pytest.fixture
def empty_worklog_repo():
    return InMemoryWorkLogRepository()


@pytest.fixture
def user_repo(users):
    return InMemoryUserRepository(users.values())


@pytest.fixture
def notification_repo():
    return InMemoryNotificationRepository()


def _make_task(task_id="t1", title="Task", time_spent=30, tags=None, **kwargs):
    return Task(id=task_id, title=title, time_spent=time_spent, tags=tags or [], **kwargs)


def _make_log(log_id="l1", user_id="1", day=TODAY, minutes=(30,), **kwargs):
    """A log with one task per entry in *minutes*."""
    tasks = kwargs.pop("tasks", None)
    if tasks is None:
        tasks = [
            _make_task(f"{log_id}-{i}", f"Task {i}", m) for i, m in enumerate(minutes, start=1)
        ]
    return WorkLog(id=log_id, user_id=user_id, date=day, tasks=tasks, **kwargs)


def _make_draft(user_id="1", day=TODAY, **kwargs):
    tasks = kwargs.pop("tasks", None)
    if tasks is None:
        tasks = [TaskDraft(title="Write tests", time_spent=60, tags=["qa"])]
    return WorkLogDraft(user_id=user_id, date=day, tasks=tasks, **kwargs)


@pytest.fixture
def make_task():
    return _make_task


@pytest.fixture
def make_log():
    return _make_log


@pytest.fixture
def make_draft():
    return _make_draft
