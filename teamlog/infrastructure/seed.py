"""
Demo data set: one team with a manager and two developers, plus three
logs dated relative to ``today`` (one yesterday, two today).
"""

from datetime import date, timedelta
from typing import List, Optional

from ..models.user import User
from ..models.value_objects import Mood, Role
from ..models.worklog import Task, WorkLog
from .repositories import (
    InMemoryUserRepository,
    InMemoryWorkLogRepository,
)

DEMO_TEAM_ID = "1"


def demo_users() -> List[User]:
    return [
        User(
            id="1",
            name="John Developer",
            email="developer@example.com",
            role=Role.DEVELOPER,
            avatar="https://i.pravatar.cc/150?img=1",
            team_id=DEMO_TEAM_ID,
        ),
        User(
            id="2",
            name="Jane Manager",
            email="manager@example.com",
            role=Role.MANAGER,
            avatar="https://i.pravatar.cc/150?img=2",
            team_id=DEMO_TEAM_ID,
        ),
        User(
            id="3",
            name="Alex Developer",
            email="alex@example.com",
            role=Role.DEVELOPER,
            avatar="https://i.pravatar.cc/150?img=3",
            team_id=DEMO_TEAM_ID,
        ),
    ]


def demo_tasks(log_id: str) -> List[Task]:
    """The three completed tasks every demo log carries (195 minutes)."""
    return [
        Task(
            id=f"{log_id}-1",
            title="Implement login functionality",
            description="Created login form and connected to API",
            time_spent=120,
            tags=["frontend", "auth"],
            completed=True,
        ),
        Task(
            id=f"{log_id}-2",
            title="Fix navigation bug",
            description="Fixed issue with dropdown menu not closing",
            time_spent=45,
            tags=["bugfix", "ui"],
            completed=True,
        ),
        Task(
            id=f"{log_id}-3",
            title="Code review",
            description="Reviewed PR for user profile feature",
            time_spent=30,
            tags=["review"],
            completed=True,
        ),
    ]


def demo_logs(today: Optional[date] = None) -> List[WorkLog]:
    today = today or date.today()
    return [
        WorkLog(
            id="1",
            user_id="1",
            date=today - timedelta(days=1),
            tasks=demo_tasks("1"),
            mood=Mood.GOOD,
            blockers="Waiting for design assets",
            notes="Good progress today, but still need to finish the error handling",
            reviewed=True,
            reviewed_by="2",
            review_notes="Great job on the login functionality!",
        ),
        WorkLog(
            id="2",
            user_id="1",
            date=today,
            tasks=demo_tasks("2"),
            mood=Mood.EXCELLENT,
            notes="Completed all planned tasks ahead of schedule",
        ),
        WorkLog(
            id="3",
            user_id="3",
            date=today,
            tasks=demo_tasks("3"),
            mood=Mood.NEUTRAL,
            blockers="API integration issues",
            notes="Spent most of the day troubleshooting API issues",
        ),
    ]


def demo_worklog_repository(
    today: Optional[date] = None, latency: float = 0.0
) -> InMemoryWorkLogRepository:
    return InMemoryWorkLogRepository(demo_logs(today), latency=latency)


def demo_user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository(demo_users())
