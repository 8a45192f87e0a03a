"""
User and notification entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .value_objects import NotificationKind, Role


@dataclass
class User:
    """A developer or a manager."""

    id: str
    name: str
    email: str
    role: Role = Role.DEVELOPER
    avatar: Optional[str] = None
    team_id: Optional[str] = None

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name}, role={self.role.value})>"


@dataclass
class Notification:
    """Message delivered to a user (reminders, reviews, submissions)."""

    id: str
    user_id: str
    message: str
    kind: NotificationKind = NotificationKind.SYSTEM
    read: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
