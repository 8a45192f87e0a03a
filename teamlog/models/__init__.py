from .user import Notification, User
from .value_objects import Mood, NotificationKind, Role, parse_log_date
from .worklog import Task, TaskDraft, WorkLog, WorkLogDraft

__all__ = [
    "Mood",
    "Notification",
    "NotificationKind",
    "Role",
    "Task",
    "TaskDraft",
    "User",
    "WorkLog",
    "WorkLogDraft",
    "parse_log_date",
]
