from .notification_repository import NotificationRepository
from .user_repository import UserRepository
from .worklog_repository import WorkLogRepository

__all__ = ["NotificationRepository", "UserRepository", "WorkLogRepository"]
