from .in_memory_notification_repository import InMemoryNotificationRepository
from .in_memory_user_repository import InMemoryUserRepository
from .in_memory_worklog_repository import InMemoryWorkLogRepository
from .sqlalchemy_worklog_repository import SqlAlchemyWorkLogRepository

__all__ = [
    "InMemoryNotificationRepository",
    "InMemoryUserRepository",
    "InMemoryWorkLogRepository",
    "SqlAlchemyWorkLogRepository",
]
