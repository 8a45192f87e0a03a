"""In-memory implementation of NotificationRepository."""

import logging
from typing import Callable, List

from ...models.user import Notification
from ...models.value_objects import NotificationKind
from ...models.worklog import generate_id

logger = logging.getLogger(__name__)


class InMemoryNotificationRepository:
    """Concrete NotificationRepository backed by a list."""

    def __init__(self, id_factory: Callable[[], str] = generate_id) -> None:
        self._notifications: List[Notification] = []
        self._new_id = id_factory

    async def add(
        self, user_id: str, message: str, kind: NotificationKind
    ) -> Notification:
        notification = Notification(
            id=self._new_id(), user_id=user_id, message=message, kind=kind
        )
        self._notifications.append(notification)
        logger.info("Notification created for user %s: %s", user_id, message)
        return notification

    async def list_for_user(self, user_id: str) -> List[Notification]:
        return [n for n in self._notifications if n.user_id == user_id]
