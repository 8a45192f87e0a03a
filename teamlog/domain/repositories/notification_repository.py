"""NotificationRepository protocol: notification persistence contract."""

from typing import List, Protocol, runtime_checkable

from ...models.user import Notification
from ...models.value_objects import NotificationKind


@runtime_checkable
class NotificationRepository(Protocol):
    """Repository interface for user notifications."""

    async def add(
        self, user_id: str, message: str, kind: NotificationKind
    ) -> Notification:
        """Create and persist a notification for *user_id*."""
        ...

    async def list_for_user(self, user_id: str) -> List[Notification]:
        """Notifications for *user_id*, oldest first."""
        ...
