"""Event subscribers for work log workflows.

Subscribers react to domain events and perform side effects, currently
notifications for managers (new submissions) and owners (reviews).
"""

import logging

from ..models.value_objects import NotificationKind
from .events import EventBus, WorkLogReviewed, WorkLogSubmitted
from .repositories import NotificationRepository, UserRepository

logger = logging.getLogger(__name__)


class ManagerNotifier:
    """Turns work log events into user notifications."""

    def __init__(
        self, users: UserRepository, notifications: NotificationRepository
    ) -> None:
        self._users = users
        self._notifications = notifications

    def register(self, bus: EventBus) -> None:
        """Subscribe to WorkLogSubmitted and WorkLogReviewed on the given bus."""
        bus.subscribe(WorkLogSubmitted, self.on_log_submitted)
        bus.subscribe(WorkLogReviewed, self.on_log_reviewed)

    async def on_log_submitted(self, event: WorkLogSubmitted) -> None:
        """Notify the developer's team manager, if the team has one."""
        developer = await self._users.get_by_id(event.user_id)
        if developer is None:
            logger.warning("Submitted log %s has unknown owner %s", event.log_id, event.user_id)
            return

        manager = await self._users.find_team_manager(developer.team_id)
        if manager is None:
            logger.debug("No manager for team %s; skipping notification", developer.team_id)
            return

        await self._notifications.add(
            manager.id,
            f"Developer {developer.name} has submitted a new work log.",
            NotificationKind.SYSTEM,
        )

    async def on_log_reviewed(self, event: WorkLogReviewed) -> None:
        """Tell the owner their log was reviewed."""
        if not event.reviewed:
            return
        reviewer = await self._users.get_by_id(event.reviewer_id)
        reviewer_name = reviewer.name if reviewer else "Your manager"
        message = f"{reviewer_name} reviewed your work log."
        if event.review_notes:
            message = f"{message} Notes: {event.review_notes}"
        await self._notifications.add(event.user_id, message, NotificationKind.REVIEW)
