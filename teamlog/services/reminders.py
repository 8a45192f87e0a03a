"""
Daily "submit your log" reminders.

Nothing here schedules itself. An operator-controlled scheduler (cron,
systemd timer) runs ``teamlog remind`` once a day, which calls
:meth:`ReminderService.run` for that day.
"""

import logging
from datetime import date
from typing import List, Optional

from ..domain.events import MutationResult, ReminderIssued
from ..domain.repositories import NotificationRepository, UserRepository, WorkLogRepository
from ..models.user import Notification
from ..models.value_objects import NotificationKind, Role

logger = logging.getLogger(__name__)

DEFAULT_REMINDER_MESSAGE = "Reminder: Please submit your daily log by 10 PM."


class ReminderService:
    """Reminds every developer who has not logged the given day."""

    def __init__(
        self,
        users: UserRepository,
        logs: WorkLogRepository,
        notifications: NotificationRepository,
        message: str = DEFAULT_REMINDER_MESSAGE,
    ) -> None:
        self._users = users
        self._logs = logs
        self._notifications = notifications
        self._message = message

    async def missing_developers(self, day: date) -> List[str]:
        """IDs of developers without a log dated *day*."""
        developers = await self._users.list_by_role(Role.DEVELOPER)
        logged = {log.user_id for log in await self._logs.list(start_date=day, end_date=day)}
        return [dev.id for dev in developers if dev.id not in logged]

    async def run(self, today: Optional[date] = None) -> MutationResult[List[Notification]]:
        """Create one reminder per developer missing today's log."""
        today = today or date.today()
        created: List[Notification] = []
        events = []
        for user_id in await self.missing_developers(today):
            notification = await self._notifications.add(
                user_id, self._message, NotificationKind.REMINDER
            )
            created.append(notification)
            events.append(
                ReminderIssued(user_id=user_id, notification_id=notification.id, for_date=today)
            )
        logger.info("Daily reminder run for %s: %d reminder(s) sent", today, len(created))
        return MutationResult(created, events)
