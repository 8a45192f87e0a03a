"""Tests for ManagerNotifier."""

from datetime import date

import pytest

from teamlog.domain.events import EventBus, WorkLogReviewed, WorkLogSubmitted
from teamlog.domain.subscribers import ManagerNotifier
from teamlog.infrastructure.repositories import InMemoryUserRepository
from teamlog.models import NotificationKind, User


@pytest.fixture
def bus(user_repo, notification_repo):
    bus = EventBus()
    ManagerNotifier(user_repo, notification_repo).register(bus)
    return bus


class TestSubmissionNotification:
    @pytest.mark.asyncio
    async def test_team_manager_notified(self, bus, notification_repo):
        await bus.publish(WorkLogSubmitted(log_id="9", user_id="1", log_date=date(2026, 10, 18)))

        notifications = await notification_repo.list_for_user("2")
        assert len(notifications) == 1
        assert notifications[0].message == "Developer John Developer has submitted a new work log."
        assert notifications[0].kind == NotificationKind.SYSTEM
        assert notifications[0].read is False

    @pytest.mark.asyncio
    async def test_unknown_owner_is_skipped(self, bus, notification_repo):
        await bus.publish(WorkLogSubmitted(log_id="9", user_id="404", log_date=date(2026, 10, 18)))
        assert await notification_repo.list_for_user("2") == []

    @pytest.mark.asyncio
    async def test_team_without_manager(self, notification_repo):
        users = InMemoryUserRepository([User(id="7", name="Solo Dev", email="solo@example.com", team_id="9")])
        bus = EventBus()
        ManagerNotifier(users, notification_repo).register(bus)

        await bus.publish(WorkLogSubmitted(log_id="1", user_id="7", log_date=date(2026, 10, 18)))

        assert await notification_repo.list_for_user("7") == []


class TestReviewNotification:
    @pytest.mark.asyncio
    async def test_owner_notified_with_notes(self, bus, notification_repo):
        await bus.publish(
            WorkLogReviewed(
                log_id="2", user_id="1", reviewer_id="2", reviewed=True, review_notes="Nice work"
            )
        )

        (notification,) = await notification_repo.list_for_user("1")
        assert notification.kind == NotificationKind.REVIEW
        assert notification.message == "Jane Manager reviewed your work log. Notes: Nice work"

    @pytest.mark.asyncio
    async def test_unreview_does_not_notify(self, bus, notification_repo):
        await bus.publish(
            WorkLogReviewed(log_id="2", user_id="1", reviewer_id="2", reviewed=False, review_notes=None)
        )
        assert await notification_repo.list_for_user("1") == []
