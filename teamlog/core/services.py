"""
Service Registry - wires the application's services to their dependencies.

Services are registered lazily and instantiated on first access. The work
log repository defaults to the seeded in-memory demo store; pass a
``SqlAlchemyWorkLogRepository`` bound to an open session for the database.

Usage:
    from teamlog.core.services import Services, setup_services

    container = setup_services()
    service = container.get(Services.WORKLOG)
"""

import logging
from datetime import date
from typing import Optional

from ..domain.events import EventBus
from ..domain.repositories import WorkLogRepository
from .config import Settings, get_settings
from .container import ServiceContainer, get_container

logger = logging.getLogger(__name__)


class Services:
    """Constants for service names."""

    SETTINGS = "settings"
    EVENT_BUS = "event_bus"
    USERS = "users"
    NOTIFICATIONS = "notifications"
    WORKLOG_REPOSITORY = "worklog_repository"
    WORKLOG = "worklog_service"
    REMINDERS = "reminder_service"
    EXPORTER = "report_exporter"


def setup_services(
    container: Optional[ServiceContainer] = None,
    settings: Optional[Settings] = None,
    worklog_repository: Optional[WorkLogRepository] = None,
    today: Optional[date] = None,
) -> ServiceContainer:
    """
    Register all application services and subscribe event handlers.

    Args:
        container: Target container (the global one by default)
        settings: Settings override (``get_settings()`` by default)
        worklog_repository: Store to use instead of the demo data set
        today: Anchor date for the demo data set
    """
    container = container or get_container()
    settings = settings or get_settings()

    container.register_instance(Services.SETTINGS, settings)
    container.register_instance(Services.EVENT_BUS, EventBus())

    # ========================================================================
    # Repositories
    # ========================================================================

    def create_users(c):
        from ..infrastructure.seed import demo_user_repository

        return demo_user_repository()

    container.register(Services.USERS, create_users)

    def create_notifications(c):
        from ..infrastructure.repositories import InMemoryNotificationRepository

        return InMemoryNotificationRepository()

    container.register(Services.NOTIFICATIONS, create_notifications)

    if worklog_repository is not None:
        container.register_instance(Services.WORKLOG_REPOSITORY, worklog_repository)
    else:

        def create_worklog_repository(c):
            from ..infrastructure.seed import demo_worklog_repository

            return demo_worklog_repository(
                today, latency=c.get(Services.SETTINGS).store_latency
            )

        container.register(Services.WORKLOG_REPOSITORY, create_worklog_repository)

    # ========================================================================
    # Application services
    # ========================================================================

    def create_worklog_service(c):
        from ..services.worklog_service import WorkLogService

        return WorkLogService(c.get(Services.WORKLOG_REPOSITORY))

    container.register(Services.WORKLOG, create_worklog_service)

    def create_reminder_service(c):
        from ..services.reminders import ReminderService

        return ReminderService(
            c.get(Services.USERS),
            c.get(Services.WORKLOG_REPOSITORY),
            c.get(Services.NOTIFICATIONS),
            message=c.get(Services.SETTINGS).reminder_message,
        )

    container.register(Services.REMINDERS, create_reminder_service)

    def create_exporter(c):
        from ..services.report_export import ReportExporter

        return ReportExporter()

    container.register(Services.EXPORTER, create_exporter)

    # ========================================================================
    # Event subscribers
    # ========================================================================

    from ..domain.subscribers import ManagerNotifier

    ManagerNotifier(
        container.get(Services.USERS), container.get(Services.NOTIFICATIONS)
    ).register(container.get(Services.EVENT_BUS))

    logger.info("All services registered in container")
    return container
