"""Domain events for work log workflows.

Mutations return their events instead of triggering side effects; a
lightweight async EventBus dispatches them to subscribers.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Coroutine, Dict, Generic, Iterable, List, Optional, Type, TypeVar

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------


@dataclass
class WorkLogSubmitted:
    """Emitted whenever a developer creates a work log."""

    log_id: str
    user_id: str
    log_date: date
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass
class WorkLogUpdated:
    """Emitted after the owner edits a work log."""

    log_id: str
    user_id: str
    changed_fields: List[str]
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass
class WorkLogReviewed:
    """Emitted when a manager sets or clears the review flag."""

    log_id: str
    user_id: str
    reviewer_id: str
    reviewed: bool
    review_notes: Optional[str]
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass
class WorkLogDeleted:
    log_id: str
    user_id: str
    deleted_by: str
    timestamp: datetime = field(default_factory=_utcnow)


@dataclass
class ReminderIssued:
    """Emitted for each developer reminded to submit today's log."""

    user_id: str
    notification_id: str
    for_date: date
    timestamp: datetime = field(default_factory=_utcnow)


T = TypeVar("T")


@dataclass
class MutationResult(Generic[T]):
    """Outcome of a mutation plus the domain events it raised."""

    value: T
    events: List[Any] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------

# Type alias for an async event handler
EventHandler = Callable[[Any], Coroutine[Any, Any, None]]


class EventBus:
    """Simple in-process async event bus.

    Subscribers register for a specific event type. When that event is
    published, all registered handlers are invoked. A failing handler
    logs the error but does not prevent remaining handlers from running.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[Type, List[EventHandler]] = {}

    def subscribe(self, event_type: Type, handler: EventHandler) -> None:
        """Register *handler* for *event_type*."""
        self._subscribers.setdefault(event_type, []).append(handler)

    async def publish(self, event: Any) -> None:
        """Dispatch *event* to all registered handlers for its type."""
        handlers = self._subscribers.get(type(event), [])
        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    "Event handler %s failed for %s",
                    getattr(handler, "__name__", handler),
                    type(event).__name__,
                )

    async def publish_all(self, events: Iterable[Any]) -> None:
        """Dispatch *events* in order."""
        for event in events:
            await self.publish(event)

    async def dispatch(self, result: MutationResult) -> Any:
        """Publish the events of *result* and return its value."""
        await self.publish_all(result.events)
        return result.value


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------

_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Return the global EventBus singleton (create on first call)."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def reset_event_bus() -> None:
    """Replace the global EventBus (useful in tests)."""
    global _event_bus
    _event_bus = None
