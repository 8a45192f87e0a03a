"""Domain value objects validated at the data-entry boundary."""

from __future__ import annotations

import enum
import math
from datetime import date, datetime
from typing import Union

from ..domain.errors import InvalidMood, WorkLogValidationError


class Mood(enum.IntEnum):
    """Ordinal 1-5 self-report of the day's sentiment."""

    VERY_FRUSTRATED = 1
    STRUGGLING = 2
    NEUTRAL = 3
    GOOD = 4
    EXCELLENT = 5

    @property
    def emoji(self) -> str:
        return _MOOD_EMOJI[self.value - 1]

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, value: object) -> "Mood":
        """Validate *value* at the data-entry boundary.

        Accepts a :class:`Mood`, an int, or a digit string. Anything outside
        1-5 raises :class:`InvalidMood`; values are never clamped.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidMood(value)
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value.strip())
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int) or not 1 <= value <= 5:
            raise InvalidMood(value)
        return cls(value)

    @classmethod
    def nearest(cls, average: float) -> "Mood":
        """Round an average mood to its display level (halves round up)."""
        rounded = int(math.floor(average + 0.5))
        return cls(min(5, max(1, rounded)))


_MOOD_EMOJI = ("😞", "😕", "😐", "🙂", "😀")


class Role(str, enum.Enum):
    DEVELOPER = "developer"
    MANAGER = "manager"


class NotificationKind(str, enum.Enum):
    REMINDER = "reminder"
    REVIEW = "review"
    SYSTEM = "system"


def parse_log_date(value: Union[date, datetime, str]) -> date:
    """Parse an ISO 8601 calendar day (``YYYY-MM-DD``) into a date.

    Datetimes are truncated to their calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise WorkLogValidationError([f"Invalid date {value!r}; expected YYYY-MM-DD"]) from e
