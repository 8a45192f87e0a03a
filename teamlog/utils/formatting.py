"""
Display formatting helpers shared by dashboards, the CLI and report export.

Contains:
- Minute durations ("3h 15m")
- Calendar day labels for tables and chart axes
- Mood averages with their symbol
- Filename-safe names
"""

import re
from datetime import date
from typing import Optional

from ..models.value_objects import Mood

NOT_APPLICABLE = "N/A"

_WHITESPACE_RUN = re.compile(r"\s+")


def format_time(minutes: int) -> str:
    """Format integer minutes as ``"<h>h <m>m"``.

    Drops the zero component: ``45 -> "45m"``, ``120 -> "2h"``,
    ``0 -> "0m"``.
    """
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def minutes_to_hours(minutes: int) -> float:
    """Minutes as fractional hours, for chart series."""
    return minutes / 60


def format_display_date(day: date) -> str:
    """``MM/DD/YYYY`` as shown in report tables."""
    return day.strftime("%m/%d/%Y")


def format_chart_date(day: date) -> str:
    """Short axis label, e.g. ``"Sun, Oct 18"``."""
    return f"{day.strftime('%a, %b')} {day.day}"


def format_month_label(year: int, month: int) -> str:
    """``"October 2026"``."""
    return date(year, month, 1).strftime("%B %Y")


def format_mood(average: Optional[float], with_symbol: bool = True) -> str:
    """Average mood to one decimal plus its symbol, or ``"N/A"`` when empty."""
    if average is None:
        return NOT_APPLICABLE
    text = f"{average:.1f}"
    if with_symbol:
        text = f"{text} {Mood.nearest(average).emoji}"
    return text


def sanitize_name(name: str) -> str:
    """Replace whitespace runs with underscores (``"Jane  Doe" -> "Jane_Doe"``)."""
    return _WHITESPACE_RUN.sub("_", name.strip())
