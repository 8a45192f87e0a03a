"""
Scheduler base types.

ScheduleType / ScheduledJob describe what to run and when. Jobs are only
descriptions: they are installed into cron or systemd by an operator
(see install_generators) and never started as a side effect of import.
"""

import enum
from dataclasses import dataclass, field
from datetime import time
from typing import List, Optional

from ...core.config import Settings


class ScheduleType(enum.Enum):
    INTERVAL = "interval"
    DAILY = "daily"


@dataclass
class ScheduledJob:
    """Describes a job to be scheduled.

    ``command`` is the CLI invocation (arguments after ``teamlog``) the
    installed schedule runs.
    """

    name: str
    command: List[str]
    schedule_type: ScheduleType
    interval_seconds: Optional[int] = None
    daily_times: List[time] = field(default_factory=list)
    enabled: bool = True
    first_delay_seconds: int = 60

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("command required")
        if self.schedule_type == ScheduleType.INTERVAL and not self.interval_seconds:
            raise ValueError("interval_seconds required for INTERVAL schedule")
        if self.schedule_type == ScheduleType.DAILY and not self.daily_times:
            raise ValueError("daily_times required for DAILY schedule")


def reminder_job(settings: Settings) -> ScheduledJob:
    """The daily reminder job at ``settings.reminder_time``."""
    return ScheduledJob(
        name="daily-reminders",
        command=["remind"],
        schedule_type=ScheduleType.DAILY,
        daily_times=[settings.reminder_at],
    )
