"""Scheduling descriptions for operator-installed jobs."""

from .base import ScheduledJob, ScheduleType, reminder_job

__all__ = ["ScheduleType", "ScheduledJob", "reminder_job"]
