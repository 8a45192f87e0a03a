"""
Application configuration using Pydantic Settings.

Centralizes all configuration with environment variable support.
"""

from datetime import time
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_to_file: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/teamlog.db"

    # Simulated latency for the in-memory store (milliseconds)
    store_latency_ms: int = 0

    # Daily reminder job
    reminder_time: str = "22:00"
    reminder_message: str = "Reminder: Please submit your daily log by 10 PM."

    # Dashboards and reports
    recent_window_days: int = 7
    top_tags_limit: int = 5
    export_dir: str = "./exports"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars

    @field_validator("reminder_time")
    @classmethod
    def _check_reminder_time(cls, value: str) -> str:
        parse_hhmm(value)
        return value

    @field_validator("store_latency_ms", "recent_window_days", "top_tags_limit")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value

    @property
    def reminder_at(self) -> time:
        return parse_hhmm(self.reminder_time)

    @property
    def store_latency(self) -> float:
        """Store latency in seconds."""
        return self.store_latency_ms / 1000.0


def parse_hhmm(value: str) -> time:
    """Parse an ``HH:MM`` string into a :class:`datetime.time`."""
    try:
        hours, minutes = value.split(":")
        return time(int(hours), int(minutes))
    except ValueError as e:
        raise ValueError(f"Invalid HH:MM time {value!r}") from e


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def is_testing() -> bool:
    return get_settings().environment == "test"
