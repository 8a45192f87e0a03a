"""
SQLAlchemy tables backing the production work log store.
"""

import datetime
from typing import List, Optional

from sqlalchemy import JSON, Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class WorkLogRow(Base, TimestampMixin):
    """One developer's log for one calendar day."""

    __tablename__ = "work_logs"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    mood: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-5
    blockers: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # markdown

    # Review
    reviewed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    reviewed_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    review_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    tasks: Mapped[List["TaskRow"]] = relationship(
        back_populates="log",
        cascade="all, delete-orphan",
        order_by="TaskRow.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<WorkLogRow(id={self.id}, user_id={self.user_id}, date={self.date})>"


class TaskRow(Base):
    """Task nested inside a work log; has no identity outside it."""

    __tablename__ = "work_log_tasks"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    log_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("work_logs.id", ondelete="CASCADE"), nullable=False
    )
    id: Mapped[str] = mapped_column(String(64), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    time_spent: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    tags: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    log: Mapped[WorkLogRow] = relationship(back_populates="tasks")

    def __repr__(self) -> str:
        return f"<TaskRow(id={self.id}, log_id={self.log_id}, title={self.title})>"
