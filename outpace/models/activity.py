"""Notification, performance and activity-log tables.

Declared schema only: nothing in the services populates or reads them.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Numeric, SmallInteger, UniqueConstraint
from sqlmodel import JSON, Column, SQLModel
from sqlmodel import Field as SQLField


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: int | None = SQLField(default=None, primary_key=True)
    user_id: int = SQLField(foreign_key="users.id", ondelete="CASCADE")
    team_id: int | None = None
    type: int | None = SQLField(default=None, sa_type=SmallInteger)
    payload: dict | None = SQLField(default=None, sa_column=Column(JSON))
    is_read: bool = False
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )


class TaskPerformance(SQLModel, table=True):
    __tablename__ = "task_performance"
    __table_args__ = (UniqueConstraint("task_id", "user_id", "date_day"),)

    id: int | None = SQLField(default=None, primary_key=True)
    task_id: int | None = SQLField(default=None, foreign_key="tasks.id", ondelete="CASCADE")
    user_id: int | None = SQLField(default=None, foreign_key="users.id")
    date_day: date
    tasks_completed: int = 0
    avg_completion_seconds: int = 0
    overdue_count: int = 0
    efficiency: Decimal = SQLField(default=Decimal("0.000"), sa_type=Numeric(5, 3))
    updated_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )


class ActivityLog(SQLModel, table=True):
    __tablename__ = "activity_logs"

    id: int | None = SQLField(default=None, primary_key=True)
    team_id: int | None = None
    project_id: int | None = None
    task_id: int | None = SQLField(default=None, index=True)
    user_id: int | None = SQLField(default=None, index=True)
    type: int = SQLField(sa_type=SmallInteger)
    payload: dict | None = SQLField(default=None, sa_column=Column(JSON))
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
