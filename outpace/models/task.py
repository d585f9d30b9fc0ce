"""Task, TaskAssignment and TaskComment models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, SmallInteger, UniqueConstraint
from sqlmodel import JSON, Column, SQLModel
from sqlmodel import Field as SQLField

from outpace.config import TaskPriority, TaskStatus


class Task(SQLModel, table=True):
    """A unit of work, owned by its creator."""

    __tablename__ = "tasks"

    id: int | None = SQLField(default=None, primary_key=True)
    project_id: int | None = SQLField(default=None, foreign_key="projects.id", ondelete="SET NULL")
    team_id: int | None = SQLField(
        default=None, foreign_key="teams.id", ondelete="SET NULL", index=True
    )
    title: str = SQLField(max_length=300)
    description: str | None = None
    # 0=todo, 1=in_progress, 2=review, 3=done, 4=blocked
    status: int = SQLField(default=TaskStatus.TODO, sa_type=SmallInteger, index=True)
    # 0=low, 1=normal, 2=high, 3=critical
    priority: int = SQLField(default=TaskPriority.NORMAL, sa_type=SmallInteger)
    estimate_minutes: int | None = None
    created_by: int | None = SQLField(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True
    )
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    started_at: datetime | None = SQLField(default=None, sa_type=DateTime(timezone=True))
    completed_at: datetime | None = SQLField(default=None, sa_type=DateTime(timezone=True))
    due_date: datetime | None = SQLField(default=None, sa_type=DateTime(timezone=True))
    updated_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    # "metadata" is reserved on SQLModel classes, so the attribute is renamed
    meta: dict | None = SQLField(default=None, sa_column=Column("metadata", JSON))


class TaskAssignment(SQLModel, table=True):
    """Links a task to an assignee. One row per (task, user)."""

    __tablename__ = "task_assignments"
    __table_args__ = (UniqueConstraint("task_id", "user_id"),)

    id: int | None = SQLField(default=None, primary_key=True)
    task_id: int = SQLField(foreign_key="tasks.id", ondelete="CASCADE", index=True)
    user_id: int = SQLField(foreign_key="users.id", ondelete="CASCADE", index=True)
    assigned_by: int | None = SQLField(default=None, foreign_key="users.id", ondelete="SET NULL")
    assigned_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )


class TaskComment(SQLModel, table=True):
    __tablename__ = "task_comments"

    id: int | None = SQLField(default=None, primary_key=True)
    task_id: int = SQLField(foreign_key="tasks.id", ondelete="CASCADE")
    user_id: int | None = SQLField(default=None, foreign_key="users.id", ondelete="SET NULL")
    body: str
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
