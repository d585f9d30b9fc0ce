"""Project model."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import SQLModel
from sqlmodel import Field as SQLField


class Project(SQLModel, table=True):
    """A project grouping tasks, owned by its creator."""

    __tablename__ = "projects"

    id: int | None = SQLField(default=None, primary_key=True)
    team_id: int | None = SQLField(default=None, foreign_key="teams.id", ondelete="CASCADE")
    created_by: int | None = SQLField(
        default=None, foreign_key="users.id", ondelete="SET NULL", index=True
    )
    title: str = SQLField(max_length=250)
    description: str | None = None
    is_archived: bool = False
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
