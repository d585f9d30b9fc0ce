"""Team models. Declared schema only; no service reads or writes them yet."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, SmallInteger
from sqlmodel import SQLModel
from sqlmodel import Field as SQLField


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: int | None = SQLField(default=None, primary_key=True)
    name: str = SQLField(max_length=200)
    description: str | None = None
    created_by: int | None = SQLField(default=None, foreign_key="users.id", ondelete="SET NULL")
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )


class TeamMember(SQLModel, table=True):
    __tablename__ = "team_members"

    team_id: int = SQLField(foreign_key="teams.id", primary_key=True, ondelete="CASCADE")
    user_id: int = SQLField(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    role: int = SQLField(default=0, sa_type=SmallInteger)  # same scale as User.role
    joined_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
