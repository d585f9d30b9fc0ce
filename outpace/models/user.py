"""User model."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, SmallInteger
from sqlmodel import SQLModel
from sqlmodel import Field as SQLField

from outpace.config import Role


class User(SQLModel, table=True):
    """An account that owns projects and tasks."""

    __tablename__ = "users"

    id: int | None = SQLField(default=None, primary_key=True)
    name: str = SQLField(max_length=150)
    email: str = SQLField(max_length=255, unique=True)
    password_hash: str
    role: int = SQLField(default=Role.MEMBER, sa_type=SmallInteger)  # 0=member, 1=manager, 2=admin
    is_active: bool = True
    created_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = SQLField(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
