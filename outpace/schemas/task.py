"""Task request/response DTOs.

Accepted status values are 0-2 (todo, in_progress, review/completed) even
though the table declares 0-4; priority is 0-3.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import (
    AliasChoices,
    Field,
    StrictInt,
    computed_field,
    field_validator,
    model_validator,
)

from outpace.config import MAX_ACCEPTED_STATUS, TaskPriority, TaskStatus
from outpace.schemas.common import CamelModel, UtcDatetime, parse_due_date, reject_explicit_nulls

_STATUS = {"ge": 0, "le": int(MAX_ACCEPTED_STATUS)}
_PRIORITY = {"ge": 0, "le": int(TaskPriority.CRITICAL)}


class CreateTaskRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: StrictInt = Field(default=int(TaskStatus.TODO), **_STATUS)
    priority: StrictInt = Field(default=int(TaskPriority.NORMAL), **_PRIORITY)
    due_date: datetime | None = None
    project_id: StrictInt | None = None
    assigned_to: StrictInt | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def coerce_due_date(cls, value):
        return parse_due_date(value)


class UpdateTaskRequest(CamelModel):
    """Partial update. Omitted fields are left untouched."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    status: StrictInt | None = Field(default=None, **_STATUS)
    priority: StrictInt | None = Field(default=None, **_PRIORITY)
    due_date: datetime | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def coerce_due_date(cls, value):
        return parse_due_date(value)

    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("title", "status", "priority"))
        return self


def _enum_name(enum_cls, value: int) -> str:
    try:
        return enum_cls(value).name.lower()
    except ValueError:
        return "unknown"


class TaskRead(CamelModel):
    id: int
    project_id: int | None = None
    team_id: int | None = None
    title: str
    description: str | None = None
    status: int
    priority: int
    estimate_minutes: int | None = None
    created_by: int | None = None
    created_at: UtcDatetime
    started_at: UtcDatetime | None = None
    completed_at: UtcDatetime | None = None
    due_date: UtcDatetime | None = None
    updated_at: UtcDatetime
    meta: dict | None = Field(
        default=None,
        validation_alias=AliasChoices("meta", "metadata"),
        serialization_alias="metadata",
    )

    @computed_field(alias="statusName")
    @property
    def status_name(self) -> str:
        return _enum_name(TaskStatus, self.status)

    @computed_field(alias="priorityName")
    @property
    def priority_name(self) -> str:
        return _enum_name(TaskPriority, self.priority)


class TaskListItem(TaskRead):
    creator_name: str | None = None


class TaskStats(CamelModel):
    total: int
    completed: int
    in_progress: int
    todo: int
