"""Project request/response DTOs."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt, model_validator

from outpace.schemas.common import CamelModel, UtcDatetime, reject_explicit_nulls


class CreateProjectRequest(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    team_id: StrictInt | None = None


class UpdateProjectRequest(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    is_archived: StrictBool | None = None

    @model_validator(mode="after")
    def check_required_not_null(self):
        reject_explicit_nulls(self, ("title", "is_archived"))
        return self


class ProjectRead(CamelModel):
    id: int
    team_id: StrictInt | None = None
    created_by: int | None = None
    title: str
    description: str | None = None
    is_archived: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime
