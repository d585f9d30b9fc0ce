"""Shared request/response pieces: the JSON envelope, camelCase DTO base, dates."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Annotated, Any, Generic, Iterable, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and normalise aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def parse_due_date(value: Any) -> datetime | None:
    """Parse a due date. A bare ``YYYY-MM-DD`` means midnight UTC of that day."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        raise ValueError("must be an ISO 8601 date string")

    raw = value.strip()
    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        return as_utc(datetime.fromisoformat(raw))
    except ValueError:
        raise ValueError(f"invalid date: {value!r}") from None


class CamelModel(BaseModel):
    """DTO base: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_explicit_nulls(model: BaseModel, fields: Iterable[str]) -> None:
    """Partial updates may omit a field, but may not null a non-nullable one."""
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{to_camel(name)} may not be null")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by every endpoint. Unset keys are left out of the JSON."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None


def format_validation_errors(errors: Iterable[dict]) -> str:
    """Render pydantic errors as ``"field: message"`` joined by ``", "``."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        path = ".".join(loc)
        parts.append(f"{path}: {err.get('msg', 'invalid')}" if path else err.get("msg", "invalid"))
    return ", ".join(parts) or "Validation failed"
