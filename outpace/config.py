"""Outpace configuration - settings and domain constants."""

from __future__ import annotations

import re
from enum import IntEnum

from pydantic import field_validator
from pydantic_settings import BaseSettings

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([a-z]*)\s*$", re.IGNORECASE)
_DURATION_UNITS = {
    "": 1,
    "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
    "m": 60, "min": 60, "mins": 60, "minute": 60, "minutes": 60,
    "h": 3600, "hr": 3600, "hrs": 3600, "hour": 3600, "hours": 3600,
    "d": 86400, "day": 86400, "days": 86400,
    "w": 604800, "week": 604800, "weeks": 604800,
    "y": 31557600, "yr": 31557600, "yrs": 31557600, "year": 31557600, "years": 31557600,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    environment: str = "development"  # "development" | "production"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///data/outpace.db"
    db_pool_size: int = 10
    db_connect_timeout: int = 10  # seconds to wait for a pooled connection
    db_idle_timeout: int = 20  # seconds before a pooled connection is recycled

    # Auth
    jwt_secret: str = "outpace-development-secret-change-me"
    jwt_expires_in: str = "7d"  # "<n>[unit]", e.g. "45s", "30m", "12h", "7d", "2w", "1y"
    jwt_algorithm: str = "HS256"

    # CORS (comma-separated origins, "*" = any)
    cors_origins: str = "*"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("jwt_expires_in")
    @classmethod
    def check_jwt_expires_in(cls, value: str) -> str:
        parse_duration(value)
        return value

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def jwt_expires_seconds(self) -> int:
        return parse_duration(self.jwt_expires_in)

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def parse_duration(value: str) -> int:
    """Convert "7d", "12h", "30 minutes", "2w" or "3600" to seconds.

    A bare number is seconds. A year is 365.25 days.
    """
    match = _DURATION_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    multiplier = _DURATION_UNITS.get(unit.lower())
    if multiplier is None or int(amount) == 0:
        raise ValueError(f"Invalid duration: {value!r}")
    return int(amount) * multiplier


class Role(IntEnum):
    MEMBER = 0
    MANAGER = 1
    ADMIN = 2


class TaskStatus(IntEnum):
    TODO = 0
    IN_PROGRESS = 1
    REVIEW = 2
    DONE = 3
    BLOCKED = 4


class TaskPriority(IntEnum):
    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


# Statuses the request validators accept. Status 2 doubles as "completed" in stats.
MAX_ACCEPTED_STATUS = TaskStatus.REVIEW
COMPLETED_STATUS = TaskStatus.REVIEW


settings = Settings()
