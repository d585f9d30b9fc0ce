"""Health check endpoint.

Answers 200 with ``status: "ok"`` whenever the process can serve requests.
Dependency probes are reported under ``checks`` and never change the
top-level status.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()

VERSION = "0.1.0"


class HealthStatus(BaseModel):
    status: str = "ok"
    version: str
    checks: dict[str, dict]
    timestamp: datetime


@router.get("/health", response_model=HealthStatus)
def health_check(request: Request) -> HealthStatus:
    checks: dict[str, dict] = {}

    try:
        request.app.state.db.ping()
        checks["database"] = {"status": "ok", "detail": request.app.state.db.engine.dialect.name}
    except Exception as e:
        checks["database"] = {"status": "error", "detail": str(e)[:200]}

    return HealthStatus(
        version=VERSION,
        checks=checks,
        timestamp=datetime.now(timezone.utc),
    )
