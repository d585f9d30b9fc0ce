"""Bearer token authentication middleware.

Protected paths (tasks and projects) require ``Authorization: Bearer <token>``.
The token is verified by signature and expiry only; the decoded identity
(id, email, role) is attached to ``request.state.user`` without a database
lookup, so a stale token carries stale email/role until it is re-issued.

Everything else (/health, /, /api/auth/*, docs) is public.
"""

from __future__ import annotations

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from outpace.config import Settings
from outpace.errors import Unauthorized
from outpace.security.tokens import TokenError, TokenPayload, verify_token

logger = logging.getLogger(__name__)

# Path prefixes that require authentication
_PROTECTED_PREFIXES = ("/api/tasks", "/api/projects")


def is_protected(path: str) -> bool:
    return any(path == p or path.startswith(p + "/") for p in _PROTECTED_PREFIXES)


def authenticate(authorization: str | None, settings: Settings) -> TokenPayload:
    """Resolve an Authorization header to the identity it carries."""
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized("No token provided")

    token = authorization[7:].strip()
    if not token:
        raise Unauthorized("No token provided")

    try:
        return verify_token(token, settings=settings)
    except TokenError as e:
        raise Unauthorized("Invalid token") from e


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Validates the bearer token on protected paths."""

    def __init__(self, app, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or not is_protected(request.url.path):
            return await call_next(request)

        try:
            request.state.user = authenticate(request.headers.get("Authorization"), self.settings)
        except Unauthorized as e:
            logger.warning(
                "Rejected request from %s on %s: %s",
                request.client.host if request.client else "unknown",
                request.url.path,
                e.message,
            )
            return JSONResponse(
                status_code=e.status_code,
                content={"success": False, "error": e.message},
            )

        return await call_next(request)


def current_user(request: Request) -> TokenPayload:
    """Dependency: the identity the middleware attached to this request."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise Unauthorized("No token provided")
    return user
