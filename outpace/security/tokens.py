"""Signed, time-limited bearer tokens (JWT, HS256 by default).

The payload carries the user's identity and role; verification is by
signature and expiry only, with no server-side session lookup.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import jwt

from outpace.config import Settings


class TokenError(Exception):
    """Raised when a token is malformed, tampered with or expired."""


@dataclass(frozen=True)
class TokenPayload:
    id: int
    email: str
    role: int


def issue_token(payload: TokenPayload, *, settings: Settings, now: int | None = None) -> str:
    """Issue a signed token for ``payload`` expiring after ``settings.jwt_expires_in``."""
    issued_at = int(now if now is not None else time.time())
    claims = {
        "id": payload.id,
        "email": payload.email,
        "role": payload.role,
        "iat": issued_at,
        "exp": issued_at + settings.jwt_expires_seconds,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, *, settings: Settings) -> TokenPayload:
    """Decode and verify ``token``. Raises TokenError on any failure."""
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise TokenError("Invalid token") from e

    try:
        return TokenPayload(id=int(claims["id"]), email=str(claims["email"]), role=int(claims["role"]))
    except (KeyError, TypeError, ValueError) as e:
        raise TokenError("Invalid token payload") from e
