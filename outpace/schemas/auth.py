"""Auth request/response DTOs."""

from __future__ import annotations

from pydantic import EmailStr, Field

from outpace.schemas.common import CamelModel, UtcDatetime


class RegisterRequest(CamelModel):
    name: str = Field(min_length=2, max_length=150)
    email: EmailStr
    # bcrypt only reads the first 72 bytes
    password: str = Field(min_length=6, max_length=72)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class UserRead(CamelModel):
    """A user as returned to clients. Never includes the password hash."""

    id: int
    name: str
    email: str
    role: int
    is_active: bool
    created_at: UtcDatetime


class AuthResult(CamelModel):
    user: UserRead
    token: str
