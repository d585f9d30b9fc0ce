"""Error taxonomy.

Services raise ``AppError`` subclasses; the handlers in ``outpace.main`` turn
them into the JSON envelope using ``STATUS_BY_KIND``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.DUPLICATE: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class AppError(Exception):
    """Base error carrying its kind alongside a user-visible message."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationFailed(AppError):
    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"


class DuplicateEmail(AppError):
    kind = ErrorKind.DUPLICATE
    default_message = "Email already registered"


class InvalidCredentials(AppError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Invalid email or password"


class Unauthorized(AppError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Unauthorized"


class Forbidden(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Forbidden"


class NotFound(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"
