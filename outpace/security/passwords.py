"""Password hashing (bcrypt via passlib)."""

from __future__ import annotations

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt."""
    return _pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against its hash. Malformed hashes never verify."""
    try:
        return _pwd_context.verify(password, hashed)
    except ValueError:
        return False
