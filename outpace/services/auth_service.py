"""Registration and login."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from outpace.config import Role, Settings
from outpace.errors import DuplicateEmail, InvalidCredentials
from outpace.models.user import User
from outpace.schemas.auth import AuthResult, UserRead
from outpace.security.passwords import hash_password, verify_password
from outpace.security.tokens import TokenPayload, issue_token

logger = logging.getLogger(__name__)


class AuthService:
    """Registers users and exchanges credentials for bearer tokens."""

    def __init__(self, session: Session, settings: Settings) -> None:
        self.session = session
        self.settings = settings

    def _find_by_email(self, email: str) -> User | None:
        return self.session.exec(select(User).where(User.email == email).limit(1)).first()

    def _result_for(self, user: User) -> AuthResult:
        token = issue_token(
            TokenPayload(id=user.id, email=user.email, role=user.role),
            settings=self.settings,
        )
        return AuthResult(user=UserRead.model_validate(user), token=token)

    def register(self, name: str, email: str, password: str) -> AuthResult:
        if self._find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=Role.MEMBER,
            is_active=True,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            self.session.rollback()
            raise DuplicateEmail() from e
        self.session.refresh(user)

        logger.info("User registered: %s", user.id)
        return self._result_for(user)

    def login(self, email: str, password: str) -> AuthResult:
        user = self._find_by_email(email)
        if user is None or not user.is_active:
            logger.warning("Login rejected for unknown or inactive account")
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.warning("Login rejected for user %s: bad password", user.id)
            raise InvalidCredentials()
        return self._result_for(user)
