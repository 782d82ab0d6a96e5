"""Session authentication: credentials in, session token out."""

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Protocol
from uuid import UUID

from photoshare.domain.models import ExternalIdentity, UserRecord
from photoshare.domain.sessions import SessionRecord
from photoshare.services.users import UserService

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 14 * 24 * 60 * 60


class SessionRepository(Protocol):
    """Persistence interface for login sessions keyed by token."""

    def create_session(
        self, token: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Store a new session and return it."""

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""

    def delete_session(self, token: str) -> None:
        """Delete a session. Unknown tokens are ignored."""


class ExternalIdentityProvider(Protocol):
    """Optional third-party login provider (e.g. GitHub OAuth)."""

    def authorization_url(self, state: str) -> str:
        """Return the URL that starts the provider's login flow."""

    def fetch_identity(self, code: str) -> ExternalIdentity:
        """Exchange a callback code for the provider's identity."""


class AuthFailure(Enum):
    """Reasons an authentication attempt can fail."""

    INVALID_CREDENTIALS = "Invalid username or password."


@dataclass(frozen=True)
class AuthResult:
    """Outcome of an authentication attempt."""

    user: UserRecord | None = None
    failure: AuthFailure | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class AuthService:
    """Turns verified credentials into sessions and sessions back into users."""

    user_service: UserService
    session_repository: SessionRepository
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    external_provider: ExternalIdentityProvider | None = None
    clock: Callable[[], datetime] = _utcnow

    def authenticate(self, username: str, password: str) -> AuthResult:
        """Check a username/password pair.

        Unknown users and wrong passwords produce the same failure so callers
        cannot tell which part was wrong.
        """
        user = self.user_service.find_by_username(username)
        if user is None or not self.user_service.verify(user, password):
            logger.info("Failed login for %s", username)
            return AuthResult(failure=AuthFailure.INVALID_CREDENTIALS)
        return AuthResult(user=user)

    def register(
        self, username: str, email: str, password: str
    ) -> tuple[UserRecord, str]:
        """Create a user and log them in immediately."""
        user = self.user_service.create(username, email, password)
        return user, self.establish_session(user)

    def authenticate_external(self, identity: ExternalIdentity) -> UserRecord:
        """Find or create the user behind an external provider identity."""
        if self.external_provider is None:
            raise RuntimeError("No external identity provider is configured")
        return self.user_service.ensure_external_user(identity)

    def establish_session(self, user: UserRecord) -> str:
        """Create a session for the user and return its token."""
        token = secrets.token_urlsafe(32)
        expires_at = self.clock() + timedelta(seconds=self.session_ttl_seconds)
        self.session_repository.create_session(
            token=token, user_id=user.id, expires_at=expires_at
        )
        logger.info("Session established for %s", user.username)
        return token

    def resolve_session(self, token: str | None) -> UserRecord | None:
        """Return the user behind an active session token, if any."""
        if not token:
            return None
        session = self.session_repository.get_session(token)
        if session is None:
            return None
        if session.expires_at <= self.clock():
            self.session_repository.delete_session(token)
            return None
        return self.user_service.find_by_id(session.user_id)

    def destroy_session(self, token: str | None) -> None:
        """End a session. Safe to call with unknown or expired tokens."""
        if not token:
            return
        self.session_repository.delete_session(token)
