"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photoshare.domain.models import ExternalIdentity, UserRecord
from photoshare.services.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def get_by_github_id(self, github_id: str) -> UserRecord | None:
        """Return the user linked to a GitHub account, if present."""

    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str | None,
        github_id: str | None = None,
    ) -> UserRecord:
        """Create and return a new user record.

        Raises DuplicateUsername when the username is already taken.
        """


@dataclass
class UserService:
    """Credential store: user lookup, creation and password checks."""

    repository: UserRepository
    password_hash_rounds: int = 12

    def find_by_username(self, username: str) -> UserRecord | None:
        """Return the user for a username, if present."""
        return self.repository.get_by_username(username)

    def find_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        return self.repository.get_by_id(user_id)

    def verify(self, user: UserRecord, plaintext: str) -> bool:
        """Check a plaintext password for the given user."""
        return verify_password(user.password_hash, plaintext)

    def create(self, username: str, email: str, plaintext: str) -> UserRecord:
        """Hash the password and persist a new user."""
        password_hash = hash_password(plaintext, rounds=self.password_hash_rounds)
        user = self.repository.create_user(
            username=username, email=email, password_hash=password_hash
        )
        logger.info("Registered user %s", user.username)
        return user

    def ensure_external_user(self, identity: ExternalIdentity) -> UserRecord:
        """Return the user linked to an external identity, creating it if needed."""
        existing = self.repository.get_by_github_id(identity.provider_id)
        if existing:
            return existing
        return self.repository.create_user(
            username=identity.username,
            email=identity.email,
            password_hash=None,
            github_id=identity.provider_id,
        )
