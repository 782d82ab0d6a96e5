"""Domain models for users and their identities."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str
    email: str
    password_hash: str | None
    github_id: str | None = None


@dataclass(frozen=True)
class ExternalIdentity:
    """Identity asserted by an external login provider."""

    provider_id: str
    username: str
    email: str
