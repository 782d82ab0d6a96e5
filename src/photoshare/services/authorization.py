"""Route and ownership guards.

Both guards are pure decisions over an already-resolved user. Callers fetch the
resource first so a missing photo is reported as NotFound, not Forbidden.
"""

from uuid import UUID

from photoshare.domain.errors import Forbidden, Unauthenticated
from photoshare.domain.models import UserRecord


def require_user(user: UserRecord | None) -> UserRecord:
    """Allow only requests with a resolved session user."""
    if user is None:
        raise Unauthenticated
    return user


def is_owner(user: UserRecord, owner_id: UUID) -> bool:
    """Return True if the user owns a resource with the given owner id."""
    return user.id == owner_id


def ensure_owner(user: UserRecord, owner_id: UUID) -> None:
    """Raise Forbidden unless the user owns the resource."""
    if not is_owner(user, owner_id):
        raise Forbidden
