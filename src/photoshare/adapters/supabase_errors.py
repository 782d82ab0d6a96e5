"""Error translation for Supabase calls."""

from typing import Any

import httpx
from supabase import PostgrestAPIError

from photoshare.domain.errors import PersistenceFailure

UNIQUE_VIOLATION = "23505"


def execute(query: Any, action: str) -> Any:
    """Run a Supabase query, re-raising backend errors as PersistenceFailure."""
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise PersistenceFailure(f"Failed to {action}") from exc


def is_unique_violation(error: BaseException | None) -> bool:
    """Return True if a failure was caused by a unique constraint."""
    return isinstance(error, PostgrestAPIError) and error.code == UNIQUE_VIOLATION
