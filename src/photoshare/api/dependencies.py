"""FastAPI dependencies that resolve the session into an explicit user."""

from fastapi import Depends, Request

from photoshare.containers import AppContainer
from photoshare.domain.models import UserRecord
from photoshare.services.authorization import require_user


def get_container(request: Request) -> AppContainer:
    """Return the dependency container stored on the app."""
    return request.app.state.container


def session_token(request: Request) -> str | None:
    """Return the session token from the request cookie, if any."""
    container = get_container(request)
    return request.cookies.get(container.settings.session_cookie_name)


def current_user(
    request: Request, token: str | None = Depends(session_token)
) -> UserRecord | None:
    """Resolve the session cookie into a user, or None for anonymous requests."""
    return get_container(request).auth_service.resolve_session(token)


def authenticated_user(
    user: UserRecord | None = Depends(current_user),
) -> UserRecord:
    """Require a signed-in user. Raises Unauthenticated otherwise."""
    return require_user(user)
