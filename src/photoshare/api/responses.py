"""Response helpers shared by the route modules."""

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from photoshare.api.schemas import PageView
from photoshare.config import Settings


def render(view: PageView, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize a view model for the presentation layer."""
    return JSONResponse(view.model_dump(mode="json"), status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    """Redirect a browser form post to another page."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    """Attach the session token cookie to a response."""
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the session token cookie."""
    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
