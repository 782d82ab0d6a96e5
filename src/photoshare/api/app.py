"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import Response

from photoshare.api.dependencies import current_user, get_container, session_token
from photoshare.api.photos import router as photos_router
from photoshare.api.responses import (
    clear_session_cookie,
    redirect,
    render,
    set_session_cookie,
)
from photoshare.api.schemas import GalleryView, PageView, PhotoView, UserView
from photoshare.app_logging import configure_logging
from photoshare.containers import AppContainer
from photoshare.domain.errors import (
    DuplicateUsername,
    Forbidden,
    NotFound,
    PersistenceFailure,
    Unauthenticated,
)
from photoshare.domain.models import UserRecord


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(photos_router)

    @app.exception_handler(Unauthenticated)
    async def handle_unauthenticated(
        request: Request, exc: Unauthenticated
    ) -> Response:
        return redirect("/login")

    @app.exception_handler(Forbidden)
    async def handle_forbidden(request: Request, exc: Forbidden) -> Response:
        return render(
            PageView(view="error", error=str(exc)),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    @app.exception_handler(NotFound)
    async def handle_not_found(request: Request, exc: NotFound) -> Response:
        return render(
            PageView(view="error", error=str(exc) or "Not found"),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @app.exception_handler(PersistenceFailure)
    async def handle_persistence_failure(
        request: Request, exc: PersistenceFailure
    ) -> Response:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
        )
        return render(
            PageView(view="error", error="Something went wrong. Please try again."),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/")
    def home(user: UserRecord | None = Depends(current_user)) -> Response:
        """Landing page."""
        return render(PageView(view="home", user=UserView.from_record(user)))

    @app.get("/gallery")
    def gallery(
        request: Request, user: UserRecord | None = Depends(current_user)
    ) -> Response:
        """Public gallery of every photo."""
        photos = get_container(request).photo_service.list_gallery()
        return render(
            GalleryView(
                view="gallery",
                user=UserView.from_record(user),
                photos=[PhotoView.from_record(photo) for photo in photos],
            )
        )

    @app.get("/search")
    def search(
        request: Request,
        q: str = "",
        user: UserRecord | None = Depends(current_user),
    ) -> Response:
        """Search photos by title, description and tags."""
        photos = get_container(request).photo_service.search(q)
        return render(
            GalleryView(
                view="gallery",
                user=UserView.from_record(user),
                photos=[PhotoView.from_record(photo) for photo in photos],
                query=q,
            )
        )

    @app.get("/register")
    async def register_form() -> Response:
        """Registration form."""
        return render(PageView(view="register"))

    @app.post("/register")
    def register(
        request: Request,
        username: str = Form(),
        email: str = Form(),
        password: str = Form(),
    ) -> Response:
        """Create an account and sign the new user in."""
        state_container = get_container(request)
        try:
            _, token = state_container.auth_service.register(
                username, email, password
            )
        except DuplicateUsername as exc:
            return render(
                PageView(view="register", error=str(exc)),
                status_code=status.HTTP_409_CONFLICT,
            )
        response = redirect("/dashboard")
        set_session_cookie(response, state_container.settings, token)
        return response

    @app.get("/login")
    async def login_form() -> Response:
        """Login form."""
        return render(PageView(view="login"))

    @app.post("/login")
    def login(
        request: Request,
        username: str = Form(),
        password: str = Form(),
    ) -> Response:
        """Check credentials and start a session."""
        state_container = get_container(request)
        auth_service = state_container.auth_service
        result = auth_service.authenticate(username, password)
        if result.user is None:
            message = result.failure.value if result.failure else "Login failed."
            return render(
                PageView(view="login", error=message),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        token = auth_service.establish_session(result.user)
        response = redirect("/dashboard")
        set_session_cookie(response, state_container.settings, token)
        return response

    @app.get("/logout")
    def logout(
        request: Request, token: str | None = Depends(session_token)
    ) -> Response:
        """End the current session, if any."""
        state_container = get_container(request)
        state_container.auth_service.destroy_session(token)
        response = redirect("/")
        clear_session_cookie(response, state_container.settings)
        return response

    return app
