"""Photo management routes. All require a signed-in user."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import Response

from photoshare.api.dependencies import authenticated_user, get_container
from photoshare.api.responses import redirect, render
from photoshare.api.schemas import (
    GalleryView,
    PageView,
    PhotoFormView,
    PhotoView,
    UserView,
)
from photoshare.domain.errors import (
    NotFound,
    PersistenceFailure,
    UnsupportedMediaType,
)
from photoshare.domain.models import UserRecord
from photoshare.domain.photos import PhotoUpdate, parse_tags

logger = logging.getLogger(__name__)

router = APIRouter(tags=["photos"])


@router.get("/dashboard")
def dashboard(
    request: Request, user: UserRecord = Depends(authenticated_user)
) -> Response:
    """List the signed-in user's own photos."""
    photos = get_container(request).photo_service.list_for_owner(user)
    return render(
        GalleryView(
            view="dashboard",
            user=UserView.from_record(user),
            photos=[PhotoView.from_record(photo) for photo in photos],
        )
    )


@router.get("/upload")
def upload_form(user: UserRecord = Depends(authenticated_user)) -> Response:
    """Show the upload form."""
    return render(PageView(view="upload", user=UserView.from_record(user)))


@router.post("/upload")
def upload_photo(  # noqa: PLR0913
    request: Request,
    user: UserRecord = Depends(authenticated_user),
    photo: UploadFile | None = File(default=None),
    title: str = Form(default=""),
    description: str = Form(default=""),
    tags: str = Form(default=""),
) -> Response:
    """Store an uploaded image and create a photo owned by the user."""
    container = get_container(request)
    try:
        if photo is None:
            raise UnsupportedMediaType
        stored = container.upload_service.accept(
            photo.file, photo.content_type, photo.filename
        )
    except UnsupportedMediaType as exc:
        return render(
            PageView(view="upload", user=UserView.from_record(user), error=str(exc)),
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        )
    try:
        container.photo_service.create(
            owner=user,
            title=title,
            description=description,
            tags=parse_tags(tags),
            image_url=stored.url,
        )
    except PersistenceFailure:
        container.upload_service.discard(stored.url)
        raise
    return redirect("/dashboard")


@router.get("/edit/{photo_id}")
def edit_form(
    photo_id: str, request: Request, user: UserRecord = Depends(authenticated_user)
) -> Response:
    """Show the edit form for a photo the user owns."""
    photo = get_container(request).photo_service.get_owned_photo(
        user, _parse_photo_id(photo_id)
    )
    return render(
        PhotoFormView(
            view="edit",
            user=UserView.from_record(user),
            photo=PhotoView.from_record(photo),
        )
    )


@router.post("/edit/{photo_id}")
def edit_photo(  # noqa: PLR0913
    photo_id: str,
    request: Request,
    user: UserRecord = Depends(authenticated_user),
    title: str = Form(default=""),
    description: str = Form(default=""),
    tags: str = Form(default=""),
) -> Response:
    """Update the title, description and tags of an owned photo."""
    get_container(request).photo_service.edit(
        user,
        _parse_photo_id(photo_id),
        PhotoUpdate(title=title, description=description, tags=parse_tags(tags)),
    )
    return redirect("/dashboard")


@router.post("/delete/{photo_id}")
def delete_photo(
    photo_id: str, request: Request, user: UserRecord = Depends(authenticated_user)
) -> Response:
    """Delete an owned photo and its stored image."""
    container = get_container(request)
    photo = container.photo_service.delete(user, _parse_photo_id(photo_id))
    try:
        container.upload_service.discard(photo.image_url)
    except PersistenceFailure:
        logger.exception("Failed to remove stored image for photo %s", photo.id)
    return redirect("/dashboard")


def _parse_photo_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError as exc:
        raise NotFound(f"Photo {raw} not found") from exc
