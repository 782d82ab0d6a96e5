"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photoshare.adapters.local_file_storage import LocalFileStorage
from photoshare.adapters.supabase_photo_repository import SupabasePhotoRepository
from photoshare.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from photoshare.adapters.supabase_user_repository import SupabaseUserRepository
from photoshare.config import Settings
from photoshare.services.photos import PhotoService
from photoshare.services.sessions import AuthService
from photoshare.services.uploads import UploadService
from photoshare.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    auth_service: AuthService
    photo_service: PhotoService
    upload_service: UploadService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    session_repository = SupabaseSessionRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    user_service = UserService(
        user_repository,
        password_hash_rounds=resolved_settings.password_hash_rounds,
    )
    auth_service = AuthService(
        user_service=user_service,
        session_repository=session_repository,
        session_ttl_seconds=resolved_settings.session_ttl_seconds,
    )
    photo_service = PhotoService(photo_repository)
    upload_service = UploadService(
        LocalFileStorage.create(
            resolved_settings.upload_dir, resolved_settings.upload_url_prefix
        )
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        auth_service=auth_service,
        photo_service=photo_service,
        upload_service=upload_service,
    )
