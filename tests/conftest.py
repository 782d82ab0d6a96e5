"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID, uuid4

import pytest

from photoshare.adapters.local_file_storage import LocalFileStorage
from photoshare.config import Settings
from photoshare.containers import AppContainer
from photoshare.domain.errors import DuplicateUsername
from photoshare.domain.models import UserRecord
from photoshare.domain.photos import PhotoRecord, PhotoUpdate
from photoshare.domain.sessions import SessionRecord
from photoshare.services.photos import PhotoRepository, PhotoService, photo_matches
from photoshare.services.sessions import AuthService, SessionRepository
from photoshare.services.uploads import UploadService
from photoshare.services.users import UserRepository, UserService

FAKE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_by_github_id(self, github_id: str) -> UserRecord | None:
        for user in self.users.values():
            if user.github_id == github_id:
                return user
        return None

    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str | None,
        github_id: str | None = None,
    ) -> UserRecord:
        if self.get_by_username(username) is not None:
            raise DuplicateUsername(username)
        user = UserRecord(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=password_hash,
            github_id=github_id,
        )
        self.users[user.id] = user
        return user


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session store for tests."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)

    def create_session(
        self, token: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        session = SessionRecord(token=token, user_id=user_id, expires_at=expires_at)
        self.sessions[token] = session
        return session

    def get_session(self, token: str) -> SessionRecord | None:
        return self.sessions.get(token)

    def delete_session(self, token: str) -> None:
        self.sessions.pop(token, None)


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests."""

    user_repository: InMemoryUserRepository
    photos: dict[UUID, PhotoRecord] = field(default_factory=dict)

    def create_photo(  # noqa: PLR0913
        self,
        owner_id: UUID,
        title: str,
        description: str,
        tags: list[str],
        image_url: str,
    ) -> PhotoRecord:
        photo = PhotoRecord(
            id=uuid4(),
            owner_id=owner_id,
            title=title,
            description=description,
            tags=list(tags),
            image_url=image_url,
            created_at=datetime.now(tz=UTC),
        )
        self.photos[photo.id] = photo
        return photo

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        photo = self.photos.get(photo_id)
        return self._with_owner(photo) if photo else None

    def list_by_owner(self, owner_id: UUID) -> list[PhotoRecord]:
        return [p for p in self.photos.values() if p.owner_id == owner_id]

    def list_all(self) -> list[PhotoRecord]:
        return [self._with_owner(p) for p in self.photos.values()]

    def search(self, terms: list[str]) -> list[PhotoRecord]:
        return [
            self._with_owner(p)
            for p in self.photos.values()
            if photo_matches(p, terms)
        ]

    def update_photo(self, photo_id: UUID, update: PhotoUpdate) -> PhotoRecord | None:
        photo = self.photos.get(photo_id)
        if photo is None:
            return None
        updated = PhotoRecord(
            id=photo.id,
            owner_id=photo.owner_id,
            title=update.title,
            description=update.description,
            tags=list(update.tags),
            image_url=photo.image_url,
            created_at=photo.created_at,
        )
        self.photos[photo_id] = updated
        return updated

    def delete_photo(self, photo_id: UUID) -> None:
        self.photos.pop(photo_id, None)

    def _with_owner(self, photo: PhotoRecord) -> PhotoRecord:
        owner = self.user_repository.get_by_id(photo.owner_id)
        return PhotoRecord(
            id=photo.id,
            owner_id=photo.owner_id,
            title=photo.title,
            description=photo.description,
            tags=list(photo.tags),
            image_url=photo.image_url,
            created_at=photo.created_at,
            owner_username=owner.username if owner else None,
        )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=FAKE_SERVICE_KEY,
        password_hash_rounds=4,
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def photo_repository(
    user_repository: InMemoryUserRepository,
) -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository(user_repository)


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository, password_hash_rounds=4)


@pytest.fixture
def auth_service(
    user_service: UserService, session_repository: InMemorySessionRepository
) -> AuthService:
    return AuthService(user_service=user_service, session_repository=session_repository)


@pytest.fixture
def file_storage(settings: Settings) -> LocalFileStorage:
    return LocalFileStorage.create(settings.upload_dir, settings.upload_url_prefix)


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    auth_service: AuthService,
    photo_repository: InMemoryPhotoRepository,
    file_storage: LocalFileStorage,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        auth_service=auth_service,
        photo_service=PhotoService(photo_repository),
        upload_service=UploadService(file_storage),
    )
