"""Tests for container wiring."""

from pathlib import Path

from photoshare.config import Settings
from photoshare.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.auth_service.user_service is container.user_service
    assert container.user_service.password_hash_rounds == 4
    assert container.photo_service is not None
    assert Path(settings.upload_dir).is_dir()
