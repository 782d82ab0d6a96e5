"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    session_cookie_name: str = "photoshare_session"
    session_ttl_seconds: int = 14 * 24 * 60 * 60
    session_cookie_secure: bool = False
    password_hash_rounds: int = 12
    upload_dir: str = "public/uploads"
    upload_url_prefix: str = "/uploads"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
