"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables (or a `.env` file) with sensible
defaults where one exists.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Database
    database_url: str = Field(alias="DATABASE_URL")

    # Back office (SQLAdmin session signing)
    session_secret_key: str = Field(alias="SESSION_SECRET_KEY")

    # CORS
    cors_origins: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")

    # Tokens / passwords
    jwt_secret: str | None = Field(default=None, alias="JWT_SECRET")
    jwt_expires_days: int = Field(default=7, alias="JWT_EXPIRES_DAYS", ge=1, le=30)
    bcrypt_rounds: int = Field(default=12, alias="BCRYPT_ROUNDS", ge=4, le=16)

    # Image hosting (Cloudinary)
    cloudinary_cloud_name: str | None = Field(
        default=None, alias="CLOUDINARY_CLOUD_NAME"
    )
    cloudinary_api_key: str | None = Field(default=None, alias="CLOUDINARY_API_KEY")
    cloudinary_api_secret: str | None = Field(
        default=None, alias="CLOUDINARY_API_SECRET"
    )
    cloudinary_folder: str = Field(default="motortech/cars", alias="CLOUDINARY_FOLDER")
    max_upload_mb: int = Field(default=10, alias="MAX_UPLOAD_MB", ge=1, le=100)

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def jwt_expires_in(self) -> timedelta:
        """Get token lifetime as timedelta."""
        return timedelta(days=self.jwt_expires_days)

    @computed_field
    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
