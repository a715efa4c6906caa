"""Configuration with environment variable support."""

from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .base_path import validate_base_path
from .models.base_config import BaseAssetsConfig, BaseServerConfig


class Settings(BaseSettings):
    """
    Base path settings with environment variable support.

    Priority: ENV > .env.local > .env > defaults
    .env.local is gitignored for local overrides
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Mount path of the application on its server
    BASE_SERVER: str = "/"
    # Absolute origin for static assets (CDN); falls back to BASE_SERVER
    BASE_ASSETS: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    @field_validator("BASE_SERVER")
    @classmethod
    def _check_base_server(cls, value: str) -> str:
        validate_base_path(value, message_prefix="[BASE_SERVER] ")
        return value

    @field_validator("BASE_ASSETS")
    @classmethod
    def _check_base_assets(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            BaseAssetsConfig(base=value)
        return value

    @property
    def base_server_config(self) -> BaseServerConfig:
        return BaseServerConfig(base=self.BASE_SERVER)

    @property
    def asset_base(self) -> str:
        """Base to hand to `prepend()` when generating asset links."""
        return self.BASE_ASSETS or self.BASE_SERVER


# Global settings instance
settings = Settings()
