"""Host runtime configuration for the plugin kernel."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    TABLE_PREFIX: str = "wp_"
    NETWORK_TABLE_PREFIX: Optional[str] = None
    PLUGINS_URL: str = "http://localhost/wp-content/plugins"
    UPLOADS_DIR: str = "uploads"
    DATABASE_URL: str = "sqlite:///transients.db"
    OBJECT_CACHE: Literal["memory", "none"] = "memory"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["text", "json"] = "text"


_settings: Optional[Settings] = None


def set_settings(settings: Settings) -> None:
    """Set the singleton settings instance used across the application."""

    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Return the active settings instance, loading it from the environment if needed."""

    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


__all__ = ["Settings", "get_settings", "set_settings"]
