"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _env(key: str, default: str = "") -> str:
    """Read an environment variable, falling back to a default."""
    return os.environ.get(key, default)


def _env_float(key: str, default: float) -> float:
    raw = _env(key)
    return float(raw) if raw else default


def _env_bool(key: str, default: bool) -> bool:
    raw = _env(key)
    if not raw:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "career-canvas"))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    secret_key: str = field(default_factory=lambda: _env("APP_SECRET_KEY"))
    host: str = field(default_factory=lambda: _env("APP_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(_env("APP_PORT", "8000")))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class EditorConfig:
    """Settings for the resume editor session and its profile API client."""

    api_base_url: str = field(
        default_factory=lambda: _env("PROFILE_API_URL", "http://localhost:8000")
    )
    autosave_delay_seconds: float = field(
        default_factory=lambda: _env_float("AUTOSAVE_DELAY_SECONDS", 5.0)
    )
    reschedule_dropped_autosave: bool = field(
        default_factory=lambda: _env_bool("AUTOSAVE_RESCHEDULE_DROPPED", default=True)
    )


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    app: AppConfig = field(default_factory=AppConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)


def load_settings() -> Settings:
    """Load settings, reading a local .env file first when present."""
    load_dotenv()
    return Settings()
