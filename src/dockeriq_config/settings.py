"""DockerIQ configuration.

Values come from, highest priority first:

1. process environment variables
2. the env file named by ``DOCKERIQ_ENV_FILE``, else ``config/.env.dev``,
   else ``config/.env``
3. the defaults below
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "DOCKERIQ_ENV_FILE"


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    for name in (".env.dev", ".env"):
        path = get_config_dir() / name
        if path.exists():
            return path
    return None


class Settings(BaseSettings):
    """Runtime configuration of the DockerIQ API."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "DockerIQ"
    debug: bool = False

    # Token signing; left empty, the API signs with a random per-process key
    jwt_secret_key: SecretStr = SecretStr("")
    jwt_access_token_expire_minutes: int = 60

    # sqlite+aiosqlite locally, postgresql+asyncpg in production
    database_url: str = "sqlite+aiosqlite:///./data/dockeriq.db"

    tracking_number_prefix: str = "DKIQ"

    # Seeded only into an empty user table
    bootstrap_supervisor_enabled: bool = True
    bootstrap_supervisor_email: str = "supervisor@dockeriq.local"
    bootstrap_supervisor_password: SecretStr = SecretStr("change-me-please")
    bootstrap_supervisor_first_name: str = "Default"
    bootstrap_supervisor_last_name: str = "Supervisor"

    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 8080
    api_debug: bool = False
    api_cors_origins: str = "*"

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("tracking_number_prefix")
    @classmethod
    def _validate_tracking_number_prefix(cls, v: str) -> str:
        if len(v) != 4 or not v.isalpha() or not v.isupper():
            msg = "tracking_number_prefix must be exactly 4 uppercase letters"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
