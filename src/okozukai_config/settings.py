"""Runtime configuration for the API, the CLI and the demo seeder.

Values come from the process environment first, then from one dotenv file.
The first of these that exists is used:

* the path in ``OKOZUKAI_ENV_FILE`` (relative paths start at the project root)
* ``config/.env.dev``
* ``config/.env``
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "OKOZUKAI_ENV_FILE"
_ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[2]


def get_config_dir() -> Path:
    """Directory holding the dotenv files."""
    return _project_root() / "config"


def _select_env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in _ENV_FILE_CANDIDATES:
        if (config_dir / name).exists():
            return config_dir / name
    return None


class Settings(BaseSettings):
    """Typed view over the environment.

    Field names map to upper-case variables, e.g. ``api_port`` is read
    from ``API_PORT``.
    """

    model_config = SettingsConfigDict(
        env_file=_select_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Okozukai"

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "okozukai"

    # Wins over the POSTGRES_* fields, e.g. sqlite+aiosqlite:///./data/okozukai.db
    database_url_override: str | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    # Comma separated; empty disables CORS
    api_cors_origins: str = ""

    seed_demo_data: bool = False
    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origin_list(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(item) for item in value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL, the override or one built for asyncpg."""
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [part.strip() for part in self.api_cors_origins.split(",") if part.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Drop the cached ``Settings`` so the next call re-reads the environment."""
    get_settings.cache_clear()
