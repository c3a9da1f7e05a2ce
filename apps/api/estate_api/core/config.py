"""Application configuration for the real-estate API."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, TypeVar

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

SettingsT = TypeVar("SettingsT", bound="DatabaseSettings")


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the given environment."""


class DatabaseSettings(BaseSettings):
    """Connection settings; enough for schema and account maintenance scripts."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    database_url: str = Field(min_length=1)
    database_echo: bool = Field(default=False)

    @property
    def database_async_url(self) -> str:
        """Return the database URL with an async driver selected."""

        url = self.database_url
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + url[len("postgresql://"):]
        if url.startswith("sqlite://"):
            return "sqlite+aiosqlite://" + url[len("sqlite://"):]
        return url


class Settings(DatabaseSettings):
    """Runtime configuration for the API process, read once at startup."""

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    log_level: str = Field(default="INFO")

    admin_username: str = Field(default="admin")
    admin_password_hash: str = Field(min_length=1)

    session_secret: str = Field(min_length=1)
    session_ttl_minutes: int = Field(default=24 * 60, gt=0)
    session_cookie_name: str = Field(default="admin_session")
    session_cookie_secure: bool = Field(default=False)

    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: [
        "http://localhost:3000",
        "http://localhost:5000",
        "http://localhost:5173",
    ])

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value


def required_env_vars(settings_cls: type[BaseSettings]) -> list[str]:
    return [name.upper() for name, field in settings_cls.model_fields.items() if field.is_required()]


def load_settings(settings_cls: type[SettingsT] = Settings, **overrides: object) -> SettingsT:
    """Build settings, turning missing required values into one clear error."""

    try:
        return settings_cls(**overrides)
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            name = str(error["loc"][0]).upper() if error["loc"] else "?"
            if error["type"] == "missing":
                problems.append(f"{name} is not set")
            else:
                problems.append(f"{name}: {error['msg']}")
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems)
            + f". Required environment variables: {', '.join(required_env_vars(settings_cls))}."
        ) from exc


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return load_settings()
