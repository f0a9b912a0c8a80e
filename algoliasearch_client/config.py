"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_MS = 30 * 1000


class AgentSettings(BaseModel):
    max_connections: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on open sockets; None means unbounded.",
    )
    max_keepalive_connections: int = Field(default=20, ge=0)
    keepalive_expiry_seconds: float = Field(default=5.0, ge=0)


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ALGOLIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    application_id: str | None = None
    api_key: SecretStr | None = None
    # Global deadline in milliseconds, even an active socket is killed past it.
    timeout: int = Field(default=DEFAULT_TIMEOUT_MS, ge=1)
    protocol: Literal["http:", "https:"] = "https:"
    user_agent: str | None = None
    debug: bool = False

    agent: AgentSettings = Field(default_factory=AgentSettings)

    @field_validator("application_id", "user_agent", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached settings instance."""

    return ClientSettings()


__all__ = ["AgentSettings", "ClientSettings", "DEFAULT_TIMEOUT_MS", "get_settings"]
