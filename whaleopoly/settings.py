"""
Application configuration using pydantic-settings.

Covers the optional remote rules authority. Game rules themselves are
configured through `whaleopoly.config.GameConfig`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RemoteAuthoritySettings(BaseSettings):
    """
    Configuration for the remote rules authority endpoint.

    Environment variables (prefix: WHALEOPOLY_):
        WHALEOPOLY_REMOTE_BASE_URL        - Base URL of the authority API (unset = local only)
        WHALEOPOLY_REMOTE_TIMEOUT_SECONDS - Request timeout in seconds (default: 5)
        WHALEOPOLY_GAME_ID                - Game identifier known to the authority
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WHALEOPOLY_",
    )

    remote_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of the remote authority, e.g. http://localhost:8080/api.",
    )
    remote_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="HTTP request timeout in seconds.",
    )
    game_id: int = Field(
        default=0,
        ge=0,
        description="Game identifier used in authority requests.",
    )

    @field_validator("remote_base_url", mode="before")
    @classmethod
    def strip_base_url(cls, value: Optional[str]) -> Optional[str]:
        """Treat blank values as unset and drop trailing slashes."""
        if value is None:
            return None
        value = str(value).strip().rstrip("/")
        return value or None

    @property
    def remote_enabled(self) -> bool:
        return self.remote_base_url is not None


@lru_cache
def get_remote_settings() -> RemoteAuthoritySettings:
    """Return cached remote authority settings instance."""
    return RemoteAuthoritySettings()
