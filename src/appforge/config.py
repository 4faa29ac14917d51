"""Settings for appforge, loaded with pydantic-settings.

Every field can be overridden with an ``APPFORGE_``-prefixed environment
variable or an entry in a local ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppForgeSettings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="APPFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Sessions ===
    sessions_base_path: str = Field(
        default="/private/tmp/term-users/",
        description="Root under which every session gets its own working directory",
    )
    session_store: Literal["memory", "redis"] = Field(
        default="memory",
        description="Where the session registry lives",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (required for the redis session store)",
        examples=["redis://redis:6379"],
    )

    # === Simulated execution ===
    command_delay_ms: int = Field(default=500, ge=0, description="Latency per command")
    file_delay_ms: int = Field(default=200, ge=0, description="Latency per file write")

    # === AI provider ===
    gemini_api_key: str | None = Field(default=None, description="Gemini API key")
    gemini_model: str = Field(default="gemini-2.5-flash-preview-04-17")
    gemini_base_url: str = Field(default="https://generativelanguage.googleapis.com/v1beta")
    ai_timeout_seconds: float = Field(default=60.0, gt=0)

    # === Logging ===
    service_name: str = Field(default="appforge", description="Service name for logs")
    log_format: Literal["json", "console"] = Field(default="console")
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")

    @field_validator("sessions_base_path")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else f"{v}/"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @model_validator(mode="after")
    def require_redis_url(self) -> "AppForgeSettings":
        if self.session_store == "redis" and not self.redis_url:
            raise ValueError("redis_url is required when session_store is 'redis'")
        return self


@lru_cache
def get_settings() -> AppForgeSettings:
    return AppForgeSettings()
