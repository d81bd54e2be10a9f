"""Application settings with environment variable support."""

from __future__ import annotations

import functools
from typing import Annotated, Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from mailupselling.config.exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Redis / RQ
    redis_url: str = Field(
        default="redis://localhost:6379", description="Redis connection URL"
    )
    redis_socket_timeout: float = Field(
        default=5.0, gt=0, description="Redis socket and connect timeout in seconds"
    )
    nps_queue_name: str = Field(
        default="nps_feedback", description="RQ queue holding NPS feedback jobs"
    )
    nps_job_max_retries: int = Field(
        default=3, ge=0, description="Retries RQ grants a failed feedback job"
    )
    nps_job_retry_intervals: Annotated[list[int], NoDecode] = Field(
        default_factory=lambda: [30, 120, 600],
        description="Seconds between retries (comma separated in env)",
    )
    nps_job_result_ttl: int = Field(
        default=3600, description="Seconds RQ keeps a finished job"
    )

    # Feedback API
    nps_api_base_url: str = Field(
        default="https://mail-api.proton.me", description="Feedback API base URL"
    )
    nps_submit_path: str = Field(
        default="/core/v4/feedback/nps/submit",
        description="Path of the submit endpoint",
    )
    nps_skip_path: str = Field(
        default="/core/v4/feedback/nps/skip",
        description="Path of the skip endpoint",
    )
    nps_api_timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds"
    )
    nps_user_header: str = Field(
        default="x-pm-uid", description="Header carrying the user id"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("nps_job_retry_intervals", mode="before")
    @classmethod
    def split_intervals(cls, v: Any) -> Any:
        """Accept "30,120,600" from the environment."""
        if isinstance(v, str):
            return [int(part) for part in v.split(",") if part.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


@functools.lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load settings from environment. Cached for performance.

    Raises:
        ConfigError: If an environment value fails validation.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}", original_error=exc) from exc
