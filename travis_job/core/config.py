"""
Job configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import logging

from pydantic import PositiveFloat, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings

from travis_job.core.exceptions import ConfigError

# Overall deadline for a build to reach a terminal state, in seconds.
BUILD_TIMEOUT = 40 * 60


class Settings(BaseSettings):
    """Job settings loaded from environment variables."""

    # Required
    branch: str
    repo_owner: str
    repo_name: str
    travis_token: str
    travis_tld: str

    # Optional
    poll_interval: PositiveInt = 30
    http_timeout: PositiveFloat = 5.0
    log_level: str = "INFO"

    @field_validator(
        "branch", "repo_owner", "repo_name", "travis_token", "travis_tld",
        mode="before",
    )
    @classmethod
    def _require_value(cls, value: str | None) -> str:
        cleaned = "" if value is None else str(value).strip()
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned

    @field_validator("travis_tld")
    @classmethod
    def _normalize_tld(cls, value: str) -> str:
        tld = value.lstrip(".").lower()
        if not tld:
            raise ValueError("must not be empty")
        return tld

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }


def load_settings(**overrides) -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigError: If a required variable is missing or a value is malformed
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
