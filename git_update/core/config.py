"""
Configuration management

Centralized settings using Pydantic BaseSettings for type-safe configuration
with environment variable support.
"""

import logging
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .paths import get_options_file, get_package_root

logger = logging.getLogger(__name__)

# Documented as "only 10 latest error messages" in earlier releases, which
# always kept 20. 20 stays the enforced bound.
DEFAULT_ERROR_LOG_CAPACITY = 20


class Settings(BaseSettings):
    """
    Application settings with environment variable support

    Settings can be overridden via environment variables:
    - GIT_UPDATE_OPTIONS_FILE=/custom/path/options.json
    - GIT_UPDATE_HTTP_TIMEOUT=30
    - GIT_UPDATE_GITHUB_TOKEN=ghp_...
    """

    # Persistence (defaults to dynamic paths from paths.py)
    options_file: Path = Field(default_factory=get_options_file)
    error_log_capacity: int = DEFAULT_ERROR_LOG_CAPACITY

    # Remote repository host
    http_timeout: float = 10.0
    github_token: str = ""
    user_agent: str = "git-update"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GIT_UPDATE_",
        env_file=str(get_package_root() / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("error_log_capacity")
    @classmethod
    def _capacity_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("error_log_capacity must be at least 1")
        return value

    @field_validator("http_timeout")
    @classmethod
    def _timeout_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("http_timeout must be greater than zero")
        return value


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e
        logger.debug(f"Loaded settings (options file: {_settings.options_file})")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
