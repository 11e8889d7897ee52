"""
Configuration Management.

Loads settings from config/settings/*.yaml shipped inside the package and
applies environment overrides on top of them.

Settings (YAML):
    application.yaml   - Program identity and status API endpoint
    logging.yaml       - Logging configuration

Environment (prefix TPSP_):
    TPSP_CONFIG_DIR    - Alternative directory holding the YAML files
    TPSP_API_URL       - Overrides api.url
    TPSP_API_TIMEOUT   - Overrides api.timeout (seconds)
    TPSP_LOG_LEVEL     - Overrides the logging level
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from tpsp.core.config_schema import ApplicationSchema, LoggingSchema, LogLevel
from tpsp.core.exceptions import ConfigurationError

CONFIG_DIR_ENV = "TPSP_CONFIG_DIR"


def find_config_dir() -> Path:
    """Return the settings directory, honoring TPSP_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent / "config" / "settings"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = find_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to the YAML files."""

    api_url: str | None = None
    api_timeout: float | None = Field(default=None, gt=0)
    log_level: LogLevel | None = None

    model_config = SettingsConfigDict(
        env_prefix="TPSP_",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """
    Get cached environment overrides.

    Raises:
        ConfigurationError: If a TPSP_* variable holds an invalid value.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"invalid TPSP_* environment setting:\n{e}") from e


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_config() -> tuple[str, float]:
    """
    Get the status API URL and timeout, environment overrides applied.

    Returns:
        Tuple of (url, timeout_seconds).
    """
    api = get_app_config().application.api
    settings = get_settings()
    url = settings.api_url or api.url
    timeout = settings.api_timeout if settings.api_timeout is not None else api.timeout
    return url, float(timeout)
