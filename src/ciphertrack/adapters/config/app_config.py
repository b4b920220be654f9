"""12-factor configuration adapter using environment variables and optional TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_FILE = str(Path.home() / ".ciphertrack" / "preferences.json")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Live-status API configuration
    proxy_url: str = Field(
        default="https://api.allorigins.win/get",
        description="Intermediary returning {contents: <JSON string>} for an upstream URL",
    )
    upstream_url_template: str = Field(
        default="https://rappid.in/apis/train.php?train_no={entity_id}",
        description="Upstream live-status URL; {entity_id} is replaced by the train number",
    )
    request_timeout_seconds: float = Field(
        default=10, description="Total timeout for live-status requests in seconds"
    )

    # Refresh configuration
    refresh_interval_seconds: float = Field(
        default=30, description="Interval between background refreshes in seconds"
    )

    # Display configuration
    delay_threshold_minutes: int = Field(
        default=10, description="Delays above this many minutes are shown as 'Delayed'"
    )
    preferences_file: str = Field(
        default=DEFAULT_PREFERENCES_FILE,
        description="Path to the JSON file storing dark mode and compact layout toggles",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with [api] and [display] overrides
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding API and display settings",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)

    @field_validator("upstream_url_template")
    @classmethod
    def validate_upstream_url_template(cls, v: str) -> str:
        """Validate the template has an {entity_id} placeholder."""
        if "{entity_id}" not in v:
            raise ValueError("upstream_url_template must contain '{entity_id}'")
        return v

    @field_validator("refresh_interval_seconds", "request_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals and timeouts are positive."""
        if v <= 0:
            raise ValueError("intervals and timeouts must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def load_overrides(self) -> dict[str, Any]:
        """Apply [api] and [display] settings from the TOML config file.

        Returns:
            The parsed TOML data.

        Raises:
            ValueError: If config_file is not set.
            FileNotFoundError: If the file does not exist.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load overrides")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        for key in ("proxy_url", "upstream_url_template", "request_timeout_seconds"):
            if key in api:
                setattr(self, key, api[key])

        display = toml_data.get("display", {})
        for key in ("refresh_interval_seconds", "delay_threshold_minutes", "preferences_file"):
            if key in display:
                setattr(self, key, display[key])

        logger.info(f"Loaded configuration overrides from {config_path}")
        return toml_data
