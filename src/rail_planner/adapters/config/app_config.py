"""12-factor configuration adapter using environment variables and TOML config."""

import logging
from pathlib import Path
from typing import Any

import tomllib

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SORT_KEYS = ("duration", "price", "depart")

# TOML section -> settings that may be overridden from it
_TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "server": (
        "host",
        "port",
        "static_dir",
        "cors_allow_origins",
        "rate_limit_per_minute",
        "log_level",
    ),
    "data": ("routes_csv", "database_url"),
    "search": (
        "min_transfer_minutes",
        "day_window_start_hour",
        "day_window_end_hour",
        "max_day_layover_minutes",
        "max_night_layover_minutes",
        "default_sort",
    ),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3001, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root logging level")
    static_dir: str = Field(
        default="public",
        description="Directory with the front-end files served at '/'",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )
    admin_command_token: str | None = Field(
        default=None,
        description="Shared secret for admin endpoints (X-Admin-Token header); unset disables them",
    )

    # Data configuration
    routes_csv: str = Field(
        default="data/eu_rail_network.csv",
        description="CSV file with the scheduled route network",
    )
    database_url: str = Field(
        default="sqlite:///data/train_network.db",
        description="SQLAlchemy URL of the booking database",
    )

    # Search configuration
    min_transfer_minutes: int = Field(
        default=10, description="Shortest allowed gap between two legs in minutes"
    )
    day_window_start_hour: int = Field(
        default=6, description="First hour (inclusive) counted as a daytime arrival"
    )
    day_window_end_hour: int = Field(
        default=21, description="Last hour (inclusive) counted as a daytime arrival"
    )
    max_day_layover_minutes: int = Field(
        default=120, description="Longest allowed wait after a daytime arrival"
    )
    max_night_layover_minutes: int = Field(
        default=30, description="Longest allowed wait after a night arrival"
    )
    default_sort: str = Field(
        default="duration",
        description="Sort key used when a search does not name one: duration, price or depart",
    )

    # TOML config file path; missing file is only an error when explicitly requested
    config_file: str | None = Field(
        default=None,
        description="Path to an optional TOML configuration file",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("default_sort")
    @classmethod
    def validate_default_sort(cls, v: str) -> str:
        """Validate default sort is one of the supported ranking keys."""
        key = v.strip().lower()
        if key not in SORT_KEYS:
            raise ValueError(f"default_sort must be one of {', '.join(SORT_KEYS)}")
        return key

    @field_validator(
        "min_transfer_minutes",
        "max_day_layover_minutes",
        "max_night_layover_minutes",
        "rate_limit_per_minute",
    )
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate minute and rate settings are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    @field_validator("day_window_start_hour", "day_window_end_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Validate hours are within a day."""
        if not 0 <= v <= 23:
            raise ValueError("hour must be between 0 and 23")
        return v

    @model_validator(mode="after")
    def validate_day_window(self) -> "AppConfig":
        """Validate the daytime window is not inverted."""
        if self.day_window_start_hour > self.day_window_end_hour:
            raise ValueError("day_window_start_hour must not be after day_window_end_hour")
        return self

    def load_toml_overrides(self) -> dict[str, Any]:
        """Apply settings from the TOML file named by ``config_file``.

        Recognized sections are ``[server]``, ``[data]`` and ``[search]``;
        unknown keys are ignored. Returns the parsed TOML document, or an
        empty dict when no file is configured.

        Raises:
            FileNotFoundError: If ``config_file`` is set but does not exist.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        overrides: dict[str, Any] = {}
        for section, keys in _TOML_SECTIONS.items():
            values = toml_data.get(section, {})
            if not isinstance(values, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            overrides.update({key: values[key] for key in keys if key in values})

        # Validate the merged settings as a whole so cross-field rules see final values
        validated = type(self).model_validate({**self.model_dump(), **overrides})
        for key in overrides:
            setattr(self, key, getattr(validated, key))

        return toml_data
