"""
Configuration management with environment variable support and validation.

Design principles:
- Environment-specific configs (dev, staging, prod)
- Validation at startup (fail fast)
- Type safety with Pydantic
"""

import os
from functools import lru_cache
from typing import Literal, cast
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()


class TrackingConfig(BaseModel):
    """Limits and timing for the event stores and the feeding timer."""

    history_limit: int = Field(
        default=10, gt=0, description="Entries kept by the sleep and feeding logs"
    )
    timer_tick_seconds: float = Field(
        default=1.0, gt=0.0, description="Wall-clock seconds per feeding timer tick"
    )


class DisplayConfig(BaseModel):
    """How captured instants are rendered for the observer."""

    timezone: str | None = Field(
        default=None, description="IANA time zone name; system local time when unset"
    )
    date_format: str = Field(default="%d/%m/%Y", description="strftime pattern for dates")
    time_format: str = Field(default="%H:%M", description="strftime pattern for time of day")

    @field_validator("timezone")
    def validate_timezone(cls, v):
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    # Component configs
    tracking: TrackingConfig = Field(default_factory=TrackingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        v = val.strip().upper()
        return cast(
            Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO",
        )

    # Detect environment
    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    tracking_config = TrackingConfig(
        history_limit=int(os.getenv("HISTORY_LIMIT", "10")),
        timer_tick_seconds=float(os.getenv("TIMER_TICK_SECONDS", "1.0")),
    )

    display_config = DisplayConfig(
        timezone=os.getenv("DISPLAY_TIMEZONE") or None,
        date_format=os.getenv("DATE_FORMAT", "%d/%m/%Y"),
        time_format=os.getenv("TIME_FORMAT", "%H:%M"),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        tracking=tracking_config,
        display=display_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def validate_config() -> None:
    """Validate configuration at startup."""
    try:
        config = get_config()
        print(f"Configuration loaded for {config.environment} environment")
    except Exception as e:
        print(f"Configuration validation failed: {e}")
        raise


def print_config_summary() -> None:
    """Print configuration summary for debugging."""
    config = get_config()

    print("\nCONFIGURATION SUMMARY")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"Log Level: {config.logging.level}")

    print("\nTRACKING")
    print(f"History Limit: {config.tracking.history_limit}")
    print(f"Timer Tick: {config.tracking.timer_tick_seconds}s")

    print("\nDISPLAY")
    print(f"Time Zone: {config.display.timezone or 'system local'}")
    print(f"Date Format: {config.display.date_format}")
    print(f"Time Format: {config.display.time_format}")


if __name__ == "__main__":
    validate_config()
    print_config_summary()
