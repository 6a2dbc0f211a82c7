"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.schedule import SCHEDULE_DATE_FORMAT

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ScheduleDefaults(BaseModel):
    """Default work/off pattern for the schedule command."""
    work_days: int = 1
    off_days: int = 3
    date_format: str = SCHEDULE_DATE_FORMAT

    @field_validator("work_days")
    @classmethod
    def validate_work_days(cls, value: int) -> int:
        """Ensure every cycle has at least one working day."""
        if value < 1:
            raise ValueError(f"work_days must be at least 1, got {value}")
        return value

    @field_validator("off_days")
    @classmethod
    def validate_off_days(cls, value: int) -> int:
        """Ensure days off are not negative."""
        if value < 0:
            raise ValueError(f"off_days must not be negative, got {value}")
        return value


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: Optional[str] = None  # None reads offset-less dates as UTC
    log_level: str = "WARNING"
    schedule: ScheduleDefaults = Field(default_factory=ScheduleDefaults)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        """Ensure the timezone is a known IANA name."""
        if value is None:
            return value
        try:
            pendulum.timezone(value)
        except ValueError as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise and check the log level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one if it exists.

        An explicitly given path must exist; a missing default file simply
        yields the built-in defaults.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        logger.debug("No config file at %s, using defaults", default_path)
        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
