"""
Configuration management for the candlepatterns package.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .logger import parse_size, setup_logger
from .patterns.pattern_config import (
    PatternDetectionConfig,
    get_pattern_config,
    load_pattern_config,
    reset_pattern_config,
)


ENV_PREFIX = "CANDLEPATTERNS_"

logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)
    max_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=0)
    console_output: bool = Field(default=True)

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper().strip()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown logging level: {v}")
        return v

    @field_validator('max_size')
    @classmethod
    def validate_max_size(cls, v: str) -> str:
        parse_size(v)
        return v


class Config(BaseModel):
    """Main configuration class."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    pattern_config_path: Optional[str] = Field(
        default=None,
        description="JSON file with pattern detection thresholds"
    )

    @classmethod
    def load_from_env(cls, env_file: Optional[str] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to load from .env file in current directory
            env_path = Path(".env")
            if env_path.exists():
                load_dotenv(env_path)

        logging_config = LoggingConfig(
            level=_env("LOG_LEVEL", "INFO"),
            file_path=_env("LOG_FILE_PATH"),
            max_size=_env("LOG_MAX_SIZE", "10MB"),
            backup_count=int(_env("LOG_BACKUP_COUNT", "5")),
            console_output=_env("LOG_CONSOLE", "true").lower() in ("true", "1", "yes", "on")
        )

        return cls(
            logging=logging_config,
            pattern_config_path=_env("PATTERN_CONFIG_PATH")
        )

    def install_pattern_config(self) -> PatternDetectionConfig:
        """
        Install the configured thresholds as the global pattern config.

        Falls back to the defaults when no threshold file is configured.
        Raises FileNotFoundError if a configured file does not exist.
        """
        if self.pattern_config_path is None:
            reset_pattern_config()
            return get_pattern_config()

        path = Path(self.pattern_config_path)
        if not path.exists():
            raise FileNotFoundError(f"Pattern configuration file not found: {path}")
        return load_pattern_config(path)

    def apply(self) -> "logging.Logger":
        """Configure package logging and thresholds. Returns the package logger."""
        package_logger = setup_logger(
            level=self.logging.level,
            log_file=self.logging.file_path,
            max_size=self.logging.max_size,
            backup_count=self.logging.backup_count,
            console_output=self.logging.console_output
        )
        self.install_pattern_config()
        logger.info("Applied candlepatterns configuration")
        return package_logger


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)
