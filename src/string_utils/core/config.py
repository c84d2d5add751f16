"""
Configuration management for string_utils.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration settings for the application."""

    # Application Settings
    log_level: str = "WARNING"

    # Reveal Configuration
    reveal_delay_ms: int = 50  # delay before each revealed character

    # Development Settings
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv("STRING_UTILS_LOG_LEVEL", "WARNING"),
            reveal_delay_ms=int(os.getenv("STRING_UTILS_REVEAL_DELAY_MS", "50")),
            debug=os.getenv("STRING_UTILS_DEBUG", "false").lower() == "true",
        )

    @classmethod
    def from_dotenv(cls, env_file: Optional[Path] = None) -> "Config":
        """Create configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to find .env in project root
            project_root = cls._find_project_root()
            env_file = project_root / ".env"
            if env_file.exists():
                load_dotenv(env_file)

        return cls.from_env()

    @staticmethod
    def _find_project_root() -> Path:
        """Find the project root directory."""
        current = Path.cwd()

        # Look for markers that indicate project root
        markers = [".git", "pyproject.toml", "setup.py", "requirements.txt"]

        for parent in [current] + list(current.parents):
            if any((parent / marker).exists() for marker in markers):
                return parent

        return current

    def setup_logging(self) -> None:
        """Set up logging configuration."""
        level_name = "DEBUG" if self.debug else self.log_level.upper()
        log_level = getattr(logging, level_name, logging.WARNING)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # Remove existing handlers
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        logger.debug(f"Logging configured at {logging.getLevelName(log_level)}")

    def validate(self) -> None:
        """Validate the configuration."""
        errors = []

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"STRING_UTILS_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}"
            )

        if self.reveal_delay_ms < 0:
            errors.append("STRING_UTILS_REVEAL_DELAY_MS must be >= 0")

        if errors:
            raise ConfigurationError(f"Configuration errors: {', '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary (excluding private fields)."""
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }
