"""
Configuration management for the FPL API client.

Handles loading environment variables and providing typed configuration access.
"""

import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


DEFAULT_BASE_URL = "https://fantasy.premierleague.com/api"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(log_level: str, log_file: Optional[Path] = None) -> logging.Logger:
    """Configure logging for the package."""
    logger = logging.getLogger("fpl_api")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to prevent duplicates on repeated calls
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass
class Config:
    """Client configuration, optionally loaded from environment variables."""

    # API Settings
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Logger
    logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self):
        """Normalise the base URL. Handlers are left to the application."""
        self.api_base_url = self.api_base_url.rstrip("/")
        self.logger = logging.getLogger("fpl_api")

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file. If None, looks in the
                current working directory.

        Returns:
            Config instance with loaded values. The package logger is
            configured from LOG_LEVEL and LOG_FILE.
        """
        if env_file is None:
            env_file = Path.cwd() / ".env"

        if env_file.exists():
            load_dotenv(env_file)

        log_file = os.getenv("LOG_FILE", "")

        config = cls(
            api_base_url=os.getenv("API_BASE_URL", DEFAULT_BASE_URL),
            request_timeout=_env_float("REQUEST_TIMEOUT", 30.0),
            user_agent=os.getenv("FPL_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
        )
        config.logger = setup_logging(config.log_level, config.log_file)
        return config

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages. Empty if valid.
        """
        errors = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append(f"API_BASE_URL must be an http(s) URL, got {self.api_base_url!r}")
        if self.request_timeout <= 0:
            errors.append("REQUEST_TIMEOUT must be greater than zero")
        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return errors

    def log_config(self) -> None:
        """Log current configuration."""
        self.logger.info("Configuration loaded:")
        self.logger.info(f"  API Base URL: {self.api_base_url}")
        self.logger.info(f"  Request Timeout: {self.request_timeout}s")
        self.logger.info(f"  Log Level: {self.log_level}")
        self.logger.info(f"  Log File: {self.log_file or '-'}")
