"""Configuration management for Page Organizer."""

import os
from dataclasses import dataclass, field
from typing import Optional

from .exceptions import ConfigurationError


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'.") from exc


@dataclass
class BlankPageConfig:
    """Configuration for blank page detection."""
    char_threshold: int = field(
        default_factory=lambda: _env_int("PAGE_ORGANIZER_BLANK_CHAR_THRESHOLD", 1)
    )


@dataclass
class OutputConfig:
    """Configuration for written documents."""
    producer: str = field(
        default_factory=lambda: os.environ.get("PAGE_ORGANIZER_PRODUCER", "Page Organizer")
    )


@dataclass
class LoggingConfig:
    """Configuration for CLI logging."""
    level: str = field(
        default_factory=lambda: os.environ.get("PAGE_ORGANIZER_LOG_LEVEL", "WARNING").upper()
    )


@dataclass
class Config:
    """Main configuration container."""
    blank_pages: BlankPageConfig = field(default_factory=BlankPageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration from environment."""
    global _config
    _config = Config()
    return _config
