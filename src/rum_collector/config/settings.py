"""
Application settings and configuration management.

Supports loading from:
1. A YAML config file (rum-collector.yaml)
2. Environment variables (fallback)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Settings for the classification core.

    Signature table paths are optional; when unset the tables bundled
    with the package are used. Tables are read once per process.
    """

    bot_signatures_path: Optional[str] = None
    spider_signatures_path: Optional[str] = None
    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Validate settings values. Returns list of errors."""
        errors = []

        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}, "
                f"got {self.log_level}"
            )
        for name in ("bot_signatures_path", "spider_signatures_path"):
            value = getattr(self, name)
            if value and not Path(value).is_file():
                errors.append(f"{name} does not point to a file: {value}")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "signatures": {
                "bots": self.bot_signatures_path,
                "spiders": self.spider_signatures_path,
            },
            "logging": {"level": self.log_level},
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Create Settings from configuration dictionary (e.g., from YAML)."""
        signatures = config.get("signatures", {}) or {}
        log = config.get("logging", {}) or {}

        return cls(
            bot_signatures_path=signatures.get("bots"),
            spider_signatures_path=signatures.get("spiders"),
            log_level=str(log.get("level", "INFO")).upper(),
        )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            bot_signatures_path=os.environ.get("RUM_BOT_SIGNATURES_PATH") or None,
            spider_signatures_path=os.environ.get("RUM_SPIDER_SIGNATURES_PATH")
            or None,
            log_level=os.environ.get("RUM_LOG_LEVEL", "INFO").upper(),
        )


# Default config file path
DEFAULT_CONFIG_PATH = Path("rum-collector.yaml")


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Read a YAML settings file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed configuration (empty dict for an empty file)

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read settings file: {e}", path=path) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError("Settings file must contain a mapping", path=path)
    return config


@lru_cache
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Loads from the YAML config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Settings instance
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists():
        try:
            return Settings.from_dict(load_config_file(path))
        except ConfigurationError as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            logger.warning("Falling back to environment variables")

    return Settings.from_env()


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
