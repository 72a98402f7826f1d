"""Configuration module."""

from .constants import (
    CHECKPOINT_VOCABULARY_VERSION,
    CWV_METRICS,
    KNOWN_CHECKPOINTS,
    MAX_PADDING_MS,
    MS_PER_HOUR,
    RETIRED_CHECKPOINTS,
    UNDEFINED,
)
from .settings import Settings, clear_settings_cache, get_settings, load_config_file

__all__ = [
    # Checkpoint vocabulary
    "CHECKPOINT_VOCABULARY_VERSION",
    "KNOWN_CHECKPOINTS",
    "RETIRED_CHECKPOINTS",
    # Time masking
    "MS_PER_HOUR",
    "MAX_PADDING_MS",
    # Event fields
    "CWV_METRICS",
    "UNDEFINED",
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "load_config_file",
]
