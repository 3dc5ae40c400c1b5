"""
Configuration module for the combat log toolkit.

Provides environment based settings and YAML overrides.
"""

from .settings import (
    ApplicationSettings,
    ParserSettings,
    SegmentationSettings,
    SEGMENTATION_METHODS,
    DEFAULT_LOG_YEAR,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_and_apply_config

__all__ = [
    "ApplicationSettings",
    "ParserSettings",
    "SegmentationSettings",
    "SEGMENTATION_METHODS",
    "DEFAULT_LOG_YEAR",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_and_apply_config",
]
