"""
Configuration loader for YAML overrides of the environment settings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .settings import SEGMENTATION_METHODS, ApplicationSettings, get_settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file. If None, looks for:
                        1. combatlog.yaml in current directory
                        2. config/combatlog.yaml
                        3. ~/.combatlog/combatlog.yaml

        Returns:
            Configuration dictionary
        """
        search_paths = [
            Path("combatlog.yaml"),
            Path("config/combatlog.yaml"),
            Path.home() / ".combatlog" / "combatlog.yaml",
        ]

        if config_path:
            search_paths.insert(0, Path(config_path))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, "r") as f:
                        config = yaml.safe_load(f) or {}
                        logger.info(f"Loaded configuration from {path}")
                        return config
                except (OSError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load config from {path}: {e}")

        logger.debug("No custom configuration file found, using defaults")
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any], settings: Optional[ApplicationSettings] = None) -> None:
        """
        Apply custom configuration on top of the settings.

        Invalid values are logged and the previous value is kept.

        Args:
            config: Configuration dictionary from YAML
            settings: Settings to update, the global instance by default
        """
        settings = settings or get_settings()

        parser_config = config.get("parser") or {}
        if "year" in parser_config:
            try:
                settings.parser.year = int(parser_config["year"])
                logger.debug(f"Timestamp year set to {settings.parser.year}")
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid year {parser_config['year']}: {e}")

        if "require_target" in parser_config:
            value = parser_config["require_target"]
            if isinstance(value, bool):
                settings.parser.require_target = value
            else:
                logger.warning(f"Invalid require_target {value!r}: expected true or false")

        segmentation_config = config.get("segmentation") or {}
        if "method" in segmentation_config:
            method = str(segmentation_config["method"]).lower()
            if method in SEGMENTATION_METHODS:
                settings.segmentation.method = method
            else:
                logger.warning(f"Invalid segmentation method {method}, keeping {settings.segmentation.method}")

        if "log_level" in config:
            level = str(config["log_level"]).lower()
            if isinstance(getattr(logging, level.upper(), None), int):
                settings.log_level = level
            else:
                logger.warning(f"Invalid log level {level}, keeping {settings.log_level}")

        logger.debug("Custom configuration applied successfully")


def load_and_apply_config(config_path: Optional[str] = None) -> None:
    """
    Load and apply configuration in one step.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    if config:
        loader.apply_config(config)
