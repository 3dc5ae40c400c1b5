"""
Configuration settings for the combat log toolkit.

Settings are read from environment variables and can be overridden by a YAML
configuration file (see ``loader.py``).
"""

import logging
import os
from dataclasses import dataclass

SEGMENTATION_METHODS = ("interval", "alive")

# 3.x logs carry no year in their timestamps. A leap year keeps 2/29 lines valid.
DEFAULT_LOG_YEAR = 2020


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class ParserSettings:
    """Line decoding settings."""

    year: int = DEFAULT_LOG_YEAR
    require_target: bool = True

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Load parser settings from environment variables."""
        return cls(
            year=int(os.getenv("COMBATLOG_YEAR", str(DEFAULT_LOG_YEAR))),
            require_target=_env_bool("COMBATLOG_REQUIRE_TARGET", "true"),
        )


@dataclass
class SegmentationSettings:
    """Encounter segmentation settings."""

    method: str = "interval"

    @classmethod
    def from_env(cls) -> "SegmentationSettings":
        """Load segmentation settings from environment variables."""
        return cls(method=os.getenv("COMBATLOG_SEGMENTER", "interval").lower())


@dataclass
class ApplicationSettings:
    """Main application settings container."""

    parser: ParserSettings
    segmentation: SegmentationSettings
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ApplicationSettings":
        """Load all settings from environment variables."""
        return cls(
            parser=ParserSettings.from_env(),
            segmentation=SegmentationSettings.from_env(),
            log_level=os.getenv("COMBATLOG_LOG_LEVEL", "info").lower(),
        )

    def setup_logging(self):
        """Configure logging based on settings."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)

        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def validate(self):
        """Validate configuration settings."""
        errors = []

        if self.segmentation.method not in SEGMENTATION_METHODS:
            errors.append(
                f"Unknown segmentation method: {self.segmentation.method} "
                f"(expected one of {', '.join(SEGMENTATION_METHODS)})"
            )

        if not (1 <= self.parser.year <= 9999):
            errors.append(f"Invalid year: {self.parser.year}")

        if getattr(logging, self.log_level.upper(), None) is None:
            errors.append(f"Invalid log level: {self.log_level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def log_configuration(self):
        """Log current configuration."""
        logger = logging.getLogger(__name__)

        logger.debug("=== Combat Log Configuration ===")
        logger.debug(f"Timestamp year: {self.parser.year}")
        logger.debug(f"Require target: {self.parser.require_target}")
        logger.debug(f"Segmentation: {self.segmentation.method}")
        logger.debug(f"Log Level: {self.log_level}")


# Global settings instance
settings = ApplicationSettings.from_env()


def get_settings() -> ApplicationSettings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> ApplicationSettings:
    """Reload settings from environment variables."""
    global settings
    settings = ApplicationSettings.from_env()
    return settings
