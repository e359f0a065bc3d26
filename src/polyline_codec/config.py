"""
Configuration for the polyline codec.

Configuration Precedence (highest to lowest):
1. Explicit arguments (e.g. ``encode(points, precision=6)``)
2. Environment Variables
3. Code Defaults
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigurationError

DEFAULT_PRECISION = 5

# Beyond 15 decimal digits a double cannot round-trip the scaled integer.
MAX_PRECISION = 15

LOG_FORMATS = ("json", "console")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PolylineConfig:
    """Configuration container with validation."""

    default_precision: int = field(default_factory=lambda: int(os.environ.get("POLYLINE_DEFAULT_PRECISION", str(DEFAULT_PRECISION))))

    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper())
    log_format: str = field(default_factory=lambda: os.environ.get("LOG_FORMAT", "json").lower())

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not 0 <= self.default_precision <= MAX_PRECISION:
            errors.append(
                f"POLYLINE_DEFAULT_PRECISION must be between 0 and {MAX_PRECISION}, "
                f"got {self.default_precision}"
            )

        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'"
            )

        if self.log_format not in LOG_FORMATS:
            errors.append(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got '{self.log_format}'"
            )

        return errors


# Singleton instance, built on first use
_config: Optional[PolylineConfig] = None


def get_config() -> PolylineConfig:
    """Get the singleton config instance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global _config

    if _config is None:
        try:
            config = PolylineConfig()
        except ValueError as e:
            raise ConfigurationError("Invalid configuration", detail=str(e)) from e

        errors = config.validate()
        if errors:
            raise ConfigurationError("Invalid configuration", detail="; ".join(errors))

        _config = config

    return _config


def reset_config() -> None:
    """Drop the cached config so the environment is read again."""
    global _config
    _config = None
