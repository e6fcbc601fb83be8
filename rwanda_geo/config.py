"""
Configuration management for the rwanda_geo package.

This module provides the dataclass holding data location, code scheme,
search limits and logging options.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .exceptions import ConfigurationError
from .hierarchy.code_scheme import CODE_SCHEMES, DEFAULT_CODE_SCHEME


DEFAULT_DATA_DIRECTORY = str(Path(__file__).parent / 'data')
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class GeoConfig:
    """Configuration class for loading and querying the hierarchy."""

    # Directory holding provinces/districts/sectors/cells/villages .json(.gz)
    data_directory: str = field(default=DEFAULT_DATA_DIRECTORY)

    # Code segmentation convention used by level classification
    code_scheme: str = DEFAULT_CODE_SCHEME

    # Fuzzy name search defaults
    fuzzy_max_distance: int = 3
    fuzzy_limit: int = 10

    # Suggestions
    suggestion_max_distance: int = 3
    suggestion_limit: int = 10
    suggestion_cache_size: int = 256

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_code_scheme()
        self._validate_search_settings()
        self._validate_log_level()

    def _validate_code_scheme(self):
        if self.code_scheme not in CODE_SCHEMES:
            raise ConfigurationError(
                f"Unknown code scheme: {self.code_scheme}",
                config_key='code_scheme',
                config_value=self.code_scheme,
                valid_values=sorted(CODE_SCHEMES)
            )

    def _validate_search_settings(self):
        """Validate distances and limits."""
        for key in ('fuzzy_max_distance', 'suggestion_max_distance'):
            value = getattr(self, key)
            if not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"{key} must be a non-negative integer: {value}",
                    config_key=key,
                    config_value=value
                )

        for key in ('fuzzy_limit', 'suggestion_limit'):
            value = getattr(self, key)
            if not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"{key} must be a positive integer: {value}",
                    config_key=key,
                    config_value=value
                )

        if not isinstance(self.suggestion_cache_size, int) or self.suggestion_cache_size < 0:
            raise ConfigurationError(
                f"suggestion_cache_size must be a non-negative integer: {self.suggestion_cache_size}",
                config_key='suggestion_cache_size',
                config_value=self.suggestion_cache_size
            )

    def _validate_log_level(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}",
                config_key='log_level',
                config_value=self.log_level,
                valid_values=LOG_LEVELS
            )

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GeoConfig':
        """Create configuration from dictionary."""
        return cls(**config_dict)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            'data_directory': self.data_directory,
            'code_scheme': self.code_scheme,
            'fuzzy_max_distance': self.fuzzy_max_distance,
            'fuzzy_limit': self.fuzzy_limit,
            'suggestion_max_distance': self.suggestion_max_distance,
            'suggestion_limit': self.suggestion_limit,
            'suggestion_cache_size': self.suggestion_cache_size,
            'log_level': self.log_level,
            'log_file': self.log_file
        }
