"""Configuration domain exports."""

from .loader import ConfigurationError, load_settings, resolve_filename_format
from .runtime_settings import DEFAULT_FILENAME_FORMAT, DEFAULT_LOG_LEVEL, ExtractionSettings

__all__ = [
    "DEFAULT_FILENAME_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "ExtractionSettings",
    "ConfigurationError",
    "load_settings",
    "resolve_filename_format",
]
