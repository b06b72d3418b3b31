"""Settings loader service."""

from __future__ import annotations

import logging
from pathlib import Path

from .runtime_settings import DEFAULT_FILENAME_FORMAT, DEFAULT_LOG_LEVEL, ExtractionSettings


class ConfigurationError(Exception):
    """Raised when run settings are invalid."""


def load_settings(
    *,
    filename_format: str | None = None,
    output_dir: Path | str | None = None,
    log_level: str | None = None,
) -> ExtractionSettings:
    """Resolve raw option values into validated settings."""
    return ExtractionSettings(
        filename_format=resolve_filename_format(filename_format),
        output_dir=Path(output_dir) if output_dir else Path("."),
        log_level=_resolve_log_level(log_level),
    )


def resolve_filename_format(value: str | None) -> str:
    """Return the naming template, falling back to the default when unset or empty."""
    if value is None or value == "":
        return DEFAULT_FILENAME_FORMAT
    if not value.strip():
        raise ConfigurationError("filename format must not be blank.")
    return value


def _resolve_log_level(value: str | None) -> int:
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {value}")
    return level
