"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_FILENAME_FORMAT = "{kind}_{version}"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ExtractionSettings:
    """Settings shared by every source processed in one run."""

    filename_format: str
    output_dir: Path
    log_level: int
