"""Extraction run entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from crd_schema_extractor.configuration.runtime_settings import ExtractionSettings


@dataclass(frozen=True)
class ExtractionRequest:
    """Input contract for one extraction run."""

    sources: tuple[str, ...]
    settings: ExtractionSettings


@dataclass
class ExtractionSummary:
    """Counters and written paths accumulated over one run."""

    sources_read: int = 0
    sources_failed: int = 0
    documents_decoded: int = 0
    documents_failed: int = 0
    files_failed: int = 0
    written_paths: list[Path] = field(default_factory=list)

    @property
    def files_written(self) -> int:
        return len(self.written_paths)

    @property
    def failures(self) -> int:
        return self.sources_failed + self.documents_failed + self.files_failed
