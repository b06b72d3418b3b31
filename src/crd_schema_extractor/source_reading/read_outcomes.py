"""Source reading domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from crd_schema_extractor.errors import SourceReadError


class SourceKind(str, Enum):
    """Where a source identifier points."""

    URL = "url"
    FILE = "file"


@dataclass(frozen=True)
class SourceReadResult:
    """Outcome of reading one source."""

    source: str
    kind: SourceKind
    data: bytes | None
    error: SourceReadError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def read(source: str, kind: SourceKind, data: bytes) -> SourceReadResult:
        return SourceReadResult(source=source, kind=kind, data=data, error=None)

    @staticmethod
    def failed(source: str, kind: SourceKind, error: SourceReadError) -> SourceReadResult:
        return SourceReadResult(source=source, kind=kind, data=None, error=error)
