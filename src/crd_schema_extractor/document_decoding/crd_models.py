"""CRD document entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from crd_schema_extractor.errors import DocumentDecodeError


@dataclass(frozen=True)
class VersionRecord:
    """One entry of a multi-version CRD's ``spec.versions`` list."""

    name: str
    schema: Any


@dataclass(frozen=True)
class CRDDocument:
    """Fields of interest decoded from one CRD document."""

    kind: str
    group: str
    version: str
    versions: tuple[VersionRecord, ...]
    legacy_schema: Any


@dataclass(frozen=True)
class DocumentDecodeResult:
    """Outcome of decoding one YAML document from a source."""

    source: str
    index: int
    document: CRDDocument | None
    error: DocumentDecodeError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def decoded(source: str, index: int, document: CRDDocument) -> DocumentDecodeResult:
        return DocumentDecodeResult(source=source, index=index, document=document, error=None)

    @staticmethod
    def failed(source: str, index: int, error: DocumentDecodeError) -> DocumentDecodeResult:
        return DocumentDecodeResult(source=source, index=index, document=None, error=error)
