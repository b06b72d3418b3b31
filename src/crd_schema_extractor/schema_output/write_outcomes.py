"""Schema output domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from crd_schema_extractor.errors import SchemaSerializationError, SchemaWriteError


@dataclass(frozen=True)
class ExtractedSchema:
    """A schema payload paired with the kind and version it belongs to."""

    kind: str
    version: str
    group: str
    payload: Any


class WriteStatus(str, Enum):
    """Schema file writing outcome status."""

    WRITTEN = "written"
    SERIALIZATION_FAILED = "serialization_failed"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class SchemaWriteResult:
    """Outcome of writing one schema file."""

    path: Path
    status: WriteStatus
    error_message: str | None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.WRITTEN

    @staticmethod
    def written(path: Path) -> SchemaWriteResult:
        return SchemaWriteResult(path=path, status=WriteStatus.WRITTEN, error_message=None)

    @staticmethod
    def failed(path: Path, error: SchemaSerializationError | SchemaWriteError) -> SchemaWriteResult:
        status = (
            WriteStatus.SERIALIZATION_FAILED
            if isinstance(error, SchemaSerializationError)
            else WriteStatus.WRITE_FAILED
        )
        return SchemaWriteResult(path=path, status=status, error_message=str(error))
