"""JSON schema file writer service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from crd_schema_extractor.errors import SchemaSerializationError, SchemaWriteError

from .write_outcomes import SchemaWriteResult

OUTPUT_FILE_MODE = 0o644


def write_schema_file(schema: Any, path: Path, *, logger: logging.Logger) -> SchemaWriteResult:
    """Write a normalized schema as two-space indented JSON, overwriting ``path``.

    Failures are logged and returned; a failed write may leave an empty or
    missing file behind.
    """
    try:
        text = serialize_schema(schema)
    except SchemaSerializationError as exc:
        logger.error("Failed to marshal schema to JSON: %s filename=%s", exc, path)
        return SchemaWriteResult.failed(path, exc)

    try:
        _write_text(path, text)
    except SchemaWriteError as exc:
        logger.error("Failed to write schema to file: %s filename=%s", exc, path)
        return SchemaWriteResult.failed(path, exc)

    logger.info("JSON schema written filename=%s", path)
    return SchemaWriteResult.written(path)


def serialize_schema(schema: Any) -> str:
    """Render ``schema`` as JSON; NaN, infinities and non-JSON types are rejected."""
    try:
        return json.dumps(schema, indent=2, allow_nan=False, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise SchemaSerializationError(str(exc)) from exc


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        path.chmod(OUTPUT_FILE_MODE)
    except OSError as exc:
        raise SchemaWriteError(f"{path}: {exc}") from exc
