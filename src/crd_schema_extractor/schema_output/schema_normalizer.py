"""Normalization of YAML-decoded schema payloads into JSON-ready structures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def normalize_schema(payload: Any) -> Any:
    """Return ``payload`` with every mapping re-keyed to string keys.

    Non-string keys take their natural text form: ``1`` becomes ``"1"``,
    ``True`` becomes ``"true"`` and a null key becomes ``"null"``. Mappings
    nested in sequences are normalized too; sequences keep order and length and
    scalars are returned unchanged.
    """
    if isinstance(payload, Mapping):
        return {_key_text(key): normalize_schema(value) for key, value in payload.items()}
    if isinstance(payload, list):
        return [normalize_schema(item) for item in payload]
    return payload


def _key_text(key: Any) -> str:
    """Render a mapping key the way YAML and JSON spell the scalar."""
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
