"""Extraction error taxonomy."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for failures contained to one source, document, or file."""


class SourceReadError(ExtractionError, OSError):
    """Raised when a source cannot be fetched or read."""


class DocumentDecodeError(ExtractionError):
    """Raised when one YAML document cannot be decoded into the CRD shape."""


class SchemaSerializationError(ExtractionError):
    """Raised when a normalized schema cannot be rendered as JSON."""


class SchemaWriteError(ExtractionError):
    """Raised when a schema file cannot be written."""
