"""Source reading exports."""

from .read_outcomes import SourceKind, SourceReadResult
from .source_reader import build_http_session, classify_source, read_source

__all__ = [
    "SourceKind",
    "SourceReadResult",
    "build_http_session",
    "classify_source",
    "read_source",
]
