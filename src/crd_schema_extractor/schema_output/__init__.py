"""Schema output exports."""

from .filename_templates import OUTPUT_SUFFIX, render_filename
from .schema_extraction import extract_schemas
from .schema_normalizer import normalize_schema
from .schema_writer import OUTPUT_FILE_MODE, serialize_schema, write_schema_file
from .write_outcomes import ExtractedSchema, SchemaWriteResult, WriteStatus

__all__ = [
    "OUTPUT_FILE_MODE",
    "OUTPUT_SUFFIX",
    "ExtractedSchema",
    "SchemaWriteResult",
    "WriteStatus",
    "extract_schemas",
    "normalize_schema",
    "render_filename",
    "serialize_schema",
    "write_schema_file",
]
