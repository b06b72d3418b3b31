"""Selection of the schemas a CRD document contributes."""

from __future__ import annotations

from crd_schema_extractor.document_decoding.crd_models import CRDDocument

from .write_outcomes import ExtractedSchema


def extract_schemas(document: CRDDocument) -> list[ExtractedSchema]:
    """Return the schemas to write for ``document``, in version order.

    Version records take precedence: when any exist, the legacy
    ``spec.validation`` schema is ignored even if every version lacks a schema.
    """
    if document.versions:
        return [
            ExtractedSchema(
                kind=document.kind,
                version=record.name,
                group=document.group,
                payload=record.schema,
            )
            for record in document.versions
            if record.schema is not None
        ]
    if document.legacy_schema is not None:
        return [
            ExtractedSchema(
                kind=document.kind,
                version=document.version,
                group=document.group,
                payload=document.legacy_schema,
            )
        ]
    return []
