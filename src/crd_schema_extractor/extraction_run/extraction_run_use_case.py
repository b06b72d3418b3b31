"""Extraction run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from crd_schema_extractor.configuration.runtime_settings import ExtractionSettings
from crd_schema_extractor.document_decoding import decode_documents
from crd_schema_extractor.schema_output import (
    extract_schemas,
    normalize_schema,
    render_filename,
    write_schema_file,
)
from crd_schema_extractor.source_reading import build_http_session, read_source
from crd_schema_extractor.source_reading.source_reader import HTTPSession

from .run_contracts import ExtractionRequest, ExtractionSummary


def run_extraction(
    request: ExtractionRequest,
    *,
    logger: logging.Logger,
    http_session_factory: Callable[[], HTTPSession] | None = None,
) -> ExtractionSummary:
    """Process every source in order, skipping whatever fails, and summarize the run."""
    resolved_session_factory = http_session_factory or build_http_session
    http_session = resolved_session_factory()
    summary = ExtractionSummary()

    for source in request.sources:
        read_result = read_source(source, http_session=http_session, logger=logger)
        if not read_result.ok or read_result.data is None:
            summary.sources_failed += 1
            continue
        summary.sources_read += 1
        _process_source_data(
            read_result.data,
            source=source,
            settings=request.settings,
            summary=summary,
            logger=logger,
        )

    logger.info(
        "Extraction finished sources_read=%d sources_failed=%d documents_decoded=%d "
        "documents_failed=%d files_written=%d files_failed=%d",
        summary.sources_read,
        summary.sources_failed,
        summary.documents_decoded,
        summary.documents_failed,
        summary.files_written,
        summary.files_failed,
    )
    return summary


def _process_source_data(
    data: bytes,
    *,
    source: str,
    settings: ExtractionSettings,
    summary: ExtractionSummary,
    logger: logging.Logger,
) -> None:
    for decode_result in decode_documents(data, source=source, logger=logger):
        if not decode_result.ok or decode_result.document is None:
            summary.documents_failed += 1
            continue
        summary.documents_decoded += 1
        for extracted in extract_schemas(decode_result.document):
            filename = render_filename(
                settings.filename_format,
                kind=extracted.kind,
                version=extracted.version,
                group=extracted.group,
            )
            write_result = write_schema_file(
                normalize_schema(extracted.payload),
                settings.output_dir / filename,
                logger=logger,
            )
            if write_result.ok:
                summary.written_paths.append(write_result.path)
            else:
                summary.files_failed += 1
