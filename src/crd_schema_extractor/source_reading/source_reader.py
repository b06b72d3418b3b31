"""Source fetching service for local files and HTTP(S) URLs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import requests

from crd_schema_extractor.errors import SourceReadError

from .read_outcomes import SourceKind, SourceReadResult

URL_PREFIX = "http"
UNBOUNDED_REDIRECTS = 1_000_000


class HTTPSession(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for the HTTP client used to fetch URL sources."""

    def get(self, url: str, **kwargs) -> requests.Response: ...


def classify_source(identifier: str) -> SourceKind:
    """Treat anything starting with the literal prefix ``http`` as a URL."""
    return SourceKind.URL if identifier.startswith(URL_PREFIX) else SourceKind.FILE


def build_http_session() -> requests.Session:
    """Return a session that follows redirects and applies no timeout."""
    session = requests.Session()
    session.max_redirects = UNBOUNDED_REDIRECTS
    return session


def read_source(
    identifier: str, *, http_session: HTTPSession, logger: logging.Logger
) -> SourceReadResult:
    """Read the complete content of one source, reporting failures as a result value."""
    kind = classify_source(identifier)
    try:
        if kind is SourceKind.URL:
            data = _fetch_url(identifier, http_session)
        else:
            data = _read_file(identifier)
    except SourceReadError as exc:
        logger.error("Failed to read source: %s source=%s", exc, identifier)
        return SourceReadResult.failed(identifier, kind, exc)

    logger.debug("Source read source=%s bytes=%d", identifier, len(data))
    return SourceReadResult.read(identifier, kind, data)


def _fetch_url(url: str, http_session: HTTPSession) -> bytes:
    try:
        response = http_session.get(url, allow_redirects=True)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceReadError(f"Failed to fetch URL {url}: {exc}") from exc
    return response.content


def _read_file(path_value: str) -> bytes:
    try:
        return Path(path_value).read_bytes()
    except OSError as exc:
        raise SourceReadError(f"Failed to read file {path_value}: {exc}") from exc
