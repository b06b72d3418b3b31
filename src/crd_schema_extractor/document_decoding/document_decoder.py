"""Multi-document YAML decoding into CRD documents."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

import yaml

from crd_schema_extractor.errors import DocumentDecodeError

from .crd_models import CRDDocument, DocumentDecodeResult, VersionRecord

_DOCUMENT_START = re.compile(r"^---(?:[ \t]|\r?$)")
_DOCUMENT_END = re.compile(r"^\.\.\.(?:[ \t]|\r?$)")
_PREAMBLE_LINE = re.compile(r"^\s*(?:%|#|$)")


class CRDLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe loader that keeps timestamps and ``=`` values as plain strings."""


def _construct_plain_string(loader: yaml.SafeLoader, node: yaml.Node) -> str:
    if not isinstance(node, yaml.ScalarNode):
        raise yaml.constructor.ConstructorError(
            "while constructing a value",
            node.start_mark,
            f"expected a scalar, but found {node.id}",
            node.start_mark,
        )
    return str(loader.construct_scalar(node))


CRDLoader.add_constructor("tag:yaml.org,2002:timestamp", _construct_plain_string)
CRDLoader.add_constructor("tag:yaml.org,2002:value", _construct_plain_string)


def decode_documents(
    data: bytes, *, source: str, logger: logging.Logger
) -> Iterator[DocumentDecodeResult]:
    """Yield one result per YAML document in ``data``, in stream order.

    Each document is parsed on its own, so a malformed document produces a
    failed result and decoding resumes with the next one. Empty documents
    are skipped.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        error = DocumentDecodeError(f"Source is not valid UTF-8: {exc}")
        logger.error("Failed to decode YAML: %s source=%s", error, source)
        yield DocumentDecodeResult.failed(source, 1, error)
        return

    for index, chunk in enumerate(split_documents(text), start=1):
        try:
            root, node = _load_document(chunk)
            if root is None:
                continue
            document = build_crd_document(root, node)
        except (yaml.YAMLError, RecursionError) as exc:
            error = DocumentDecodeError(f"Invalid YAML document: {exc}")
        except DocumentDecodeError as exc:
            error = exc
        else:
            yield DocumentDecodeResult.decoded(source, index, document)
            continue
        logger.error("Failed to decode YAML: %s source=%s document=%d", error, source, index)
        yield DocumentDecodeResult.failed(source, index, error)


def _load_document(chunk: str) -> tuple[Any, yaml.Node | None]:
    """Parse one document, returning the constructed data and its node tree."""
    loader = CRDLoader(chunk)
    try:
        node = loader.get_single_node()
        if node is None:
            return None, None
        return loader.construct_document(node), node
    finally:
        loader.dispose()


def split_documents(text: str) -> list[str]:
    """Split a YAML stream into per-document texts on ``---`` and ``...`` markers.

    Directive, comment and blank lines preceding a ``---`` marker stay with the
    document that marker opens.
    """
    chunks: list[str] = []
    current: list[str] = []
    for line in text.splitlines(keepends=True):
        if _DOCUMENT_START.match(line):
            if current and not all(_PREAMBLE_LINE.match(item) for item in current):
                chunks.append("".join(current))
                current = []
            current.append(line)
        elif _DOCUMENT_END.match(line):
            current.append(line)
            chunks.append("".join(current))
            current = []
        else:
            current.append(line)
    if current and not all(_PREAMBLE_LINE.match(item) for item in current):
        chunks.append("".join(current))
    return chunks


def build_crd_document(root: Any, node: yaml.Node | None = None) -> CRDDocument:
    """Pick the CRD fields of interest out of a parsed document.

    When the document's node tree is given, text fields keep the scalar's
    spelling from the source, so ``name: 1.10`` stays ``"1.10"``.
    """
    if not isinstance(root, Mapping):
        raise DocumentDecodeError(
            f"Document root must be a mapping, found {type(root).__name__}."
        )
    spec = _optional_mapping(root.get("spec"), "spec")
    names = _optional_mapping(spec.get("names"), "spec.names")
    validation = _optional_mapping(spec.get("validation"), "spec.validation")
    return CRDDocument(
        kind=_scalar_text(
            names.get("kind"), "spec.names.kind", _raw_scalar(node, "spec", "names", "kind")
        ),
        group=_scalar_text(spec.get("group"), "spec.group", _raw_scalar(node, "spec", "group")),
        version=_scalar_text(
            spec.get("version"), "spec.version", _raw_scalar(node, "spec", "version")
        ),
        versions=_version_records(spec.get("versions"), node),
        legacy_schema=_schema_payload(
            validation.get("openAPIV3Schema"), "spec.validation.openAPIV3Schema"
        ),
    )


def _version_records(value: Any, node: yaml.Node | None) -> tuple[VersionRecord, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DocumentDecodeError("spec.versions must be a sequence.")
    records = []
    for position, entry in enumerate(value):
        label = f"spec.versions[{position}]"
        section = _optional_mapping(entry, label)
        schema_section = _optional_mapping(section.get("schema"), f"{label}.schema")
        records.append(
            VersionRecord(
                name=_scalar_text(
                    section.get("name"),
                    f"{label}.name",
                    _raw_scalar(node, "spec", "versions", position, "name"),
                ),
                schema=_schema_payload(
                    schema_section.get("openAPIV3Schema"), f"{label}.schema.openAPIV3Schema"
                ),
            )
        )
    return tuple(records)


def _optional_mapping(value: Any, field_name: str) -> Mapping[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DocumentDecodeError(f"{field_name} must be a mapping.")
    return value


def _schema_payload(value: Any, field_name: str) -> Mapping[Any, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DocumentDecodeError(f"{field_name} must be a mapping.")
    _ensure_acyclic(value, field_name, active=set(), finished=set())
    return value


def _ensure_acyclic(value: Any, field_name: str, *, active: set[int], finished: set[int]) -> None:
    """Reject payloads where an anchor's value contains its own alias."""
    if not isinstance(value, (Mapping, list)) or id(value) in finished:
        return
    if id(value) in active:
        raise DocumentDecodeError(f"{field_name} contains an alias to itself.")
    active.add(id(value))
    children = value.values() if isinstance(value, Mapping) else value
    for child in children:
        _ensure_acyclic(child, field_name, active=active, finished=finished)
    active.discard(id(value))
    finished.add(id(value))


def _raw_scalar(node: yaml.Node | None, *path: str | int) -> str | None:
    """Return the source text of the scalar at ``path`` in a node tree, if there is one."""
    current = node
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, yaml.SequenceNode) or step >= len(current.value):
                return None
            current = current.value[step]
            continue
        if not isinstance(current, yaml.MappingNode):
            return None
        # later duplicates win, as they do in the constructed mapping
        current = next(
            (
                value_node
                for key_node, value_node in reversed(current.value)
                if isinstance(key_node, yaml.ScalarNode) and key_node.value == step
            ),
            None,
        )
    if isinstance(current, yaml.ScalarNode):
        return current.value
    return None


def _scalar_text(value: Any, field_name: str, raw: str | None = None) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list, set)):
        raise DocumentDecodeError(f"{field_name} must be a scalar.")
    return raw if raw is not None else str(value)
