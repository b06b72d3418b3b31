"""Output filename rendering from naming templates."""

from __future__ import annotations

OUTPUT_SUFFIX = ".json"


def render_filename(template: str, *, kind: str, version: str, group: str = "") -> str:
    """Substitute naming tokens in ``template``, lower-case it and add ``.json``.

    Tokens are replaced as literal text: ``{kind}``, ``{version}``, ``{fullgroup}``
    (the full API group) and ``{group}`` (its first dot-separated label).
    """
    rendered = (
        template.replace("{kind}", kind)
        .replace("{version}", version)
        .replace("{fullgroup}", group)
        .replace("{group}", group.split(".")[0])
    )
    return rendered.lower() + OUTPUT_SUFFIX
