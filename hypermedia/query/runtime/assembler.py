"""Response assembly.

Partitions a ResponseDocument into the output shape:

    {
        "links": {<include path>: {"href": ..., "type": ...}},
        <primary kind>: <resource> | [<resource>, ...],
        "linked": {<kind>: <resource> | [<resource>, ...]},
    }

``links`` and ``linked`` are omitted when empty; the primary key is omitted
when nothing was fetched for the primary kind. A set with exactly one
element renders as that element, for primary and linked kinds alike.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import to_json

from ..config import LINKED_SECTION, LINKS_SECTION
from ..models.document import ResponseDocument


def collapse(resources: list[Any]) -> Any:
    """Return the only element of a singleton set, else the set as a list."""
    if len(resources) == 1:
        return resources[0]
    return list(resources)


def render(document: ResponseDocument) -> dict[str, Any]:
    """Render a document into its serializable shape without mutating it."""
    rendered: dict[str, Any] = {}

    if document.links:
        rendered[LINKS_SECTION] = {
            path: link.model_dump(by_alias=True) for path, link in document.links.items()
        }

    remaining = dict(document.resources)
    primary = remaining.pop(document.primary_kind, None)
    if primary is not None:
        rendered[document.primary_kind] = collapse(primary)

    if remaining:
        rendered[LINKED_SECTION] = {kind: collapse(items) for kind, items in remaining.items()}

    return rendered


def render_json(document: ResponseDocument, *, indent: int | None = None) -> str:
    """Render a document and encode it as JSON text.

    Resources may be plain data, dataclasses or pydantic models.
    """
    return to_json(render(document), indent=indent).decode()
