"""Response document under construction."""

from __future__ import annotations

from typing import Any

from .link import ResourceLink


class ResponseDocument:
    """Fetched resources and link descriptors for one resolution.

    The document is created empty when resolution starts and filled as
    collaborators return. Resources stay grouped by kind, the primary kind
    included, until ``render()`` partitions them; collaborators such as the
    linked-ID resolver read the unpartitioned map while resolution runs.
    """

    def __init__(self, primary_kind: str) -> None:
        self._primary_kind = primary_kind
        self.links: dict[str, ResourceLink] = {}
        self.resources: dict[str, list[Any]] = {}

    @property
    def primary_kind(self) -> str:
        return self._primary_kind

    def add_resources(self, kind: str, resources: Any) -> None:
        """Append fetched resources to the set for a kind."""
        self.resources.setdefault(kind, []).extend(resources)

    def render(self) -> dict[str, Any]:
        """Render the document; see ``runtime.assembler.render``."""
        from ..runtime.assembler import render

        return render(self)

    def to_json(self, *, indent: int | None = None) -> str:
        """Render the document and encode it as JSON."""
        from ..runtime.assembler import render_json

        return render_json(self, indent=indent)

    def __repr__(self) -> str:
        counts = {kind: len(items) for kind, items in self.resources.items()}
        return (
            f"ResponseDocument(primary_kind={self._primary_kind!r}, "
            f"resources={counts}, links={sorted(self.links)})"
        )
