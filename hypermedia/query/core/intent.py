"""Parsed query intent.

Architecture:
    An Intent is the validated, structured form of a request's query
    parameters. It is produced once by the IntentBuilder and consumed by the
    ResolutionEngine; nothing downstream mutates it.

Key Types:
    - SortSpec: one ``(field, direction)`` sort term
    - Intent: primary kind and IDs plus per-kind fields and sortings,
      filters and include paths
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ..config import PATH_SEPARATOR
from .enums import SortDirection


class SortSpec(NamedTuple):
    """Single sort term for a kind."""

    field: str
    direction: SortDirection


@dataclass(frozen=True)
class Intent:
    """Structured representation of a parsed request.

    Attributes:
        primary_kind: Root resource kind of the request
        primary_ids: IDs of the primary collection, in fetch order
        includes: Dot-separated relationship paths, in request order
        fields: Kind -> requested field names (absent kind means defaults)
        sortings: Kind -> ordered sort terms
        filters: Filter key -> raw values
    """

    primary_kind: str
    primary_ids: tuple[str, ...] = ()
    includes: tuple[str, ...] = ()
    fields: dict[str, list[str]] = field(default_factory=dict)
    sortings: dict[str, list[SortSpec]] = field(default_factory=dict)
    filters: dict[str, list[str]] = field(default_factory=dict)

    def fields_for(self, kind: str) -> list[str] | None:
        """Requested fields for a kind, or None when the caller asked for none."""
        return self.fields.get(kind)

    def sortings_for(self, kind: str) -> list[SortSpec] | None:
        """Sort terms for a kind, or None when unsorted."""
        return self.sortings.get(kind)

    def includes_by_depth(self) -> list[str]:
        """Include paths ordered by nesting depth.

        Depth is the number of path separators, so ``author`` comes before
        ``author.company``. Paths of equal depth keep their request order.
        """
        return sorted(self.includes, key=lambda path: path.count(PATH_SEPARATOR))

    def dump(self) -> dict[str, Any]:
        """Return a debug dump of the intent internals."""
        return {
            "kind": self.primary_kind,
            "primaryIDs": list(self.primary_ids),
            "includes": list(self.includes),
            "sortings": {
                kind: [[spec.field, spec.direction.value] for spec in specs]
                for kind, specs in self.sortings.items()
            },
            "fields": {kind: list(names) for kind, names in self.fields.items()},
            "filters": {key: list(values) for key, values in self.filters.items()},
        }
