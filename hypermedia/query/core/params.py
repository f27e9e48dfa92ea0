"""Query parameter value normalization.

Helpers that turn raw parameter strings into ordered sequences: plain
comma-separated lists (``fields``, ``include``) and sort terms with a
direction derived from a leading ``-``.
"""

from __future__ import annotations

from ..config import DESC_MARKER, LIST_SEPARATOR
from .enums import SortDirection
from .intent import SortSpec


def split_list(value: str) -> list[str]:
    """Split a comma-separated parameter value into its items.

    Order is preserved and items are not stripped or de-duplicated. An empty
    value yields a single empty item.

    Examples:
        >>> split_list("title,body")
        ['title', 'body']
        >>> split_list("")
        ['']
    """
    return value.split(LIST_SEPARATOR)


def sort_spec(field: str) -> SortSpec:
    """Parse one sort term into a field name and direction.

    Examples:
        >>> sort_spec("-name")
        SortSpec(field='name', direction=<SortDirection.DESC: 'DESC'>)
        >>> sort_spec("-").field
        '-'
    """
    if field.startswith(DESC_MARKER) and len(field) > 1:
        return SortSpec(field[1:], SortDirection.DESC)
    return SortSpec(field, SortDirection.ASC)


def sort_specs(value: str) -> list[SortSpec]:
    """Parse a comma-separated sort parameter value."""
    return [sort_spec(term) for term in split_list(value)]


def first_value(values: list[str] | str) -> str:
    """Return the value a single-valued parameter is read from.

    Multi-valued parameters only honour their first occurrence; a parameter
    present with no value at all reads as the empty string.
    """
    if isinstance(values, str):
        return values
    return values[0] if values else ""
