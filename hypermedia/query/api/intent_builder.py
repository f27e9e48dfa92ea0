"""Intent builder turning raw query parameters into an Intent.

Architecture:
    The builder recognizes four parameter shapes in a flat, multi-valued
    mapping (as produced from a URL query string):

    - ``include=a,b.c``: relationship paths to load
    - ``fields=f1,f2`` or ``fields[kind]=f1,f2``: field selection
    - ``sort=f1,-f2`` or ``sort[kind]=...``: ordering
    - anything else: a filter, subject to the optional allow-list

    For fields and sort, the bare form scopes to the primary kind and the
    bracketed form to the named kind. The two forms are mutually exclusive
    across the whole request.

Design Decisions:
    - Bracket matchers are compiled once at import time
    - The caller's parameter mapping is never mutated
    - Only the first value of ``include``/``fields``/``sort`` is read;
      filters keep every value
    - fetch_ids errors propagate unchanged

See Also:
    - Intent: The parsed result
    - ResolutionEngine: Executes the intent
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from ..config import FIELDS_PARAM, INCLUDE_PARAM, SORT_PARAM
from ..core.capabilities import (
    DefaultFields,
    FetchIDs,
    FilterAllowed,
    ParseCapabilities,
)
from ..core.exceptions import MismatchedFieldsParams, MismatchedSortParams
from ..core.intent import Intent, SortSpec
from ..core.params import first_value, sort_specs, split_list

__all__ = [
    "IntentBuilder",
    "parse",
]

logger = logging.getLogger(__name__)

_FIELDS_RE = re.compile(rf"^{FIELDS_PARAM}\[([^\]]+)\]$")
_SORT_RE = re.compile(rf"^{SORT_PARAM}\[([^\]]+)\]$")


class IntentBuilder:
    """Builds Intents for one primary kind.

    Example:
        >>> builder = IntentBuilder(
        ...     "articles",
        ...     ParseCapabilities(fetch_ids=lambda: ["1", "2"]),
        ... )
        >>> intent = builder.parse({"include": ["author"], "sort": ["-created"]})
        >>> intent.includes
        ('author',)
    """

    def __init__(self, kind: str, capabilities: ParseCapabilities) -> None:
        self._kind = kind
        self._capabilities = capabilities

    @property
    def kind(self) -> str:
        return self._kind

    def parse(self, params: Mapping[str, Sequence[str]]) -> Intent:
        """Parse raw query parameters into an Intent.

        Args:
            params: Parameter name -> list of raw values

        Returns:
            Validated Intent for the builder's kind

        Raises:
            MismatchedFieldsParams: If ``fields`` and ``fields[kind]`` are both present
            MismatchedSortParams: If ``sort`` and ``sort[kind]`` are both present
        """
        primary_ids = tuple(self._capabilities.fetch_ids())
        logger.debug(
            "Fetched primary IDs",
            extra={"kind": self._kind, "count": len(primary_ids)},
        )

        remaining = dict(params)

        includes: tuple[str, ...] = ()
        if INCLUDE_PARAM in remaining:
            includes = tuple(split_list(first_value(remaining.pop(INCLUDE_PARAM))))

        fields: dict[str, list[str]] = {}
        bare_fields = FIELDS_PARAM in remaining
        if bare_fields:
            fields[self._kind] = split_list(first_value(remaining.pop(FIELDS_PARAM)))

        sortings: dict[str, list[SortSpec]] = {}
        bare_sort = SORT_PARAM in remaining
        if bare_sort:
            sortings[self._kind] = sort_specs(first_value(remaining.pop(SORT_PARAM)))

        filters: dict[str, list[str]] = {}
        filter_allowed = self._capabilities.filter_allowed
        for key, values in remaining.items():
            if match := _FIELDS_RE.match(key):
                if bare_fields:
                    raise MismatchedFieldsParams(params=[FIELDS_PARAM, key])
                fields[match.group(1)] = split_list(first_value(values))
            elif match := _SORT_RE.match(key):
                if bare_sort:
                    raise MismatchedSortParams(params=[SORT_PARAM, key])
                sortings[match.group(1)] = sort_specs(first_value(values))
            elif filter_allowed is None or filter_allowed(key):
                filters[key] = [values] if isinstance(values, str) else list(values)
            else:
                logger.debug("Dropped disallowed filter", extra={"filter": key})

        default_fields = self._capabilities.default_fields
        if default_fields is not None:
            # Defaults are added for the kinds that have sort terms.
            for kind in sortings:
                fields[kind] = fields.get(kind, []) + list(default_fields(kind))

        intent = Intent(
            primary_kind=self._kind,
            primary_ids=primary_ids,
            includes=includes,
            fields=fields,
            sortings=sortings,
            filters=filters,
        )
        logger.debug(
            "Parsed intent",
            extra={
                "kind": self._kind,
                "includes": list(includes),
                "field_kinds": sorted(fields),
                "sort_kinds": sorted(sortings),
                "filters": sorted(filters),
            },
        )
        return intent


def parse(
    kind: str,
    params: Mapping[str, Sequence[str]],
    fetch_ids: FetchIDs | None,
    default_fields: DefaultFields | None = None,
    filter_allowed: FilterAllowed | None = None,
) -> Intent:
    """Parse query parameters for a kind in one call.

    Raises:
        MissingFetchIDsCapability: If fetch_ids is None
        MismatchedFieldsParams: If bare and bracketed fields are mixed
        MismatchedSortParams: If bare and bracketed sort are mixed
    """
    capabilities = ParseCapabilities(
        fetch_ids=fetch_ids,
        default_fields=default_fields,
        filter_allowed=filter_allowed,
    )
    return IntentBuilder(kind, capabilities).parse(params)
