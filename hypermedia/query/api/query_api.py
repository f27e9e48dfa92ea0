"""High-level facade for resolving queries against one resource kind.

Architecture:
    QueryAPI pairs a primary kind with both capability sets and chains the
    pipeline: parse raw parameters into an Intent, execute it, and render
    the resulting document. Each stage is also exposed on its own for
    callers that need to inspect or post-process the intermediate values.

Example:
    >>> api = QueryAPI(
    ...     "articles",
    ...     fetch_ids=lambda: ["1"],
    ...     fetch_resources=lambda kind, ids, fields, filters, sortings: [{"id": "1"}],
    ... )
    >>> api.resolve({})
    {'articles': {'id': '1'}}

See Also:
    - IntentBuilder: Parsing stage
    - ResolutionEngine: Fetch stage
    - render: Assembly stage
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qs

from ..core.capabilities import (
    DefaultFields,
    FetchIDs,
    FetchResources,
    FilterAllowed,
    ParseCapabilities,
    ResolveCapabilities,
    ResolveLink,
    ResolveLinkedIDs,
)
from ..core.intent import Intent
from ..models.document import ResponseDocument
from ..runtime.assembler import render
from ..runtime.resolver import ResolutionEngine
from .intent_builder import IntentBuilder

logger = logging.getLogger(__name__)


class QueryAPI:
    """Parse, execute and render queries for a single primary kind."""

    def __init__(
        self,
        kind: str,
        *,
        fetch_ids: FetchIDs | None,
        fetch_resources: FetchResources | None,
        default_fields: DefaultFields | None = None,
        filter_allowed: FilterAllowed | None = None,
        resolve_link: ResolveLink | None = None,
        resolve_linked_ids: ResolveLinkedIDs | None = None,
    ) -> None:
        """Initialize the facade.

        Both capability sets are built here, so missing required callables
        are reported at construction rather than on the first request.

        Raises:
            MissingFetchIDsCapability: If fetch_ids is None
            MissingFetchResourcesCapability: If fetch_resources is None
        """
        self._builder = IntentBuilder(
            kind,
            ParseCapabilities(
                fetch_ids=fetch_ids,
                default_fields=default_fields,
                filter_allowed=filter_allowed,
            ),
        )
        self._engine = ResolutionEngine(
            ResolveCapabilities(
                fetch_resources=fetch_resources,
                resolve_link=resolve_link,
                resolve_linked_ids=resolve_linked_ids,
            )
        )

    @property
    def kind(self) -> str:
        return self._builder.kind

    def parse(self, params: Mapping[str, Sequence[str]]) -> Intent:
        return self._builder.parse(params)

    def execute(self, intent: Intent) -> ResponseDocument:
        return self._engine.execute(intent)

    def resolve(self, params: Mapping[str, Sequence[str]]) -> dict[str, Any]:
        """Parse, execute and render in one call."""
        return render(self.execute(self.parse(params)))

    def resolve_query_string(self, query_string: str) -> dict[str, Any]:
        """Resolve a raw URL query string such as ``include=author&sort=-id``."""
        return self.resolve(params_from_query_string(query_string))


def params_from_query_string(query_string: str) -> dict[str, list[str]]:
    """Turn a URL query string into a multi-valued parameter mapping.

    Blank values are kept so ``fields=`` still counts as a fields parameter.
    A leading ``?`` is ignored.

    Examples:
        >>> params_from_query_string("?include=author&fields[articles]=title")
        {'include': ['author'], 'fields[articles]': ['title']}
    """
    return parse_qs(query_string.lstrip("?"), keep_blank_values=True)
