"""Resolution engine executing an Intent against collaborator capabilities.

The ResolutionEngine walks an Intent and asks the configured collaborators
for data, building up a ResponseDocument:

1. Resolves a link descriptor for every include path
2. Fetches the primary resources (with fields, filters and sortings)
3. Resolves include paths level by level, shallowest first

Architecture:
    Each step may depend on the resources fetched by the previous one: the
    linked-ID resolver for ``author.company`` inspects the ``author``
    resources already in the document. Include paths are therefore grouped
    by depth and processed in ascending depth order, keeping request order
    inside a group. Calls are synchronous and never overlap.

Design Decisions:
    - No partial results: any collaborator error aborts the resolution
    - Filters only apply to the primary fetch, never to linked fetches
    - A kind reached through several include paths accumulates all results

See Also:
    - IntentBuilder: Produces the Intent
    - render: Turns the ResponseDocument into the output shape
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..config import PATH_SEPARATOR
from ..core.capabilities import ResolveCapabilities
from ..core.exceptions import MissingFetchResourcesCapability, ValidationError
from ..core.intent import Intent
from ..models.document import ResponseDocument
from ..models.link import ResourceLink

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """Executes Intents using a fixed set of resolve capabilities."""

    def __init__(self, capabilities: ResolveCapabilities) -> None:
        self._capabilities = capabilities

    def execute(self, intent: Intent) -> ResponseDocument:
        """Fetch everything an Intent asks for.

        Args:
            intent: Parsed request

        Returns:
            Populated, unrendered ResponseDocument

        Raises:
            ValidationError: If a collaborator returns a malformed value
        """
        document = ResponseDocument(intent.primary_kind)
        logger.debug(
            "Resolving intent",
            extra={
                "kind": intent.primary_kind,
                "primary_ids": len(intent.primary_ids),
                "includes": list(intent.includes),
            },
        )

        self._resolve_links(intent, document)
        self._fetch_primary(intent, document)
        self._resolve_includes(intent, document)

        logger.debug("Resolution complete", extra={"document": repr(document)})
        return document

    def _resolve_links(self, intent: Intent, document: ResponseDocument) -> None:
        resolve_link = self._capabilities.resolve_link
        if resolve_link is None:
            return
        for path in intent.includes:
            document.links[path] = ResourceLink.coerce(resolve_link(path, document))

    def _fetch_primary(self, intent: Intent, document: ResponseDocument) -> None:
        if not intent.primary_ids:
            logger.debug("No primary IDs, skipping primary fetch")
            return

        kind = intent.primary_kind
        resources = self._capabilities.fetch_resources(
            kind,
            list(intent.primary_ids),
            intent.fields_for(kind),
            intent.filters,
            intent.sortings_for(kind),
        )
        document.resources[kind] = list(resources)
        logger.debug(
            "Fetched primary resources",
            extra={"kind": kind, "count": len(document.resources[kind])},
        )

    def _resolve_includes(self, intent: Intent, document: ResponseDocument) -> None:
        resolve_linked_ids = self._capabilities.resolve_linked_ids
        if not intent.includes or resolve_linked_ids is None:
            return

        for path in intent.includes_by_depth():
            kind, ids = _unpack_linked(path, resolve_linked_ids(path, document.resources))
            resources = self._capabilities.fetch_resources(
                kind,
                ids,
                intent.fields_for(kind),
                {},
                intent.sortings_for(kind),
            )
            document.add_resources(kind, resources)
            logger.debug(
                "Resolved include",
                extra={
                    "include": path,
                    "depth": path.count(PATH_SEPARATOR),
                    "kind": kind,
                    "ids": len(ids),
                },
            )


def _unpack_linked(path: str, result: Any) -> tuple[str, list[str]]:
    try:
        kind, ids = result
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Linked-ID resolver for {path!r} must return (kind, ids), got {result!r}"
        ) from e
    if not isinstance(kind, str) or isinstance(ids, str) or not isinstance(ids, Sequence):
        raise ValidationError(
            f"Linked-ID resolver for {path!r} must return (kind, ids), got {result!r}"
        )
    return kind, list(ids)


def execute(intent: Intent, capabilities: ResolveCapabilities | None) -> ResponseDocument:
    """Execute an Intent in one call.

    Raises:
        MissingFetchResourcesCapability: If no capabilities are supplied
    """
    if capabilities is None:
        logger.error("Execute called without resolve capabilities")
        raise MissingFetchResourcesCapability()
    return ResolutionEngine(capabilities).execute(intent)
