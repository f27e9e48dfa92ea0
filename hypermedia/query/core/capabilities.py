"""Collaborator capability sets.

Architecture:
    The library never fetches data itself. Callers plug in callables that
    know how to list primary IDs, fetch resources and resolve relationships.
    Those callables are grouped into two capability sets, one per stage:

    - ParseCapabilities: used by the IntentBuilder (fetch_ids required)
    - ResolveCapabilities: used by the ResolutionEngine (fetch_resources required)

    Required members are checked when the set is constructed so a
    misconfigured caller fails before the first request is served.

See Also:
    - IntentBuilder: consumes ParseCapabilities
    - ResolutionEngine: consumes ResolveCapabilities
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from .exceptions import MissingFetchIDsCapability, MissingFetchResourcesCapability

if TYPE_CHECKING:
    from ..models.document import ResponseDocument
    from ..models.link import ResourceLink
    from .intent import SortSpec

logger = logging.getLogger(__name__)


class FetchIDs(Protocol):
    """Returns the IDs of the primary collection."""

    def __call__(self) -> Sequence[str]: ...


class DefaultFields(Protocol):
    """Returns the fields always fetched for a kind."""

    def __call__(self, kind: str) -> Sequence[str]: ...


class FilterAllowed(Protocol):
    """Returns True if a filter key may be passed to the fetcher."""

    def __call__(self, key: str) -> bool: ...


class FetchResources(Protocol):
    """Returns resource representations for a kind and a set of IDs."""

    def __call__(
        self,
        kind: str,
        ids: Sequence[str],
        fields: Sequence[str] | None,
        filters: Mapping[str, Sequence[str]],
        sortings: Sequence[SortSpec] | None,
    ) -> Sequence[Any]: ...


class ResolveLink(Protocol):
    """Returns the link descriptor for an include path.

    The in-progress document is passed so hrefs can use state that is
    already known.
    """

    def __call__(self, path: str, document: ResponseDocument) -> ResourceLink | Mapping[str, str]: ...


class ResolveLinkedIDs(Protocol):
    """Returns ``(kind, ids)`` for an include path given the resources fetched so far."""

    def __call__(
        self, path: str, resources: Mapping[str, list[Any]]
    ) -> tuple[str, Sequence[str]]: ...


@dataclass(frozen=True)
class ParseCapabilities:
    """Capabilities used while parsing a request.

    Attributes:
        fetch_ids: Lists the primary collection's IDs (required)
        default_fields: Default field names per kind (optional)
        filter_allowed: Filter key allow-list (optional)

    Raises:
        MissingFetchIDsCapability: If fetch_ids is not supplied
    """

    fetch_ids: FetchIDs | None
    default_fields: DefaultFields | None = None
    filter_allowed: FilterAllowed | None = None

    def __post_init__(self) -> None:
        if self.fetch_ids is None:
            logger.error("Parse capabilities built without fetch_ids")
            raise MissingFetchIDsCapability()


@dataclass(frozen=True)
class ResolveCapabilities:
    """Capabilities used while resolving an intent.

    Attributes:
        fetch_resources: Fetches resources for a kind (required)
        resolve_link: Builds link descriptors for include paths (optional)
        resolve_linked_ids: Maps include paths to linked kinds and IDs (optional)

    Raises:
        MissingFetchResourcesCapability: If fetch_resources is not supplied
    """

    fetch_resources: FetchResources | None
    resolve_link: ResolveLink | None = None
    resolve_linked_ids: ResolveLinkedIDs | None = None

    def __post_init__(self) -> None:
        if self.fetch_resources is None:
            logger.error("Resolve capabilities built without fetch_resources")
            raise MissingFetchResourcesCapability()
