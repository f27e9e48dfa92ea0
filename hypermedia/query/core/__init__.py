"""Core components."""

from .capabilities import (
    DefaultFields,
    FetchIDs,
    FetchResources,
    FilterAllowed,
    ParseCapabilities,
    ResolveCapabilities,
    ResolveLink,
    ResolveLinkedIDs,
)
from .enums import SortDirection
from .exceptions import (
    CapabilityError,
    MismatchedFieldsParams,
    MismatchedSortParams,
    MissingFetchIDsCapability,
    MissingFetchResourcesCapability,
    ParamsError,
    QueryError,
    ValidationError,
)
from .intent import Intent, SortSpec
from .params import sort_spec, sort_specs, split_list

__all__ = [
    "SortDirection",
    "SortSpec",
    "Intent",
    "split_list",
    "sort_spec",
    "sort_specs",
    # Capabilities
    "ParseCapabilities",
    "ResolveCapabilities",
    "FetchIDs",
    "DefaultFields",
    "FilterAllowed",
    "FetchResources",
    "ResolveLink",
    "ResolveLinkedIDs",
    # Exceptions
    "QueryError",
    "CapabilityError",
    "MissingFetchIDsCapability",
    "MissingFetchResourcesCapability",
    "ParamsError",
    "MismatchedFieldsParams",
    "MismatchedSortParams",
    "ValidationError",
]
