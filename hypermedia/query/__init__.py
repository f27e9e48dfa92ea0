"""Hypermedia Query - include/fields/sort query resolution for hypermedia APIs."""

from .api import IntentBuilder, QueryAPI, params_from_query_string, parse
from .core import (
    CapabilityError,
    Intent,
    MismatchedFieldsParams,
    MismatchedSortParams,
    MissingFetchIDsCapability,
    MissingFetchResourcesCapability,
    ParamsError,
    ParseCapabilities,
    QueryError,
    ResolveCapabilities,
    SortDirection,
    SortSpec,
    ValidationError,
    sort_spec,
    split_list,
)
from .models import ResourceLink, ResponseDocument
from .runtime import ResolutionEngine, execute, render, render_json

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Intent",
    "SortSpec",
    "SortDirection",
    "ParseCapabilities",
    "ResolveCapabilities",
    # Models
    "ResourceLink",
    "ResponseDocument",
    # Pipeline
    "split_list",
    "sort_spec",
    "parse",
    "IntentBuilder",
    "execute",
    "ResolutionEngine",
    "render",
    "render_json",
    # Facade
    "QueryAPI",
    "params_from_query_string",
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
