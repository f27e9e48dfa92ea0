"""High-level API facades."""

from .intent_builder import IntentBuilder, parse
from .query_api import QueryAPI, params_from_query_string

__all__ = [
    "IntentBuilder",
    "QueryAPI",
    "parse",
    "params_from_query_string",
]
