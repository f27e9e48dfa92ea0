"""Data models."""

from .document import ResponseDocument
from .link import ResourceLink

__all__ = [
    "ResourceLink",
    "ResponseDocument",
]
