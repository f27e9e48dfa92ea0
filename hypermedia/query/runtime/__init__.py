"""Runtime components: intent resolution and response assembly."""

from .assembler import collapse, render, render_json
from .resolver import ResolutionEngine, execute

__all__ = [
    "ResolutionEngine",
    "execute",
    "render",
    "render_json",
    "collapse",
]
