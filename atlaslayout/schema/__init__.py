"""Layout schema definitions."""
from .layoutjson import (
    LayoutDefinition,
    RectDefinition,
    HandleDefinition,
    HandleEntry,
)

__all__ = [
    "LayoutDefinition",
    "RectDefinition",
    "HandleDefinition",
    "HandleEntry",
]
