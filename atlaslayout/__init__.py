"""
atlaslayout - Texture atlas layouts for sprite rendering and animation

Describes how a shared texture is split into indexed sections, generates
uniform sprite-sheet grids, and keeps the optional mapping from source
texture handles to section index.
"""

from atlaslayout.geometry import Vec2, Rect
from atlaslayout.handle import Handle
from atlaslayout.layout import AtlasLayout

__version__ = "0.0.1"
__all__ = ["AtlasLayout", "Handle", "Rect", "Vec2"]
