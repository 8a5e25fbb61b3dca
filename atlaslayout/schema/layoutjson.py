"""
Layout JSON schema: persisted form of an AtlasLayout.

COORDINATES:
- Top-left origin, +Y down, same units as the atlas (typically pixels)
- Vectors are stored as [x, y]

ORDER IS DATA:
The position of a rect in `textures` is the section index that sprites and
animations refer to. Loading and saving must never reorder it.

HANDLE MAP PRESENCE:
- texture_handles = null  -> layout has no source texture mapping (e.g. grid)
- texture_handles = []    -> mapping attached but empty
These are different layouts and must survive a round trip.

STORED AS GIVEN:
Rects are not required to have min <= max and handle indices are not checked
against the section count. Whoever built the layout owns those rules; the
file only has to reproduce the layout exactly.

EXAMPLE:
{
    "schema_version": "1.0",
    "size": [32.0, 16.0],
    "textures": [
        {"min": [0.0, 0.0], "max": [16.0, 16.0]},
        {"min": [16.0, 0.0], "max": [32.0, 16.0]}
    ],
    "texture_handles": [
        {"handle": {"index": 7, "generation": 0}, "index": 1}
    ]
}
"""

from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

# Type aliases for better readability
Vec2 = List[float]

#########################
# SECTIONS
#########################

class RectDefinition(BaseModel):
    model_config = ConfigDict(extra='forbid')

    min: Vec2 = Field(..., description="Top-left corner [x, y].", min_length=2, max_length=2)
    max: Vec2 = Field(..., description="Bottom-right corner [x, y].", min_length=2, max_length=2)

#########################
# HANDLES
#########################

class HandleDefinition(BaseModel):
    model_config = ConfigDict(extra='forbid')

    index: int = Field(..., description="Slot in the owning asset table.")
    generation: int = Field(0, description="Slot generation; bumps when the slot is reused.")

class HandleEntry(BaseModel):
    model_config = ConfigDict(extra='forbid')

    handle: HandleDefinition
    index: int = Field(..., description="Section index the source texture was packed into.")

#########################
# TOP-LEVEL MODEL
#########################

class LayoutDefinition(BaseModel):
    model_config = ConfigDict(extra='forbid')

    schema_version: str = Field('1.0', description="Schema version.")
    size: Vec2 = Field(..., description="Atlas extent [width, height].", min_length=2, max_length=2)
    textures: List[RectDefinition] = Field(default_factory=list, description="Sections in index order.")
    texture_handles: Optional[List[HandleEntry]] = Field(None, description="Source texture -> section index, or null when absent.")

    @field_validator('texture_handles')
    @classmethod
    def validate_unique_handles(cls, v):
        if v is None:
            return v
        seen = set()
        for entry in v:
            key = (entry.handle.index, entry.handle.generation)
            if key in seen:
                raise ValueError(f"Duplicate texture handle {list(key)}")
            seen.add(key)
        return v

# Rebuild models for forward references
RectDefinition.model_rebuild()
HandleEntry.model_rebuild()
LayoutDefinition.model_rebuild()
