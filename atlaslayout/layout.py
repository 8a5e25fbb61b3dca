"""
Texture atlas layout.

Maps the sections of a shared texture. A sprite renderer uses the section at
a given index to know which part of the atlas to sample, and sprite-sheet
animations step through indices in order.

Optionally the layout stores which source texture each section came from
(see AtlasLayout.texture_handles). That mapping is written by whatever built
the atlas, never by grid generation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Hashable, Iterator, List, Optional, Union

from pydantic import ValidationError

from .exceptions import LayoutSerializationError
from .geometry import Rect, Vec2, Vec2Like
from .handle import Handle
from .schema import LayoutDefinition

logger = logging.getLogger(__name__)


class AtlasLayout:
    """
    Layout of a texture atlas: its overall size and the ordered list of
    sections it is split into.

    Attributes:
        size: Extent of the whole atlas surface
        textures: Sections of the atlas; a section's position is its index
        texture_handles: Source texture -> section index mapping, or None when
                         the layout was not built from individual textures

    Examples:
        Sprite sheet of 4 frames in a row:
        >>> layout = AtlasLayout.from_grid((24, 24), columns=4, rows=1)
        >>> layout.texture_rect(2)
        Rect(min=Vec2(x=48.0, y=0.0), max=Vec2(x=72.0, y=24.0))

        Hand-placed sections:
        >>> layout = AtlasLayout.new_empty((128, 128))
        >>> layout.add_texture(Rect((0, 0), (32, 64)))
        0
    """

    def __init__(
        self,
        size: Vec2Like,
        textures: Optional[List[Rect]] = None,
        texture_handles: Optional[Dict[Hashable, int]] = None
    ):
        self.size = Vec2.of(size)
        self.textures: List[Rect] = list(textures) if textures else []
        self.texture_handles = texture_handles

    @classmethod
    def new_empty(cls, dimensions: Vec2Like) -> "AtlasLayout":
        """Create a layout of the given dimensions with no sections."""
        return cls(dimensions)

    @classmethod
    def from_grid(
        cls,
        tile_size: Vec2Like,
        columns: int,
        rows: int,
        padding: Optional[Vec2Like] = None,
        offset: Optional[Vec2Like] = None
    ) -> "AtlasLayout":
        """
        Generate a layout as a grid where each tile_size cell is one section.

        Cells are separated by padding (between cells only, never before the
        first or after the last row/column) and the whole grid is shifted by
        offset from the top-left corner. Sections are indexed left to right,
        top to bottom.

        Args:
            tile_size: Size of one grid cell
            columns: Grid column count
            rows: Grid row count
            padding: Optional gap between cells (defaults to (0, 0))
            offset: Optional global grid offset (defaults to (0, 0))

        Returns:
            New AtlasLayout with columns * rows sections and no handle mapping
        """
        tile_size = Vec2.of(tile_size)
        padding = Vec2.of(padding) if padding is not None else Vec2.ZERO
        offset = Vec2.of(offset) if offset is not None else Vec2.ZERO

        sprites: List[Rect] = []
        pad_x, pad_y = 0.0, 0.0

        for y in range(rows):
            if y > 0:
                pad_y = padding.y
            for x in range(columns):
                if x > 0:
                    pad_x = padding.x

                current_padding = Vec2(pad_x, pad_y)
                rect_min = (tile_size + current_padding) * Vec2(x, y) + offset
                sprites.append(Rect(rect_min, rect_min + tile_size))

        # Whatever the accumulator ended at is the gap between cells
        current_padding = Vec2(pad_x, pad_y)
        grid_size = Vec2(columns, rows)
        size = (tile_size + current_padding) * grid_size - current_padding

        logger.debug(
            f"Generated {columns}x{rows} grid layout "
            f"({len(sprites)} sections, {size.x}x{size.y})"
        )
        return cls(size, sprites)

    def add_texture(self, rect: Rect) -> int:
        """
        Add a section to the layout and return its index.

        The rect is not checked against the atlas size.
        """
        self.textures.append(rect)
        return len(self.textures) - 1

    def len(self) -> int:
        """How many sections are in the layout"""
        return len(self.textures)

    def is_empty(self) -> bool:
        return not self.textures

    def get_texture_index(self, texture: Hashable) -> Optional[int]:
        """
        Retrieve the section index for a source texture handle.

        Only layouts whose builder attached texture_handles can answer this;
        every other case returns None.
        """
        if self.texture_handles is None:
            return None
        return self.texture_handles.get(texture)

    def texture_rect(self, index: int) -> Rect:
        """Section used to draw sprite frame `index`."""
        return self.textures[index]

    def texture_uv(self, index: int) -> List[float]:
        """
        Section `index` as normalized [u1, v1, u2, v2] with a top-left origin.

        An axis where the atlas has zero extent has nothing to normalize
        against; its components are 0.0.
        """
        rect = self.textures[index]
        width, height = self.size
        u_scale = 1.0 / width if width else 0.0
        v_scale = 1.0 / height if height else 0.0
        return [
            rect.min.x * u_scale,
            rect.min.y * v_scale,
            rect.max.x * u_scale,
            rect.max.y * v_scale,
        ]

    def __len__(self) -> int:
        return len(self.textures)

    def __getitem__(self, index: int) -> Rect:
        return self.textures[index]

    def __iter__(self) -> Iterator[Rect]:
        return iter(self.textures)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AtlasLayout):
            return NotImplemented
        return (
            self.size == other.size
            and self.textures == other.textures
            and self.texture_handles == other.texture_handles
        )

    def __repr__(self) -> str:
        handles = "none" if self.texture_handles is None else len(self.texture_handles)
        return (
            f"AtlasLayout(size=({self.size.x}, {self.size.y}), "
            f"sections={len(self.textures)}, handles={handles})"
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        Export to the JSON-ready layout schema.

        Raises:
            LayoutSerializationError: If a handle key is not a Handle
        """
        handles = None
        if self.texture_handles is not None:
            handles = []
            for handle, index in self.texture_handles.items():
                if not isinstance(handle, Handle):
                    raise LayoutSerializationError(
                        f"Cannot persist texture handle of type {type(handle).__name__}"
                    )
                handles.append({
                    'handle': {'index': handle.index, 'generation': handle.generation},
                    'index': index,
                })

        data = {
            'size': self.size.to_list(),
            'textures': [
                {'min': rect.min.to_list(), 'max': rect.max.to_list()}
                for rect in self.textures
            ],
            'texture_handles': handles,
        }
        try:
            return LayoutDefinition.model_validate(data).model_dump()
        except ValidationError as e:
            raise LayoutSerializationError(f"Invalid layout: {e}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AtlasLayout":
        """
        Rebuild a layout from its schema dict.

        Raises:
            LayoutSerializationError: If data does not match the layout schema
        """
        try:
            definition = LayoutDefinition.model_validate(data)
        except ValidationError as e:
            raise LayoutSerializationError(f"Invalid layout: {e}") from e

        textures = [Rect(Vec2.of(t.min), Vec2.of(t.max)) for t in definition.textures]

        handles = None
        if definition.texture_handles is not None:
            handles = {
                Handle(entry.handle.index, entry.handle.generation): entry.index
                for entry in definition.texture_handles
            }

        return cls(Vec2.of(definition.size), textures, handles)

    def save(self, path: Union[str, Path]) -> None:
        """Write the layout to a JSON file."""
        data = self.to_dict()
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved layout with {len(self.textures)} sections to {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AtlasLayout":
        """
        Read a layout from a JSON file.

        Raises:
            FileNotFoundError: If path does not exist
            LayoutSerializationError: If the file is not a valid layout
        """
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise LayoutSerializationError(f"Not valid JSON: {path}: {e}") from e

        layout = cls.from_dict(data)
        logger.info(f"Loaded layout with {len(layout.textures)} sections from {path}")
        return layout
