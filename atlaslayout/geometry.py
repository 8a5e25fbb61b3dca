"""
2D value types shared by the atlas layout.

All coordinates use a TOP-LEFT origin with +Y pointing down, the same
convention as image pixels:

    (0,0) ------> +X
      |
      |   +------+ min
      v   |      |
     +Y   +------+ max

Units are whatever the atlas uses (typically pixels).
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union


@dataclass(frozen=True)
class Vec2:
    """Immutable (x, y) pair used for points and extents."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: "Vec2Like") -> "Vec2":
        """Coerce a Vec2 or an (x, y) sequence into a Vec2."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __add__(self, other: "Vec2Like") -> "Vec2":
        other = Vec2.of(other)
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2Like") -> "Vec2":
        other = Vec2.of(other)
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union["Vec2Like", float]) -> "Vec2":
        # Component-wise for vectors, uniform for scalars
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        other = Vec2.of(other)
        return Vec2(self.x * other.x, self.y * other.y)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_list(self) -> list:
        return [self.x, self.y]


Vec2.ZERO = Vec2(0.0, 0.0)

Vec2Like = Union[Vec2, Tuple[float, float], Sequence[float]]


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle defined by its min (top-left) and max
    (bottom-right) corners.

    The constructor stores the corners as given. Use from_corners() when the
    corners may come in any order.
    """
    min: Vec2
    max: Vec2

    def __post_init__(self):
        # Accept plain tuples for convenience
        object.__setattr__(self, 'min', Vec2.of(self.min))
        object.__setattr__(self, 'max', Vec2.of(self.max))

    @classmethod
    def from_corners(cls, p0: Vec2Like, p1: Vec2Like) -> "Rect":
        """Build a rect from two opposite corners in any order."""
        p0, p1 = Vec2.of(p0), Vec2.of(p1)
        return cls(
            Vec2(min(p0.x, p1.x), min(p0.y, p1.y)),
            Vec2(max(p0.x, p1.x), max(p0.y, p1.y)),
        )

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def size(self) -> Vec2:
        return self.max - self.min

    @property
    def center(self) -> Vec2:
        return (self.min + self.max) * 0.5

    def contains(self, point: Vec2Like) -> bool:
        """True if point lies inside the rect (edges included)."""
        point = Vec2.of(point)
        return (self.min.x <= point.x <= self.max.x
                and self.min.y <= point.y <= self.max.y)

    def is_valid(self) -> bool:
        return self.min.x <= self.max.x and self.min.y <= self.max.y
