"""Opaque texture identity tokens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Handle:
    """
    Reference to an externally-owned texture.

    The layout only ever hashes and compares handles; index and generation
    belong to whatever asset table issued the handle. A slot that is freed
    and reused gets a new generation so stale handles never match.
    """
    index: int
    generation: int = 0

    def __repr__(self) -> str:
        return f"Handle({self.index}v{self.generation})"
