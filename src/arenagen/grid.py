# src/arenagen/grid.py
# Tile sinks and the grid-to-world mapping owned by the rendering side.
# Cells are y-up: (0, 0) is the bottom-left floor cell.

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

import pygame

from .tiles import EMPTY


class TileSink(Protocol):
    def set_tile(self, x: int, y: int, tile: int) -> None: ...


@dataclass
class TileGrid:
    """In-memory sink. Writes outside the grid are dropped."""

    width: int
    height: int
    buf: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.buf:
            self.buf = [EMPTY] * (self.width * self.height)

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set_tile(self, x: int, y: int, tile: int) -> None:
        if self.in_bounds(x, y):
            self.buf[self.idx(x, y)] = tile

    def as_matrix(self) -> List[List[int]]:
        # Top row first, the way a screen or a TSV reads it.
        return [
            [self.get(x, y) for x in range(self.width)]
            for y in range(self.height - 1, -1, -1)
        ]


@dataclass(frozen=True)
class GridMapping:
    cell_size: float = 1.0
    origin: Tuple[float, float] = (0.0, 0.0)
    anchor: Tuple[float, float] = (0.5, 0.5)

    def cell_to_world(self, x: int, y: int) -> pygame.Vector2:
        ox, oy = self.origin
        ax, ay = self.anchor
        return pygame.Vector2(ox + (x + ax) * self.cell_size, oy + (y + ay) * self.cell_size)

    def cell_corner(self, x: int, y: int) -> pygame.Vector2:
        """Lower-left corner of a cell in world space (no anchor)."""
        ox, oy = self.origin
        return pygame.Vector2(ox + x * self.cell_size, oy + y * self.cell_size)
