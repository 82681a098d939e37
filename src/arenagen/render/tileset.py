from __future__ import annotations
from functools import lru_cache
from typing import Tuple

import pygame

from ..grid import TileGrid
from ..tiles import BOUNDARY, BRIDGE, CENTRAL, EMPTY, NORMAL, WEAPON
from .paint import layout_to_grid

BACKGROUND = (16, 16, 24, 255)

_COLORS = {
    EMPTY:    BACKGROUND,
    NORMAL:   (150, 150, 160, 255),
    CENTRAL:  (255, 200,  40, 255),
    BRIDGE:   ( 90, 200, 255, 255),
    BOUNDARY: ( 80,  80,  80, 255),
    WEAPON:   (230,  60,  60, 255),
}


def tile_color(tile_id: int) -> Tuple[int, int, int, int]:
    return _COLORS.get(tile_id, (255, 0, 255, 255))


class Tileset:
    """
    Flat-colour tile surfaces, cached per (tile_id, size).
    Weapon markers are drawn as a disc so they read over platforms.
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=256)
    def view(self, tile_id: int, size: int) -> pygame.Surface:
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        if tile_id == WEAPON:
            img.fill((0, 0, 0, 0))
            pygame.draw.circle(img, tile_color(tile_id), (size // 2, size // 2), max(1, size // 2 - 1))
        else:
            img.fill(tile_color(tile_id))
        return img

    def get(self, tile_id: int) -> pygame.Surface:
        return self.view(tile_id, self.tile_size)


def draw_grid(screen: pygame.Surface, grid: TileGrid, tiles: Tileset, origin=(0, 0)) -> None:
    ox, oy = origin
    ts = tiles.tile_size
    screen.fill(BACKGROUND, pygame.Rect(ox, oy, grid.width * ts, grid.height * ts))
    # as_matrix() is top row first, so row index maps straight to screen y.
    for row, cells in enumerate(grid.as_matrix()):
        for col, tid in enumerate(cells):
            if tid != EMPTY:
                screen.blit(tiles.get(tid), (ox + col * ts, oy + row * ts))


def layout_surface(layout, tile_size: int = 8) -> pygame.Surface:
    """Offscreen surface of the whole layout; no display needed."""
    grid = layout_to_grid(layout)
    surf = pygame.Surface((grid.width * tile_size, grid.height * tile_size), pygame.SRCALPHA)
    draw_grid(surf, grid, Tileset(tile_size))
    return surf
