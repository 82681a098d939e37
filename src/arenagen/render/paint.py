# src/arenagen/render/paint.py
# Write a finished layout onto any tile sink, once per generated layout.

from ..grid import TileGrid, TileSink
from ..tiles import WEAPON, tile_for_kind


def paint_layout(layout, sink: TileSink) -> None:
    """
    Platforms first, in layout order, then weapon markers on top. Later
    writes win where cells coincide (a wall cell over the floor, a weapon
    over a platform).
    """
    for p in layout.platforms():
        tile = tile_for_kind(p.kind)
        for x, y in p.cells():
            sink.set_tile(x, y, tile)
    for w in layout.weapon_spawns():
        sink.set_tile(w.x, w.y, WEAPON)


def layout_to_grid(layout) -> TileGrid:
    grid = TileGrid(layout.width, layout.height)
    paint_layout(layout, grid)
    return grid
