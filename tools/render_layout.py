#!/usr/bin/env python3
# Render a generated layout (or a layout JSON from arenatool emit) to PNG using Pillow.

import argparse, json, os
from PIL import Image, ImageDraw

from arenagen import log
from arenagen.config import GenerationConfig
from arenagen.grid import TileGrid
from arenagen.mapgen.generator import generate
from arenagen.render.paint import paint_layout
from arenagen.render.tileset import tile_color
from arenagen.tiles import EMPTY, WEAPON, tile_for_kind

def grid_from_json(path):
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    grid = TileGrid(data["width"], data["height"])
    for p in data["platforms"]:
        tile = tile_for_kind(p["kind"])
        for dx in range(p["length"]):
            grid.set_tile(p["x"] + dx, p["y"], tile)
    for x, y in data["weapon_spawns"]:
        grid.set_tile(x, y, WEAPON)
    return grid

def grid_from_seed(seed):
    cfg = GenerationConfig().with_seed(seed)
    layout = generate(cfg)
    grid = TileGrid(layout.width, layout.height)
    paint_layout(layout, grid)
    return grid

def render_grid(grid, out_png, tile_size=8):
    w, h = grid.width * tile_size, grid.height * tile_size
    canvas = Image.new("RGBA", (w, h), tile_color(EMPTY))
    draw = ImageDraw.Draw(canvas)
    for row, cells in enumerate(grid.as_matrix()):
        for col, tid in enumerate(cells):
            if tid == EMPTY:
                continue
            x0, y0 = col * tile_size, row * tile_size
            box = (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)
            if tid == WEAPON:
                draw.ellipse(box, fill=tile_color(tid))
            else:
                draw.rectangle(box, fill=tile_color(tid))
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
    return canvas

def main():
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--layout", type=str, help="Layout JSON written by arenatool emit")
    src.add_argument("--seed", type=int, help="Generate with default config and this seed")
    ap.add_argument("--out", type=str, default="out/png/arena.png", help="PNG path")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args()
    log.configure(args.verbose)

    grid = grid_from_json(args.layout) if args.layout else grid_from_seed(args.seed)
    render_grid(grid, args.out, tile_size=args.tile)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
