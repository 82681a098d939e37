#!/usr/bin/env python3
# Minimal interactive viewer for generated arenas (no gameplay).
# - R: regenerate with a fresh random seed
# - LEFT/RIGHT: previous/next seed
# - P: cycle presets
# - S: toggle player spawn-point overlay
# - 60 Hz fixed loop

import argparse
import pygame

from arenagen import log
from arenagen.config import GenerationConfig
from arenagen.mapgen.generator import generate
from arenagen.presets import MemoryStore, PresetStore
from arenagen.render.paint import layout_to_grid
from arenagen.render.tileset import Tileset, draw_grid
from arenagen.rng import entropy_seed
from arenagen.spawn.points import SpawnCriteria, filter_spawn_points

SPAWN_COLOR = (60, 230, 90)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Initial seed (random if omitted)")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--spawns", type=int, default=10, help="Spawn points to overlay")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    args = ap.parse_args()
    log.configure(args.verbose)

    presets = PresetStore(MemoryStore())
    names = ["Default"] + presets.names()
    preset_idx = 0
    seed = args.seed if args.seed is not None else entropy_seed()
    show_spawns = False

    def current_config():
        if preset_idx == 0:
            return GenerationConfig()
        return presets.get(names[preset_idx])

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)

    def build():
        layout = generate(current_config().with_seed(seed))
        pts = filter_spawn_points(layout, SpawnCriteria(count=args.spawns))
        return layout, layout_to_grid(layout), pts

    layout, grid, spawn_pts = build()
    screen = pygame.display.set_mode((grid.width * args.tile, grid.height * args.tile))

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                rebuild = True
                if ev.key == pygame.K_ESCAPE:
                    running = False
                    rebuild = False
                elif ev.key == pygame.K_r:
                    seed = entropy_seed()
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, seed - 1)
                elif ev.key == pygame.K_p:
                    preset_idx = (preset_idx + 1) % len(names)
                elif ev.key == pygame.K_s:
                    show_spawns = not show_spawns
                    rebuild = False
                else:
                    rebuild = False
                if rebuild:
                    layout, grid, spawn_pts = build()
                    size = (grid.width * args.tile, grid.height * args.tile)
                    if screen.get_size() != size:
                        screen = pygame.display.set_mode(size)

        draw_grid(screen, grid, tiles)
        if show_spawns:
            # world units are cells (y-up); flip for the screen
            for p in spawn_pts:
                px = int(p.x * args.tile)
                py = int((grid.height - p.y) * args.tile)
                pygame.draw.circle(screen, SPAWN_COLOR, (px, py), max(2, args.tile // 2), 1)

        pygame.display.set_caption(
            f"Arena Viewer — {names[preset_idx]}  seed {seed}  "
            f"{len(layout.platforms())} platforms  {len(layout.weapon_spawns())} weapons"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
