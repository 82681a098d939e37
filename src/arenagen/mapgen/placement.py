# src/arenagen/mapgen/placement.py
# Placement stages run before connectivity repair:
#   1) boundaries (floor + two wall stacks)
#   2) central platform
#   3) density-driven random placement
# Cell coordinates are y-up; the floor sits at y=0.

import logging

from ..config import GenerationConfig
from ..geometry import clamp_int, span_within, spans_overlap, vertically_close
from ..rng import RandomSource
from .platforms import Platform, PlatformKind, PlatformSet

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 1000
EDGE_MARGIN = 5  # cells kept clear next to each wall
START_HEIGHT = 5
RESHUFFLE_PERCENT = 20


def is_platform_valid(platforms: PlatformSet, x: int, y: int, length: int, spacing: int) -> bool:
    """
    A candidate conflicts with a non-boundary platform when their x-spans
    overlap and they sit fewer than `spacing` rows apart. Boundaries never
    conflict.
    """
    for p in platforms:
        if p.is_boundary:
            continue
        if spans_overlap(x, length, p.x, p.length) and vertically_close(y, p.y, spacing):
            return False
    return True


def place_boundaries(platforms: PlatformSet, cfg: GenerationConfig) -> None:
    if not cfg.create_boundary_walls:
        return
    platforms.add(Platform(0, 0, cfg.level_width, PlatformKind.BOUNDARY))
    for wall_x in (0, cfg.level_width - 1):
        for y in range(cfg.boundary_wall_height + 1):
            platforms.add(Platform(wall_x, y, 1, PlatformKind.BOUNDARY))


def place_central(platforms: PlatformSet, cfg: GenerationConfig) -> None:
    if not cfg.create_central_platform:
        return
    x = cfg.level_width // 2 - cfg.central_platform_size // 2
    y = cfg.level_height // 3
    if not span_within(x, cfg.central_platform_size, 0, cfg.level_width):
        logger.debug("central platform (%d cells) wider than the level, skipped", cfg.central_platform_size)
        return
    platforms.add(Platform(x, y, cfg.central_platform_size, PlatformKind.CENTRAL))


def place_random_platforms(platforms: PlatformSet, rng: RandomSource, cfg: GenerationConfig) -> int:
    """
    Scatter NORMAL platforms until the density target is met or the attempt
    budget runs out. Returns the number of tiles placed; it may fall short of
    the target, which is not an error.

    Heights follow a drifting cursor rather than independent draws, so
    neighbouring placements tend to sit at similar heights; a 20% reshuffle
    after each success breaks up long runs.
    """
    target = density_target(cfg)
    low_h = cfg.player_jump_height + 2
    high_h = cfg.level_height - 5

    placed = 0
    attempts = 0
    height = START_HEIGHT

    while placed < target and attempts < MAX_PLACEMENT_ATTEMPTS:
        attempts += 1

        length = rng.next_int(cfg.min_platform_length, cfg.max_platform_length + 1)
        x_hi = cfg.level_width - length - EDGE_MARGIN
        if x_hi < EDGE_MARGIN:
            continue  # too long to fit between the margins; x_hi == EDGE_MARGIN is an exact fit
        x = rng.next_int(EDGE_MARGIN, x_hi)

        delta = rng.next_int(-cfg.max_height_variation, cfg.max_height_variation + 1)
        height = clamp_int(height + delta, low_h, high_h)

        if not is_platform_valid(platforms, x, height, length, cfg.min_platform_spacing):
            continue

        platforms.add(Platform(x, height, length, PlatformKind.NORMAL))
        placed += length

        if rng.chance(RESHUFFLE_PERCENT):
            height = rng.next_int(low_h, max(low_h, cfg.level_height // 2))

    logger.debug("placement: %d/%d tiles in %d attempts", placed, target, attempts)
    return placed


def density_target(cfg: GenerationConfig) -> int:
    return cfg.level_width * cfg.level_height * cfg.platform_density // 100
