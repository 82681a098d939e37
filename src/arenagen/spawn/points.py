# src/arenagen/spawn/points.py
# Player spawn selection over a finished layout. Runs independently of
# generation, with its own random source.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import pygame

from ..grid import GridMapping
from ..mapgen.platforms import Platform
from ..rng import RandomSource

logger = logging.getLogger(__name__)

ATTEMPTS_PER_POINT = 50
SURFACE_LIFT = 0.5  # fraction of a cell above the standing cell


@dataclass(frozen=True)
class SpawnCriteria:
    count: int = 10
    min_spacing: float = 15.0  # world units
    avoid_boundaries: bool = True
    boundary_buffer: int = 10  # cells from every level edge
    prefer_large_platforms: bool = True
    minimum_platform_size: int = 5

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must not be negative, got {self.count}")
        if self.min_spacing < 0:
            raise ValueError(f"min_spacing must not be negative, got {self.min_spacing}")


def is_suitable(p: Platform, criteria: SpawnCriteria, width: int, height: int) -> bool:
    if p.is_boundary:
        return False
    if criteria.prefer_large_platforms and p.length < criteria.minimum_platform_size:
        return False
    if criteria.avoid_boundaries:
        buf = criteria.boundary_buffer
        left = p.x
        right = width - p.end_x
        bottom = p.y
        top = height - (p.y + 1)
        if min(left, right, bottom, top) < buf:
            return False
    return True


def suitable_platforms(layout, criteria: SpawnCriteria) -> List[Platform]:
    return [p for p in layout.platforms() if is_suitable(p, criteria, layout.width, layout.height)]


def _standing_offset(p: Platform, rng: RandomSource) -> int:
    # Interior cells only; platforms without an interior use their centre.
    if p.length < 3:
        return p.length // 2
    return rng.next_int(1, p.length - 1)


def filter_spawn_points(
    layout,
    criteria: Optional[SpawnCriteria] = None,
    rng: Union[RandomSource, int, None] = None,
    mapping: Optional[GridMapping] = None,
) -> List[pygame.Vector2]:
    """
    Up to criteria.count world positions standing on suitable platforms, each
    at least criteria.min_spacing from the others. Gives up after count * 50
    attempts and returns what it has; no suitable platform gives [].

    `rng` may be a RandomSource, a seed, or None (the layout seed).
    """
    criteria = criteria or SpawnCriteria()
    mapping = mapping or GridMapping()
    if not isinstance(rng, RandomSource):
        rng = RandomSource.from_seed(layout.seed if rng is None else rng)

    candidates = suitable_platforms(layout, criteria)
    if not candidates:
        logger.warning("no suitable platforms for spawn points")
        return []

    points: List[pygame.Vector2] = []
    max_attempts = criteria.count * ATTEMPTS_PER_POINT
    attempts = 0
    while len(points) < criteria.count and attempts < max_attempts:
        attempts += 1
        p = rng.choice(candidates)
        cell_x = p.x + _standing_offset(p, rng)
        pos = mapping.cell_corner(cell_x, p.y + 1)
        pos.y += SURFACE_LIFT * mapping.cell_size
        if all(pos.distance_to(q) >= criteria.min_spacing for q in points):
            points.append(pos)

    logger.info("generated %d/%d spawn points", len(points), criteria.count)
    return points


def random_spawn_point(points: Sequence[pygame.Vector2], rng: RandomSource) -> Optional[pygame.Vector2]:
    if not points:
        logger.warning("no spawn points available")
        return None
    return pygame.Vector2(rng.choice(points))


def furthest_spawn_point(points: Sequence[pygame.Vector2], origin) -> Optional[pygame.Vector2]:
    """The spawn point furthest from origin; the first one wins ties."""
    if not points:
        logger.warning("no spawn points available")
        return None
    best = points[0]
    best_d = -math.inf
    for q in points:
        d = pygame.Vector2(origin).distance_to(q)
        if d > best_d:
            best, best_d = q, d
    return pygame.Vector2(best)
