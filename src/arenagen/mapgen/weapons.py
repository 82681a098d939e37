# src/arenagen/mapgen/weapons.py
# Rejection sampling of weapon-spawn cells over a finished platform list.

import logging
from typing import List, Sequence

from ..config import GenerationConfig
from ..geometry import far_enough
from ..rng import RandomSource
from .platforms import Platform, WeaponSpawn

logger = logging.getLogger(__name__)

ATTEMPTS_PER_WEAPON = 50
MIN_SPAWN_LENGTH = 3  # ends are excluded, so shorter platforms have no interior
MIN_AIR_OFFSET = 2


def _eligible(p: Platform) -> bool:
    return not p.is_boundary and p.length >= MIN_SPAWN_LENGTH


def sample_weapon_spawns(
    platforms: Sequence[Platform],
    rng: RandomSource,
    cfg: GenerationConfig,
) -> List[WeaponSpawn]:
    """
    Place up to cfg.weapon_spawn_count weapon cells, either resting on a
    platform (y + 1) or floating 2..air_spawn_max_height cells above it.
    Candidates closer than cfg.min_weapon_distance to an accepted cell are
    dropped. The attempt budget is count * 50; running out yields fewer
    spawns, never an error.
    """
    accepted: List[WeaponSpawn] = []
    if not platforms or cfg.weapon_spawn_count <= 0:
        return accepted

    air_top = max(MIN_AIR_OFFSET, cfg.air_spawn_max_height)
    max_attempts = cfg.weapon_spawn_count * ATTEMPTS_PER_WEAPON
    attempts = 0

    while len(accepted) < cfg.weapon_spawn_count and attempts < max_attempts:
        attempts += 1

        # Coin is only flipped when platform spawns are allowed at all.
        if cfg.spawn_on_platforms and (rng.next_int(0, 2) == 0 or not cfg.spawn_in_air):
            air = False
        elif cfg.spawn_in_air:
            air = True
        else:
            continue

        p = rng.choice(platforms)
        if not _eligible(p):
            continue

        x = p.x + rng.next_int(1, p.length - 1)
        if air:
            y = p.y + rng.next_int(MIN_AIR_OFFSET, air_top + 1)
        else:
            y = p.y + 1

        cell = (x, y)
        if far_enough(cell, [w.as_tuple() for w in accepted], cfg.min_weapon_distance):
            accepted.append(WeaponSpawn(x, y))

    logger.debug(
        "weapons: %d/%d placed in %d attempts", len(accepted), cfg.weapon_spawn_count, attempts
    )
    return accepted
