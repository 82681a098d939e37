# src/arenagen/mapgen/connectivity.py
# Single-pass bridge insertion between x-adjacent platforms.
#
# Only the pairs of the sorted snapshot taken on entry are examined. Bridges
# are not re-checked against their neighbours afterwards, so a chain of
# wide gaps can still leave a platform out of jump range.

import logging
from typing import List

from ..config import GenerationConfig
from ..geometry import span_within
from ..rng import RandomSource
from .placement import is_platform_valid
from .platforms import Platform, PlatformKind, PlatformSet

logger = logging.getLogger(__name__)

BRIDGE_LENGTH_SPREAD = 3


def bridge_candidate(current: Platform, nxt: Platform, length: int) -> Platform:
    gap = nxt.x - current.end_x
    x = current.end_x + int(gap / 2)  # truncates toward zero for overlapping pairs
    y = (current.y + nxt.y) // 2
    return Platform(x, y, length, PlatformKind.BRIDGE)


def needs_bridge(current: Platform, nxt: Platform, cfg: GenerationConfig) -> bool:
    h_gap = nxt.x - current.end_x
    v_gap = abs(nxt.y - current.y)
    return h_gap > cfg.player_jump_distance or v_gap > cfg.player_jump_height


def ensure_connectivity(platforms: PlatformSet, rng: RandomSource, cfg: GenerationConfig) -> List[Platform]:
    """
    Sort by x and try one BRIDGE per out-of-reach adjacent pair. A bridge is
    only added when it passes the same validity check as regular placement.
    Returns the bridges inserted; the set is left sorted by x.
    """
    platforms.sort_by_x()
    snapshot = platforms.freeze()
    bridges: List[Platform] = []

    for current, nxt in zip(snapshot, snapshot[1:]):
        if current.is_boundary or nxt.is_boundary:
            continue
        if not needs_bridge(current, nxt, cfg):
            continue
        length = rng.next_int(cfg.min_platform_length, cfg.min_platform_length + BRIDGE_LENGTH_SPREAD)
        bridge = bridge_candidate(current, nxt, length)
        if not span_within(bridge.x, bridge.length, 0, cfg.level_width):
            logger.debug("bridge at x=%d leaves the level", bridge.x)
        elif is_platform_valid(platforms, bridge.x, bridge.y, bridge.length, cfg.min_platform_spacing):
            bridges.append(platforms.add(bridge))
        else:
            logger.debug("bridge rejected between x=%d and x=%d", current.x, nxt.x)

    platforms.sort_by_x()
    logger.debug("connectivity: %d bridge(s) over %d pairs", len(bridges), max(0, len(snapshot) - 1))
    return bridges
