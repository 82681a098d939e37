# src/arenagen/mapgen/generator.py
# Canonical arena generator. Both the design-time tool and the runtime
# bootstrap call into here; neither carries its own copy of the pipeline.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..config import GenerationConfig
from ..grid import GridMapping, TileSink
from ..render.paint import paint_layout
from ..rng import RandomSource
from .connectivity import ensure_connectivity
from .placement import density_target, place_boundaries, place_central, place_random_platforms
from .platforms import Platform, PlatformKind, PlatformSet, WeaponSpawn
from .weapons import sample_weapon_spawns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelLayout:
    seed: int
    config: GenerationConfig
    platform_list: Tuple[Platform, ...]
    weapon_list: Tuple[WeaponSpawn, ...]
    target_tiles: int = 0
    placed_tiles: int = 0

    def platforms(self) -> Tuple[Platform, ...]:
        return self.platform_list

    def weapon_spawns(self) -> Tuple[WeaponSpawn, ...]:
        return self.weapon_list

    def weapon_spawns_world(self, mapping: Optional[GridMapping] = None) -> List[Any]:
        """Weapon cells converted through the renderer's grid-to-world mapping."""
        mapping = mapping or GridMapping()
        return [mapping.cell_to_world(w.x, w.y) for w in self.weapon_list]

    def count(self, kind: PlatformKind) -> int:
        return sum(1 for p in self.platform_list if p.kind is kind)

    @property
    def width(self) -> int:
        return self.config.level_width

    @property
    def height(self) -> int:
        return self.config.level_height

    @property
    def below_density_target(self) -> bool:
        return self.placed_tiles < self.target_tiles

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "width": self.width,
            "height": self.height,
            "config": self.config.to_dict(),
            "platforms": [p.to_dict() for p in self.platform_list],
            "weapon_spawns": [[w.x, w.y] for w in self.weapon_list],
            "tiles": {"target": self.target_tiles, "placed": self.placed_tiles},
        }


class LayoutGenerator:
    """
    Runs the fixed pipeline:
      boundaries -> central platform -> density placement
      -> connectivity repair -> weapon spawns
    Every stage is attempt-capped; a config that cannot be satisfied yields a
    sparser layout rather than an exception.
    """

    def __init__(self, config: GenerationConfig, sink: Optional[TileSink] = None):
        self.config = config
        self.sink = sink

    def generate(self, seed: Optional[int] = None) -> LevelLayout:
        cfg = self.config
        if seed is None:
            seed = cfg.resolve_seed()
        rng = RandomSource.from_seed(seed)
        logger.info("generating %dx%d arena with seed %d", cfg.level_width, cfg.level_height, seed)

        platforms = PlatformSet()
        place_boundaries(platforms, cfg)
        place_central(platforms, cfg)
        placed = place_random_platforms(platforms, rng, cfg)
        if cfg.ensure_connectivity:
            ensure_connectivity(platforms, rng, cfg)

        frozen = platforms.freeze()
        weapons = sample_weapon_spawns(frozen, rng, cfg)

        layout = LevelLayout(
            seed=seed,
            config=cfg,
            platform_list=frozen,
            weapon_list=tuple(weapons),
            target_tiles=density_target(cfg),
            placed_tiles=placed,
        )
        logger.info("arena complete: %d platforms, %d weapon spawns", len(frozen), len(weapons))

        if self.sink is not None:
            paint_layout(layout, self.sink)
        return layout


def generate(
    config: GenerationConfig,
    seed: Optional[int] = None,
    sink: Optional[TileSink] = None,
) -> LevelLayout:
    """Generate a fresh layout; identical (config, seed) gives an identical layout."""
    return LayoutGenerator(config, sink=sink).generate(seed)
