# src/arenagen/config.py
# Generation parameters. Validated once at construction; the generator never
# re-checks or mutates them.

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace as _replace
from pathlib import Path
from typing import Any, Dict

from .rng import entropy_seed


class ConfigError(ValueError):
    """Raised when a GenerationConfig violates its invariants or cannot be loaded."""


_POSITIVE = (
    "level_width",
    "level_height",
    "player_jump_height",
    "player_jump_distance",
    "min_platform_length",
    "max_platform_length",
    "central_platform_size",
)
_NON_NEGATIVE = (
    "min_platform_spacing",
    "min_height_variation",
    "max_height_variation",
    "weapon_spawn_count",
    "min_weapon_distance",
    "air_spawn_max_height",
    "boundary_wall_height",
    "seed",
)


@dataclass(frozen=True)
class GenerationConfig:
    # Level dimensions
    level_width: int = 100
    level_height: int = 60

    # Player movement
    player_jump_height: int = 5
    player_jump_distance: int = 8
    min_platform_spacing: int = 2

    # Platform generation
    min_platform_length: int = 3
    max_platform_length: int = 15
    platform_density: int = 35  # percent of grid cells
    ensure_connectivity: bool = True
    min_height_variation: int = 3
    max_height_variation: int = 8

    # Weapon spawns
    weapon_spawn_count: int = 20
    min_weapon_distance: int = 10
    spawn_on_platforms: bool = True
    spawn_in_air: bool = True
    air_spawn_max_height: int = 3

    # Arena design
    create_boundary_walls: bool = True
    boundary_wall_height: int = 10
    create_central_platform: bool = True
    central_platform_size: int = 12

    seed: int = 0
    use_random_seed: bool = True

    def __post_init__(self) -> None:
        for name in _POSITIVE:
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in _NON_NEGATIVE:
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        if not 0 <= self.platform_density <= 100:
            raise ConfigError(f"platform_density must be 0..100, got {self.platform_density}")
        if self.min_platform_length > self.max_platform_length:
            raise ConfigError(
                f"min_platform_length ({self.min_platform_length}) > "
                f"max_platform_length ({self.max_platform_length})"
            )
        if self.min_height_variation > self.max_height_variation:
            raise ConfigError(
                f"min_height_variation ({self.min_height_variation}) > "
                f"max_height_variation ({self.max_height_variation})"
            )

    def resolve_seed(self) -> int:
        """The seed a run should use: explicit, or drawn from entropy once."""
        return entropy_seed() if self.use_random_seed else self.seed

    def with_seed(self, seed: int) -> "GenerationConfig":
        return _replace(self, seed=seed, use_random_seed=False)

    def replace(self, **changes: Any) -> "GenerationConfig":
        return _replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "GenerationConfig":
        known = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(raw) - set(known))
        if unknown:
            raise ConfigError(f"unknown config option(s): {', '.join(unknown)}")
        values: Dict[str, Any] = {}
        for name, value in raw.items():
            try:
                values[name] = _coerce(known[name], value)
            except (TypeError, ValueError):
                raise ConfigError(f"{name}: cannot use {value!r}") from None
        return cls(**values)


def _coerce(kind: str, value: Any) -> Any:
    # Field types are strings under postponed annotations.
    if kind == "bool":
        if isinstance(value, str):
            low = value.strip().lower()
            if low in ("1", "true", "yes", "on"):
                return True
            if low in ("0", "false", "no", "off"):
                return False
            raise ValueError(value)
        return bool(value)
    if isinstance(value, bool):
        raise TypeError(value)
    return int(value)


def load_config_dict(path: Path) -> Dict[str, Any]:
    """Read the raw option mapping from a JSON object file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON at line {e.lineno}, col {e.colno}: {e.msg}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return raw


def load_config(path: Path) -> GenerationConfig:
    """Load a GenerationConfig; options absent from the file keep their defaults."""
    return GenerationConfig.from_dict(load_config_dict(path))
