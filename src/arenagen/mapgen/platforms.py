# src/arenagen/mapgen/platforms.py
# Platform records and the mutable set one generation run builds up.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple

XY = Tuple[int, int]


class PlatformKind(str, Enum):
    NORMAL = "normal"
    CENTRAL = "central"
    BRIDGE = "bridge"
    BOUNDARY = "boundary"


@dataclass(frozen=True)
class Platform:
    x: int
    y: int
    length: int
    kind: PlatformKind = PlatformKind.NORMAL

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"platform length must be positive, got {self.length}")

    @property
    def end_x(self) -> int:
        # exclusive
        return self.x + self.length

    @property
    def is_boundary(self) -> bool:
        return self.kind is PlatformKind.BOUNDARY

    def cells(self) -> Iterator[XY]:
        for dx in range(self.length):
            yield (self.x + dx, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "length": self.length, "kind": self.kind.value}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Platform":
        return cls(int(raw["x"]), int(raw["y"]), int(raw["length"]), PlatformKind(raw["kind"]))


@dataclass(frozen=True)
class WeaponSpawn:
    x: int
    y: int

    def as_tuple(self) -> XY:
        return (self.x, self.y)


@dataclass
class PlatformSet:
    items: List[Platform] = field(default_factory=list)

    def add(self, platform: Platform) -> Platform:
        self.items.append(platform)
        return platform

    def __iter__(self) -> Iterator[Platform]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, i: int) -> Platform:
        return self.items[i]

    def sort_by_x(self) -> None:
        # list.sort is stable: equal x keeps insertion order.
        self.items.sort(key=lambda p: p.x)

    def of_kind(self, kind: PlatformKind) -> List[Platform]:
        return [p for p in self.items if p.kind is kind]

    def freeze(self) -> Tuple[Platform, ...]:
        return tuple(self.items)
