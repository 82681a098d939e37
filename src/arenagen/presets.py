# src/arenagen/presets.py
# Named GenerationConfig presets kept in an injected key-value store.

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from .config import GenerationConfig

logger = logging.getLogger(__name__)

PRESETS_KEY = "LevelGeneratorPresets"


class KeyValueStore(Protocol):
    def get(self, key: str, default: str = "") -> str: ...

    def set(self, key: str, value: str) -> None: ...


@dataclass
class MemoryStore:
    data: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str, default: str = "") -> str:
        return self.data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """String values in one JSON object file. A missing file reads as empty."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            logger.warning("%s: unreadable store (%s), starting empty", self.path, e.msg)
            return {}
        return raw if isinstance(raw, dict) else {}

    def get(self, key: str, default: str = "") -> str:
        value = self._read().get(key, default)
        return value if isinstance(value, str) else default

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


def builtin_presets() -> Dict[str, GenerationConfig]:
    base = GenerationConfig()
    return {
        "Battle Royale": base.replace(
            level_width=120,
            level_height=70,
            platform_density=35,
            weapon_spawn_count=25,
            create_central_platform=True,
            ensure_connectivity=True,
        ),
        "Dense Combat": base.replace(
            level_width=80,
            level_height=50,
            platform_density=50,
            max_platform_length=10,
            weapon_spawn_count=15,
            create_central_platform=False,
        ),
        "Parkour Challenge": base.replace(
            level_width=100,
            level_height=60,
            platform_density=25,
            min_platform_length=2,
            max_platform_length=6,
            max_height_variation=12,
            weapon_spawn_count=10,
            spawn_in_air=True,
            air_spawn_max_height=5,
        ),
    }


class PresetStore:
    """
    Ordered name -> config mapping persisted as one JSON list under
    PRESETS_KEY. An empty or unreadable entry is replaced by the built-ins.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._presets: Dict[str, GenerationConfig] = self._load()

    def _load(self) -> Dict[str, GenerationConfig]:
        presets: Dict[str, GenerationConfig] = {}
        raw = self.store.get(PRESETS_KEY, "")
        if raw:
            try:
                for entry in json.loads(raw):
                    entry = dict(entry)
                    name = str(entry.pop("name"))
                    presets[name] = GenerationConfig.from_dict(entry)
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("stored presets unreadable (%s), using built-ins", e)
                presets = {}
        if not presets:
            presets = builtin_presets()
            self._presets = presets
            self._save()
        return presets

    def _save(self) -> None:
        payload: List[Dict[str, Any]] = [
            {"name": name, **cfg.to_dict()} for name, cfg in self._presets.items()
        ]
        self.store.set(PRESETS_KEY, json.dumps(payload, indent=2))

    def names(self) -> List[str]:
        return list(self._presets)

    def get(self, name: str) -> Optional[GenerationConfig]:
        return self._presets.get(name)

    def save(self, name: str, config: GenerationConfig) -> None:
        self._presets[name] = config
        self._save()
        logger.info("saved preset: %s", name)

    def delete(self, name: str) -> bool:
        if self._presets.pop(name, None) is None:
            return False
        self._save()
        return True
