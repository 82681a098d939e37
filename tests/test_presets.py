import json

from arenagen.config import GenerationConfig
from arenagen.presets import (
    PRESETS_KEY, JsonFileStore, MemoryStore, PresetStore, builtin_presets,
)

def test_empty_store_gets_builtins_and_persists_them():
    kv = MemoryStore()
    store = PresetStore(kv)
    assert store.names() == ["Battle Royale", "Dense Combat", "Parkour Challenge"]
    assert store.get("Dense Combat").platform_density == 50
    assert len(json.loads(kv.get(PRESETS_KEY))) == 3

def test_builtins_match_their_descriptions():
    presets = builtin_presets()
    br = presets["Battle Royale"]
    assert (br.level_width, br.level_height, br.weapon_spawn_count) == (120, 70, 25)
    parkour = presets["Parkour Challenge"]
    assert (parkour.min_platform_length, parkour.max_platform_length) == (2, 6)
    assert parkour.air_spawn_max_height == 5

def test_save_and_reload_from_file(tmp_path):
    path = tmp_path / "prefs" / "presets.json"
    cfg = GenerationConfig(level_width=42, platform_density=12).with_seed(9)
    PresetStore(JsonFileStore(path)).save("Tiny", cfg)
    reloaded = PresetStore(JsonFileStore(path))
    assert "Tiny" in reloaded.names()
    assert reloaded.get("Tiny") == cfg

def test_unreadable_presets_fall_back_to_builtins():
    kv = MemoryStore({PRESETS_KEY: "{not json"})
    assert PresetStore(kv).names() == list(builtin_presets())
    kv = MemoryStore({PRESETS_KEY: json.dumps([{"name": "x", "bogus": 1}])})
    assert PresetStore(kv).names() == list(builtin_presets())

def test_delete():
    store = PresetStore(MemoryStore())
    assert store.delete("Dense Combat")
    assert not store.delete("Dense Combat")
    assert store.get("Dense Combat") is None

def test_json_file_store_missing_and_corrupt(tmp_path):
    path = tmp_path / "kv.json"
    kv = JsonFileStore(path)
    assert kv.get("a", "dflt") == "dflt"
    kv.set("a", "1")
    assert kv.get("a") == "1"
    path.write_text("garbage", encoding="utf-8")
    assert kv.get("a", "") == ""
