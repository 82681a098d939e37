#!/usr/bin/env python3
import argparse, json, logging, sys
from pathlib import Path

from arenagen import log
from arenagen.config import ConfigError, GenerationConfig, load_config_dict
from arenagen.mapgen.generator import generate
from arenagen.presets import JsonFileStore, PresetStore
from arenagen.spawn.points import SpawnCriteria, filter_spawn_points

logger = logging.getLogger("arenatool")

DEFAULT_STORE = Path.home() / ".arenagen" / "presets.json"


def build_config(args) -> GenerationConfig:
    # defaults <- preset <- config file <- CLI overrides
    cfg = GenerationConfig()
    if args.preset:
        cfg = PresetStore(JsonFileStore(args.store)).get(args.preset)
        if cfg is None:
            raise SystemExit(f"unknown preset: {args.preset}")
    if args.config:
        cfg = GenerationConfig.from_dict({**cfg.to_dict(), **load_config_dict(Path(args.config))})
    overrides = {}
    for kv in args.set or []:
        key, _, value = kv.partition("=")
        overrides[key] = value
    if overrides:
        merged = {**cfg.to_dict(), **overrides}
        cfg = GenerationConfig.from_dict(merged)
        # a seed given via --set pins it, as --seed does
        if "seed" in overrides and "use_random_seed" not in overrides:
            cfg = cfg.with_seed(cfg.seed)
    if args.seed is not None:
        cfg = cfg.with_seed(args.seed)
    return cfg


def cmd_emit(args):
    cfg = build_config(args)
    layout = generate(cfg)
    if layout.below_density_target:
        logger.warning("layout sparser than configured: %d of %d tiles",
                       layout.placed_tiles, layout.target_tiles)
    out = layout.to_dict()
    if args.spawns:
        pts = filter_spawn_points(layout, SpawnCriteria(count=args.spawns))
        out["spawn_points"] = [[p.x, p.y] for p in pts]
    text = json.dumps(out, indent=2)
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
        print(f"Wrote {args.out} (seed {layout.seed})")
    else:
        print(text)


def cmd_presets(args):
    store = PresetStore(JsonFileStore(args.store))
    for name in store.names():
        cfg = store.get(name)
        print(f"{name}: {cfg.level_width}x{cfg.level_height} density={cfg.platform_density}%")


def cmd_save_preset(args):
    cfg = build_config(args)
    PresetStore(JsonFileStore(args.store)).save(args.name, cfg)
    print(f"Saved preset {args.name!r} to {args.store}")


def add_config_args(p):
    p.add_argument('--preset', type=str, help='Start from a named preset')
    p.add_argument('--config', type=str, help='JSON file with config overrides')
    p.add_argument('--set', action='append', metavar='KEY=VALUE', help='Override one option')
    p.add_argument('--seed', type=int, help='Fixed seed (disables random seeding)')


def main(argv=None):
    p = argparse.ArgumentParser(description="Procedural arena layouts")
    p.add_argument('-v', '--verbose', action='count', default=0)
    p.add_argument('--store', type=Path, default=DEFAULT_STORE, help='Preset store file')
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit')
    add_config_args(p1)
    p1.add_argument('--out', type=str)
    p1.add_argument('--spawns', type=int, default=0, help='Also pick N player spawn points')
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('presets')
    p2.set_defaults(func=cmd_presets)

    p3 = sub.add_parser('save-preset')
    p3.add_argument('name', type=str)
    add_config_args(p3)
    p3.set_defaults(func=cmd_save_preset)

    args = p.parse_args(argv)
    log.configure(args.verbose)
    try:
        args.func(args)
    except ConfigError as e:
        raise SystemExit(f"config error: {e}")


if __name__ == '__main__':
    main(sys.argv[1:])
