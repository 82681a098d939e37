# Canonical tile IDs written to a tile sink when a layout is painted.

EMPTY = 0
NORMAL = 1
CENTRAL = 2
BRIDGE = 3
BOUNDARY = 4
WEAPON = 9

_KIND_TILES = {
    "normal": NORMAL,
    "central": CENTRAL,
    "bridge": BRIDGE,
    "boundary": BOUNDARY,
}


def tile_for_kind(kind) -> int:
    # Accepts a PlatformKind or its string value.
    return _KIND_TILES[getattr(kind, "value", kind)]
