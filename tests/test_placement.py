from arenagen.config import GenerationConfig
from arenagen.mapgen.placement import (
    EDGE_MARGIN, MAX_PLACEMENT_ATTEMPTS, density_target, is_platform_valid,
    place_boundaries, place_central, place_random_platforms,
)
from arenagen.mapgen.platforms import Platform, PlatformKind, PlatformSet
from arenagen.rng import RandomSource

def make_set(*platforms):
    ps = PlatformSet()
    for p in platforms:
        ps.add(p)
    return ps

def test_validity_rejects_overlap_within_spacing():
    ps = make_set(Platform(10, 20, 5))
    assert not is_platform_valid(ps, 12, 21, 4, spacing=2)
    assert not is_platform_valid(ps, 12, 20, 4, spacing=2)

def test_validity_allows_stacked_platforms():
    ps = make_set(Platform(10, 20, 5))
    assert is_platform_valid(ps, 12, 22, 4, spacing=2)
    assert is_platform_valid(ps, 12, 18, 4, spacing=2)

def test_validity_ignores_height_without_horizontal_overlap():
    ps = make_set(Platform(10, 20, 5))
    assert is_platform_valid(ps, 15, 20, 4, spacing=2)  # starts where the other ends
    assert is_platform_valid(ps, 2, 20, 8, spacing=2)

def test_validity_ignores_boundaries():
    ps = make_set(Platform(0, 0, 50, PlatformKind.BOUNDARY))
    assert is_platform_valid(ps, 10, 0, 5, spacing=2)

def test_boundaries_floor_and_walls():
    cfg = GenerationConfig(level_width=30, boundary_wall_height=4)
    ps = PlatformSet()
    place_boundaries(ps, cfg)
    assert ps[0] == Platform(0, 0, 30, PlatformKind.BOUNDARY)
    walls = ps.items[1:]
    assert len(walls) == 2 * 5
    assert [(p.x, p.y) for p in walls[:5]] == [(0, y) for y in range(5)]
    assert [(p.x, p.y) for p in walls[5:]] == [(29, y) for y in range(5)]
    assert all(p.length == 1 and p.is_boundary for p in walls)

def test_boundaries_skipped_when_disabled():
    ps = PlatformSet()
    place_boundaries(ps, GenerationConfig(create_boundary_walls=False))
    assert len(ps) == 0

def test_central_platform_position():
    cfg = GenerationConfig(level_width=100, level_height=60, central_platform_size=12)
    ps = PlatformSet()
    place_central(ps, cfg)
    assert ps.items == [Platform(44, 20, 12, PlatformKind.CENTRAL)]

def test_central_platform_optional_and_must_fit():
    ps = PlatformSet()
    place_central(ps, GenerationConfig(create_central_platform=False))
    place_central(ps, GenerationConfig(level_width=10, central_platform_size=30))
    assert len(ps) == 0

def test_random_placement_respects_bounds_and_heights():
    cfg = GenerationConfig(level_width=80, level_height=40, platform_density=30)
    ps = PlatformSet()
    placed = place_random_platforms(ps, RandomSource.from_seed(11), cfg)
    normals = ps.of_kind(PlatformKind.NORMAL)
    assert normals
    assert placed == sum(p.length for p in normals)
    assert len(normals) <= MAX_PLACEMENT_ATTEMPTS
    for p in normals:
        assert cfg.min_platform_length <= p.length <= cfg.max_platform_length
        assert p.x >= EDGE_MARGIN
        assert p.end_x <= cfg.level_width - EDGE_MARGIN
        assert cfg.player_jump_height + 2 <= p.y <= cfg.level_height - 5

def test_random_placement_never_conflicts():
    cfg = GenerationConfig(level_width=60, level_height=40, platform_density=60)
    ps = PlatformSet()
    place_random_platforms(ps, RandomSource.from_seed(5), cfg)
    items = ps.items
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if a.x < b.end_x and b.x < a.end_x:
                assert abs(a.y - b.y) >= cfg.min_platform_spacing

def test_infeasible_density_terminates_short():
    cfg = GenerationConfig(level_width=30, level_height=20, platform_density=100)
    ps = PlatformSet()
    placed = place_random_platforms(ps, RandomSource.from_seed(1), cfg)
    assert placed < density_target(cfg)

def test_zero_density_places_nothing_and_draws_nothing():
    cfg = GenerationConfig(platform_density=0)
    rng = RandomSource.from_seed(3)
    before = rng.state
    ps = PlatformSet()
    assert place_random_platforms(ps, rng, cfg) == 0
    assert len(ps) == 0 and rng.state == before

def test_platforms_too_long_for_margins_are_skipped():
    cfg = GenerationConfig(level_width=20, min_platform_length=11, max_platform_length=12,
                           platform_density=50)
    ps = PlatformSet()
    assert place_random_platforms(ps, RandomSource.from_seed(2), cfg) == 0
    assert len(ps) == 0

def test_platform_exactly_filling_the_margins_sits_at_x5():
    cfg = GenerationConfig(level_width=20, min_platform_length=10, max_platform_length=10,
                           platform_density=10)
    ps = PlatformSet()
    placed = place_random_platforms(ps, RandomSource.from_seed(2), cfg)
    assert placed >= 10 and placed == 10 * len(ps)
    assert all(p.x == EDGE_MARGIN and p.length == 10 for p in ps)
