# src/arenagen/geometry.py
# Stateless cell math shared by placement, sampling and spawn filtering.
# Spans are half-open: [x, x + length).

import math
from typing import Tuple

XY = Tuple[int, int]


def clamp_int(v: int, lo: int, hi: int) -> int:
    """Clamp into [lo, hi]; lo wins when the bounds cross."""
    return lo if v < lo else hi if v > hi else v


def spans_overlap(x1: int, len1: int, x2: int, len2: int) -> bool:
    return x1 < x2 + len2 and x2 < x1 + len1


def vertically_close(y1: int, y2: int, spacing: int) -> bool:
    return abs(y1 - y2) < spacing


def span_within(x: int, length: int, lo: int, hi: int) -> bool:
    """True if [x, x+length) lies inside [lo, hi)."""
    return lo <= x and x + length <= hi


def distance(a: XY, b: XY) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def far_enough(p, accepted, min_distance: float) -> bool:
    """p keeps at least min_distance from every point in accepted."""
    return all(distance(p, q) >= min_distance for q in accepted)
