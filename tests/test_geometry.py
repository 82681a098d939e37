from arenagen.geometry import (
    clamp_int, distance, far_enough, span_within, spans_overlap, vertically_close
)

def test_clamp_int():
    assert clamp_int(5, 0, 10) == 5
    assert clamp_int(-1, 0, 10) == 0
    assert clamp_int(11, 0, 10) == 10
    # crossed bounds: lower bound wins
    assert clamp_int(3, 7, 5) == 7

def test_spans_overlap_half_open():
    assert spans_overlap(0, 5, 4, 3)
    assert spans_overlap(4, 3, 0, 5)
    assert spans_overlap(2, 1, 0, 10)      # contained
    assert not spans_overlap(0, 5, 5, 3)   # touching ends
    assert not spans_overlap(5, 3, 0, 5)
    assert not spans_overlap(0, 2, 10, 2)

def test_vertically_close():
    assert vertically_close(10, 11, 2)
    assert not vertically_close(10, 12, 2)
    assert not vertically_close(10, 10, 0)

def test_span_within():
    assert span_within(0, 20, 0, 20)
    assert not span_within(-1, 3, 0, 20)
    assert not span_within(18, 3, 0, 20)

def test_distance_and_far_enough():
    assert distance((0, 0), (3, 4)) == 5.0
    accepted = [(0, 0), (10, 0)]
    assert far_enough((5, 0), accepted, 5)
    assert not far_enough((4, 0), accepted, 5)
    assert far_enough((1, 1), [], 100)
