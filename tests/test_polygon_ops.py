import math

import pytest

from shapekit.polygon_ops import (
    add_unique,
    compute_polygon_normal,
    intersect,
    is_close_to_first_point,
    point_in_polygon,
    screen_to_world,
    segments_intersect,
    split_edges,
    subtract_polygons,
    union_polygons,
)

SQUARE = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
SHIFTED = [(1.0, 1.0), (3.0, 1.0), (3.0, 3.0), (1.0, 3.0)]
FAR = [(10.0, 10.0), (12.0, 10.0), (12.0, 12.0), (10.0, 12.0)]
BIG = [(-5.0, -5.0), (5.0, -5.0), (5.0, 5.0), (-5.0, 5.0)]


def _angles_sorted(points):
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    angles = [math.atan2(p[1] - cy, p[0] - cx) for p in points]
    return angles == sorted(angles)


def test_point_in_polygon_inside_and_outside():
    assert point_in_polygon((1.0, 1.0), SQUARE) is True
    assert point_in_polygon((3.0, 1.0), SQUARE) is False
    assert point_in_polygon((1.0, -0.5), SQUARE) is False


def test_crossing_diagonals_meet_at_midpoint():
    hit = segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))
    assert hit == pytest.approx((1.0, 1.0))


def test_parallel_segments_do_not_intersect():
    assert segments_intersect((0, 0), (1, 0), (0, 1), (1, 1)) is None


def test_segments_that_miss_do_not_intersect():
    assert segments_intersect((0, 0), (1, 1), (3, 0), (2, 1)) is None


def test_degenerate_segment_never_intersects():
    assert segments_intersect((0, 0), (2, 0), (1, 0), (1, 0)) is None


def test_add_unique_skips_duplicates():
    points = [(1.0, 2.0)]
    assert add_unique(points, (1.0, 2.0)) is False
    assert add_unique(points, (2.0, 1.0)) is True
    assert points == [(1.0, 2.0), (2.0, 1.0)]


def test_split_edges_sorts_vertices_lexicographically():
    result = split_edges(SQUARE, [(1.0, 0.0)])
    assert result == sorted(SQUARE)


def test_intersect_overlapping_squares():
    result = intersect(SQUARE, SHIFTED)
    assert sorted(result) == pytest.approx(
        sorted([(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)])
    )
    assert _angles_sorted(result)


def test_intersect_disjoint_is_empty():
    assert intersect(SQUARE, FAR) == []


def test_intersect_contained_returns_inner_polygon():
    result = intersect(SQUARE, BIG)
    assert sorted(result) == sorted(SQUARE)


def test_union_disjoint_keeps_all_vertices():
    result = union_polygons(SQUARE, FAR)
    assert sorted(result) == sorted(SQUARE + FAR)
    assert _angles_sorted(result)


def test_union_overlapping_excludes_interior_vertices():
    result = union_polygons(SQUARE, SHIFTED)
    for p in result:
        inside_both = point_in_polygon(p, SQUARE) and point_in_polygon(p, SHIFTED)
        assert not inside_both
    assert (1.0, 1.0) not in result
    assert (2.0, 2.0) not in result
    assert _angles_sorted(result)


def test_subtract_disjoint_returns_first_polygon():
    result = subtract_polygons(SQUARE, FAR)
    assert sorted(result) == sorted(SQUARE)


def test_subtract_by_containing_polygon_is_empty():
    assert subtract_polygons(SQUARE, BIG) == []


def test_subtract_result_vertices_are_outside_second():
    result = subtract_polygons(SQUARE, SHIFTED)
    assert result
    assert all(not point_in_polygon(p, SHIFTED) for p in result)
    assert _angles_sorted(result)


def test_polygon_normal_counterclockwise_square():
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    assert compute_polygon_normal(square) == pytest.approx((0.0, 0.0, 1.0))


def test_polygon_normal_reverses_with_winding():
    square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    forward = compute_polygon_normal(square)
    backward = compute_polygon_normal(list(reversed(square)))
    assert backward == pytest.approx(tuple(-c for c in forward))
    assert math.hypot(*forward) == pytest.approx(1.0)


def test_polygon_normal_of_single_point_is_zero():
    assert compute_polygon_normal([(1, 2, 3)]) == (0.0, 0.0, 0.0)


def test_is_close_to_first_point():
    points = [(0.5, 0.5, 0.0), (0.9, 0.9, 0.0)]
    assert is_close_to_first_point((0.51, 0.5, 0.0), points) is True
    assert is_close_to_first_point((0.9, 0.9, 0.0), points) is False
    assert is_close_to_first_point((0.0, 0.0, 0.0), []) is False


def test_screen_to_world_corners_and_centre():
    assert screen_to_world(0, 0, 200, 100) == pytest.approx((-1.0, 1.0, 0.0))
    assert screen_to_world(100, 50, 200, 100) == pytest.approx((0.0, 0.0, 0.0))
    assert screen_to_world(200, 100, 200, 100) == pytest.approx((1.0, -1.0, 0.0))