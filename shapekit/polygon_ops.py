"""Planar polygon helpers: containment, segment crossing and point-set boolean operations."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

Point2 = tuple[float, float]
Point3 = tuple[float, float, float]

PARALLEL_TOLERANCE = 1e-8
CLOSE_DISTANCE = 0.05


def _fuzzy_compare(a: float, b: float) -> bool:
    """Relative comparison with twelve significant digits."""
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= 1e-12


def _coord_equal(a: float, b: float) -> bool:
    if a == 0 or b == 0:
        return _fuzzy_is_null(a - b)
    return _fuzzy_compare(a, b)


def _points_equal(p: Sequence[float], q: Sequence[float]) -> bool:
    return _coord_equal(p[0], q[0]) and _coord_equal(p[1], q[1])


def _as_point(p: Sequence[float]) -> Point2:
    return (float(p[0]), float(p[1]))


def _edges(polygon: Sequence[Sequence[float]]) -> Iterable[tuple[Point2, Point2]]:
    points = [_as_point(p) for p in polygon]
    return zip(points, points[1:] + points[:1])


def point_in_polygon(point: Sequence[float], polygon: Sequence[Sequence[float]]) -> bool:
    """Even-odd ray test: is ``point`` inside ``polygon``?"""
    px, py = point[0], point[1]
    crossings = 0
    for (ax, ay), (bx, by) in _edges(polygon):
        if (ay > py) != (by > py):
            intersect_x = (bx - ax) * (py - ay) / (by - ay) + ax
            if px < intersect_x:
                crossings += 1
    return crossings % 2 == 1


def segments_intersect(
    a1: Sequence[float],
    a2: Sequence[float],
    b1: Sequence[float],
    b2: Sequence[float],
) -> Point2 | None:
    """The crossing point of segments a1-a2 and b1-b2, or None if they do not cross.

    Parallel (and degenerate) segments never cross.
    """
    dx1, dy1 = a2[0] - a1[0], a2[1] - a1[1]
    dx2, dy2 = b2[0] - b1[0], b2[1] - b1[1]
    denom = dx1 * dy2 - dy1 * dx2
    if abs(denom) < PARALLEL_TOLERANCE:
        return None
    ox, oy = b1[0] - a1[0], b1[1] - a1[1]
    ua = (ox * dy2 - oy * dx2) / denom
    ub = (ox * dy1 - oy * dx1) / denom
    if not (0 <= ua <= 1 and 0 <= ub <= 1):
        return None
    return (a1[0] + ua * dx1, a1[1] + ua * dy1)


def add_unique(points: list[Point2], point: Sequence[float]) -> bool:
    """Append ``point`` to ``points`` unless an equal point is already there.

    Returns True if the point was added.
    """
    if any(_points_equal(existing, point) for existing in points):
        return False
    points.append(_as_point(point))
    return True


def split_edges(
    polygon: Sequence[Sequence[float]], intersections: Sequence[Sequence[float]]
) -> list[Point2]:
    """Polygon vertices plus intersections lying on its edges, sorted by x then y."""
    result: list[Point2] = []
    for a, b in _edges(polygon):
        result.append(a)
        result.extend(
            _as_point(inter)
            for inter in intersections
            if segments_intersect(a, b, inter, inter) is not None
        )
    return sorted(result, key=lambda p: (p[0], p[1]))


def _edge_crossings(
    poly1: Sequence[Sequence[float]], poly2: Sequence[Sequence[float]]
) -> list[Point2]:
    crossings: list[Point2] = []
    for a1, a2 in _edges(poly1):
        for b1, b2 in _edges(poly2):
            hit = segments_intersect(a1, a2, b1, b2)
            if hit is not None:
                add_unique(crossings, hit)
    return crossings


def _sort_by_angle(points: list[Point2]) -> list[Point2]:
    if not points:
        return []
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    return sorted(points, key=lambda p: math.atan2(p[1] - cy, p[0] - cx))


def _drop_consecutive_duplicates(points: list[Point2]) -> list[Point2]:
    kept: list[Point2] = []
    for p in points:
        if kept and _fuzzy_compare(kept[-1][0], p[0]) and _fuzzy_compare(kept[-1][1], p[1]):
            continue
        kept.append(p)
    return kept


def intersect(
    poly1: Sequence[Sequence[float]], poly2: Sequence[Sequence[float]]
) -> list[Point2]:
    """Points bounding the overlap of two polygons, ordered by angle about their centroid."""
    points = _edge_crossings(poly1, poly2)
    for p in poly1:
        if point_in_polygon(p, poly2):
            add_unique(points, p)
    for p in poly2:
        if point_in_polygon(p, poly1):
            add_unique(points, p)
    return _sort_by_angle(points)


def union_polygons(
    poly1: Sequence[Sequence[float]], poly2: Sequence[Sequence[float]]
) -> list[Point2]:
    """Points bounding the union of two polygons, ordered by angle about their centroid."""
    crossings = _edge_crossings(poly1, poly2)
    result = [p for p in split_edges(poly1, crossings) if not point_in_polygon(p, poly2)]
    result += [p for p in split_edges(poly2, crossings) if not point_in_polygon(p, poly1)]
    result += crossings
    return _drop_consecutive_duplicates(_sort_by_angle(result))


def subtract_polygons(
    poly1: Sequence[Sequence[float]], poly2: Sequence[Sequence[float]]
) -> list[Point2]:
    """Points bounding ``poly1`` minus ``poly2``, ordered by angle about their centroid."""
    crossings = _edge_crossings(poly1, poly2)
    result = [p for p in split_edges(poly1, crossings) if not point_in_polygon(p, poly2)]
    result += crossings
    return _drop_consecutive_duplicates(_sort_by_angle(result))


def compute_polygon_normal(points: Sequence[Sequence[float]]) -> Point3:
    """Unit normal from the summed cross products of consecutive vertices.

    A vanishing sum gives the zero vector.
    """
    nx = ny = nz = 0.0
    pts = list(points)
    for curr, nxt in zip(pts, pts[1:] + pts[:1]):
        nx += curr[1] * nxt[2] - curr[2] * nxt[1]
        ny += curr[2] * nxt[0] - curr[0] * nxt[2]
        nz += curr[0] * nxt[1] - curr[1] * nxt[0]
    length_sq = nx * nx + ny * ny + nz * nz
    if _fuzzy_is_null(length_sq - 1.0):
        return (nx, ny, nz)
    if _fuzzy_is_null(length_sq):
        return (0.0, 0.0, 0.0)
    length = math.sqrt(length_sq)
    return (nx / length, ny / length, nz / length)


def is_close_to_first_point(point: Sequence[float], points: Sequence[Sequence[float]]) -> bool:
    """Is ``point`` within the closing distance of the first of ``points``?"""
    if not points:
        return False
    first = points[0]
    return math.dist(tuple(first), tuple(point)) < CLOSE_DISTANCE


def screen_to_world(x: float, y: float, width: float, height: float) -> Point3:
    """Map a pixel position to normalised device coordinates on the z=0 plane."""
    return (2.0 * x / width - 1.0, 1.0 - 2.0 * y / height, 0.0)