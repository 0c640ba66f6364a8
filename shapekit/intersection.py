"""Intersection tests between triangles and between two triangle meshes."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from .mesh import Point, Triangle

Segment = tuple[Point, Point]

COPLANAR_TOLERANCE = 1e-5
PARALLEL_TOLERANCE = 1e-6
BARYCENTRIC_TOLERANCE = 1e-5
SAME_POINT_TOLERANCE = 1e-5
DEFAULT_STEP = 0.01


def _sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y, a.z - b.z)


def _cross(a: Point, b: Point) -> Point:
    return Point(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _corners(triangle: Triangle) -> tuple[Point, Point, Point]:
    return (triangle.p1, triangle.p2, triangle.p3)


def _edges(triangle: Triangle) -> Iterator[tuple[Point, Point]]:
    pts = _corners(triangle)
    return zip(pts, pts[1:] + pts[:1])


def _orientation(p: Point, q: Point, r: Point) -> int:
    """0 if collinear, 1 if clockwise, 2 if counter-clockwise (in the xy plane)."""
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def _on_segment(p: Point, q: Point, r: Point) -> bool:
    """Does ``q`` lie within the bounding box of segment p-r?"""
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def segments_intersect_2d(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Do segments p1-q1 and p2-q2 meet when projected on the xy plane?"""
    o1 = _orientation(p1, q1, p2)
    o2 = _orientation(p1, q1, q2)
    o3 = _orientation(p2, q2, p1)
    o4 = _orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and _on_segment(p1, p2, q1))
        or (o2 == 0 and _on_segment(p1, q2, q1))
        or (o3 == 0 and _on_segment(p2, p1, q2))
        or (o4 == 0 and _on_segment(p2, q1, q2))
    )


def triangles_intersect(t1: Triangle, t2: Triangle) -> bool:
    """Does any edge of ``t1`` cross any edge of ``t2`` in the xy plane?"""
    return any(
        segments_intersect_2d(a1, a2, b1, b2)
        for a1, a2 in _edges(t1)
        for b1, b2 in _edges(t2)
    )


def triangles_coplanar(t1: Triangle, t2: Triangle) -> bool:
    """Do all corners of ``t2`` lie in the plane of ``t1``?"""
    normal = _cross(_sub(t1.p2, t1.p1), _sub(t1.p3, t1.p1))
    offset = -_dot(normal, t1.p1)
    return all(
        abs(_dot(normal, p) + offset) < COPLANAR_TOLERANCE for p in _corners(t2)
    )


def _segment_hits_triangle(p0: Point, p1: Point, tri: Triangle) -> Point | None:
    u = _sub(tri.p2, tri.p1)
    v = _sub(tri.p3, tri.p1)
    n = _cross(u, v)
    if n.x == 0 and n.y == 0 and n.z == 0:
        return None
    direction = _sub(p1, p0)
    denom = _dot(n, direction)
    if abs(denom) < PARALLEL_TOLERANCE:
        return None
    t = _dot(n, _sub(tri.p1, p0)) / denom
    if t < 0.0 or t > 1.0:
        return None
    hit = Point(p0.x + t * direction.x, p0.y + t * direction.y, p0.z + t * direction.z)

    w = _sub(hit, tri.p1)
    uu, uv, vv = _dot(u, u), _dot(u, v), _dot(v, v)
    wu, wv = _dot(w, u), _dot(w, v)
    d = uv * uv - uu * vv
    s = (uv * wv - vv * wu) / d
    r = (uv * wu - uu * wv) / d
    eps = BARYCENTRIC_TOLERANCE
    if s >= -eps and r >= -eps and s + r <= 1.0 + eps:
        return hit
    return None


def _same_point(a: Point, b: Point) -> bool:
    eps = SAME_POINT_TOLERANCE
    return abs(a.x - b.x) < eps and abs(a.y - b.y) < eps and abs(a.z - b.z) < eps


def triangle_triangle_intersection_segment(t1: Triangle, t2: Triangle) -> Segment | None:
    """The segment along which two triangles cross in 3D, or None.

    Edges of each triangle are tested against the other; the result exists
    only when exactly two distinct crossing points are found.
    """
    hits = [
        hit
        for tri, other in ((t1, t2), (t2, t1))
        for p0, p1 in _edges(tri)
        if (hit := _segment_hits_triangle(p0, p1, other)) is not None
    ]
    distinct: list[Point] = []
    for p in hits:
        if not any(_same_point(p, q) for q in distinct):
            distinct.append(p)
    if len(distinct) == 2:
        return (distinct[0], distinct[1])
    return None


def point_in_triangle_2d(point: Point, triangle: Triangle) -> bool:
    """Barycentric test of ``point`` against ``triangle`` in the xy plane.

    A degenerate triangle contains no point.
    """
    x, y = point.x, point.y
    x1, y1 = triangle.p1.x, triangle.p1.y
    x2, y2 = triangle.p2.x, triangle.p2.y
    x3, y3 = triangle.p3.x, triangle.p3.y
    denom = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if denom == 0:
        return False
    a = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / denom
    b = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / denom
    c = 1.0 - a - b
    return 0 <= a <= 1 and 0 <= b <= 1 and 0 <= c <= 1


def _inside_runs(tri: Triangle, other: Triangle, ts: list[float]) -> Iterator[Segment]:
    for p0, p1 in _edges(tri):
        run: list[Point] = []
        for t in ts:
            pt = Point(p0.x + t * (p1.x - p0.x), p0.y + t * (p1.y - p0.y), 0.0)
            if point_in_triangle_2d(pt, other):
                run.append(pt)
            elif run:
                if len(run) > 1:
                    yield (run[0], run[-1])
                run = []
        if len(run) > 1:
            yield (run[0], run[-1])


def coplanar_overlap_segments(
    tri_a: Triangle, tri_b: Triangle, step: float = DEFAULT_STEP
) -> list[Segment]:
    """Pieces of each triangle's edges lying inside the other, sampled every ``step``.

    Raises ``ValueError`` if ``step`` is not positive.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    count = math.floor(1.0 / step + 1e-9)
    ts = [i * step for i in range(count + 1)]
    return [*_inside_runs(tri_a, tri_b, ts), *_inside_runs(tri_b, tri_a, ts)]


def intersection_segments(
    triangles_a: Iterable[Triangle], triangles_b: Iterable[Triangle]
) -> list[Segment]:
    """All segments where a triangle of the first mesh meets one of the second."""
    second = list(triangles_b)
    segments: list[Segment] = []
    for tri_a in triangles_a:
        for tri_b in second:
            if triangles_coplanar(tri_a, tri_b):
                segments.extend(coplanar_overlap_segments(tri_a, tri_b))
            else:
                seg = triangle_triangle_intersection_segment(tri_a, tri_b)
                if seg is not None:
                    segments.append(seg)
    return segments