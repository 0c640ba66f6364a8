"""Planar Bezier curves evaluated with de Casteljau's algorithm."""

from __future__ import annotations

import logging
import math
from typing import Sequence

log = logging.getLogger(__name__)

Point2 = tuple[float, float]

INTERSECTION_SAMPLES = 500
INTERSECTION_DISTANCE = 0.05


def _as_point(p: Sequence[float]) -> Point2:
    return (float(p[0]), float(p[1]))


def de_casteljau(points: Sequence[Sequence[float]], t: float) -> Point2:
    """The point at parameter ``t`` of the Bezier curve with control ``points``.

    Raises ``ValueError`` when there are no control points.
    """
    current = [_as_point(p) for p in points]
    if not current:
        raise ValueError("a Bezier curve needs at least one control point")
    while len(current) > 1:
        current = [
            ((1 - t) * a[0] + t * b[0], (1 - t) * a[1] + t * b[1])
            for a, b in zip(current, current[1:])
        ]
    return current[0]


class Bezier:
    """A Bezier curve with a cached polyline of interpolated points."""

    def __init__(
        self, control_points: Sequence[Sequence[float]], num_interpolating_points: int
    ) -> None:
        if not control_points:
            raise ValueError("a Bezier curve needs at least one control point")
        if num_interpolating_points < 1:
            raise ValueError("num_interpolating_points must be at least 1")
        self.control_points: list[Point2] = [_as_point(p) for p in control_points]
        self.num_interpolating_points = num_interpolating_points
        self.curve_points: list[Point2] = []
        self._calculate_curve()

    def _calculate_curve(self) -> None:
        self.curve_points = self.evaluate_points(self.num_interpolating_points)
        log.debug("Curve points calculated: %d", len(self.curve_points))

    def update_control_point(self, index: int, point: Sequence[float]) -> bool:
        """Move one control point and recompute the curve.

        An index out of range changes nothing and gives False.
        """
        if not 0 <= index < len(self.control_points):
            return False
        self.control_points[index] = _as_point(point)
        self._calculate_curve()
        return True

    def find_control_point(
        self, position: Sequence[float], radius: float = 10.0
    ) -> int | None:
        """Index of the first control point within ``radius`` of ``position``, or None."""
        px, py = position[0], position[1]
        for index, (cx, cy) in enumerate(self.control_points):
            if math.hypot(cx - px, cy - py) <= radius:
                return index
        return None

    def find_intersections(self, other: "Bezier") -> list[Point2]:
        """Sampled points of this curve lying close to sampled points of ``other``.

        A point is reported once for every nearby sample of the other curve.
        """
        mine = self.evaluate_points(INTERSECTION_SAMPLES)
        theirs = other.evaluate_points(INTERSECTION_SAMPLES)
        return [
            p1
            for p1 in mine
            for p2 in theirs
            if math.hypot(p1[0] - p2[0], p1[1] - p2[1]) < INTERSECTION_DISTANCE
        ]

    def evaluate_points(self, samples: int) -> list[Point2]:
        """``samples + 1`` points at evenly spaced parameters from 0 to 1."""
        if samples < 1:
            raise ValueError("samples must be at least 1")
        return [self.evaluate(i / samples) for i in range(samples + 1)]

    def evaluate(self, t: float) -> Point2:
        """The point of the curve at parameter ``t``."""
        return de_casteljau(self.control_points, t)