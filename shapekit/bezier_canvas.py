"""Canvas state for editing several Bezier curves with the mouse."""

from __future__ import annotations

import logging

from .bezier import Bezier, Point2

log = logging.getLogger(__name__)

ZOOM_STEP = 1.1
PICK_RADIUS = 0.4
X_EXTENT = 4.0
Y_EXTENT = 2.0


class BezierCanvas:
    """Holds curves, the current zoom and the control point being dragged."""

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("the canvas needs a positive width and height")
        self.width = width
        self.height = height
        self.curves: list[Bezier] = []
        self.zoom = 1.0
        self.selected: tuple[int, int] | None = None

    def _to_world(self, x: float, y: float) -> Point2:
        ndc_x = X_EXTENT * (2.0 * x / self.width - 1.0)
        ndc_y = Y_EXTENT * (1.0 - 2.0 * y / self.height)
        return (ndc_x / self.zoom, ndc_y / self.zoom)

    def add_curve(self, curve: Bezier) -> None:
        self.curves.append(curve)

    def press(self, x: float, y: float) -> tuple[int, int] | None:
        """Select the control point under pixel (x, y).

        Returns (curve index, control point index), or None if nothing is hit.
        """
        position = self._to_world(x, y)
        self.selected = None
        for curve_index, curve in enumerate(self.curves):
            point_index = curve.find_control_point(position, PICK_RADIUS / self.zoom)
            if point_index is not None:
                self.selected = (curve_index, point_index)
                log.debug("Selected Bezier: %d Control Point: %d", curve_index, point_index)
                break
        return self.selected

    def drag(self, x: float, y: float) -> bool:
        """Move the selected control point to pixel (x, y); False if none is selected."""
        if self.selected is None:
            return False
        curve_index, point_index = self.selected
        return self.curves[curve_index].update_control_point(
            point_index, self._to_world(x, y)
        )

    def wheel(self, delta: float) -> float:
        """Zoom in for a positive wheel delta, out otherwise; returns the new zoom."""
        if delta > 0:
            self.zoom *= ZOOM_STEP
        else:
            self.zoom /= ZOOM_STEP
        return self.zoom

    def intersections(self) -> list[Point2]:
        """Intersection points of every pair of curves."""
        return [
            point
            for i, first in enumerate(self.curves)
            for second in self.curves[i + 1:]
            for point in first.find_intersections(second)
        ]