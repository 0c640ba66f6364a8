"""Interactive polygon sketching with extrusion preview and boolean operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from .polygon_ops import (
    Point3,
    compute_polygon_normal,
    is_close_to_first_point,
    screen_to_world,
)

log = logging.getLogger(__name__)

ROTATION_SPEED = 0.5
HEIGHT_SCALE = 0.01

Segment3 = tuple[Point3, Point3]


class BooleanOperation(str, Enum):
    """The boolean operations that can combine the first two polygons."""

    UNION = "Union"
    SUBTRACTION = "Subtraction"
    INTERSECTION = "Intersection"


@dataclass
class SketchPolygon:
    """A polygon drawn on the z=0 plane, open until its first point is clicked again."""

    points: list[Point3] = field(default_factory=list)
    normal: Point3 = (0.0, 0.0, 0.0)
    is_closed: bool = False

    def close(self) -> None:
        """Mark the polygon closed and compute its normal."""
        self.is_closed = True
        self.normal = compute_polygon_normal(self.points)


def _to_area(polygon: SketchPolygon) -> BaseGeometry:
    """The filled region of a sketch polygon; open outlines are closed implicitly."""
    coords = [(p[0], p[1]) for p in polygon.points]
    if len(coords) < 3:
        return ShapelyPolygon()
    shape = ShapelyPolygon(coords)
    if not shape.is_valid:
        shape = make_valid(shape)
    return shape


def _polygonal_parts(geometry: BaseGeometry) -> Iterator[ShapelyPolygon]:
    if geometry.is_empty:
        return
    if isinstance(geometry, ShapelyPolygon):
        yield geometry
    elif hasattr(geometry, "geoms"):
        for part in geometry.geoms:
            yield from _polygonal_parts(part)


def _outline_points(geometry: BaseGeometry) -> list[Point3]:
    """Every ring vertex of the polygonal parts of ``geometry``, on z=0."""
    points: list[Point3] = []
    for part in _polygonal_parts(geometry):
        for ring in (part.exterior, *part.interiors):
            points.extend((float(x), float(y), 0.0) for x, y in ring.coords)
    return points


class ExtrusionEditor:
    """Editor state for sketching polygons, extruding them and combining them.

    Double clicks add points; a double click near a polygon's first point closes
    it. Dragging with the right button rotates the view; dragging with the left
    button after a polygon is closed sets the extrusion height.
    """

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("the editor needs a positive width and height")
        self.width = width
        self.height = height
        self.polygons: list[SketchPolygon] = []
        self.selected_index = -1
        self.last_mouse_pos: tuple[float, float] = (0.0, 0.0)
        self.rotation_x = 0.0
        self.rotation_y = 0.0
        self.right_pressed = False
        self.polygon_closed = False
        self.extrusion_height = 0.0

    def double_click(self, x: float, y: float) -> SketchPolygon:
        """Handle a left double click at pixel (x, y); returns the polygon it touched."""
        world = screen_to_world(x, y, self.width, self.height)
        if self.polygon_closed or self.selected_index == -1 or not self.polygons:
            polygon = SketchPolygon(points=[world])
            self.polygons.append(polygon)
            self.selected_index = len(self.polygons) - 1
            self.polygon_closed = False
            log.debug("Started a new polygon. Index: %d", self.selected_index)
            return polygon

        polygon = self.polygons[self.selected_index]
        if polygon.points and is_close_to_first_point(world, polygon.points):
            polygon.close()
            self.polygon_closed = True
            log.debug("Polygon closed. Index: %d", self.selected_index)
        else:
            polygon.points.append(world)
            log.debug("Added point to polygon. Index: %d", self.selected_index)
        return polygon

    def press_right(self, x: float, y: float) -> None:
        """Start a right-button drag at pixel (x, y)."""
        self.right_pressed = True
        self.last_mouse_pos = (x, y)

    def move(self, x: float, y: float, left_down: bool = False) -> None:
        """Handle the pointer moving to pixel (x, y)."""
        if self.right_pressed:
            last_x, last_y = self.last_mouse_pos
            self.rotation_x += (y - last_y) * ROTATION_SPEED
            self.rotation_y += (x - last_x) * ROTATION_SPEED
            self.last_mouse_pos = (x, y)
        elif self.polygon_closed and left_down:
            self.extrusion_height = (y - self.height / 2.0) * HEIGHT_SCALE
            log.debug("Height: %s", self.extrusion_height)

    def release_right(self) -> None:
        """End a right-button drag."""
        self.right_pressed = False

    def apply_boolean(self, operation: BooleanOperation | str) -> bool:
        """Combine the first two polygons into the first and drop the second.

        Returns True if the result had points; otherwise the first polygon is
        left as it was. Raises ``ValueError`` with fewer than two polygons or
        an unknown operation.
        """
        op = BooleanOperation(operation)
        if len(self.polygons) < 2:
            raise ValueError("At least two shapes are required.")

        first, second = self.polygons[0], self.polygons[1]
        area_a, area_b = _to_area(first), _to_area(second)
        if op is BooleanOperation.UNION:
            result = area_a.union(area_b)
        elif op is BooleanOperation.INTERSECTION:
            result = area_a.intersection(area_b)
        else:
            result = area_a.difference(area_b)

        points = _outline_points(result)
        if points:
            first.points = points
            first.close()
        else:
            log.debug("Operation failed or returned empty.")

        del self.polygons[1]
        if self.selected_index >= len(self.polygons):
            self.selected_index = len(self.polygons) - 1
        return bool(points)

    def extruded_edges(self, polygon: SketchPolygon) -> list[Segment3]:
        """Side and top edges of ``polygon`` extruded along its normal.

        Open polygons have no extrusion and give an empty list.
        """
        if not polygon.is_closed or not polygon.points:
            return []
        nx, ny, nz = polygon.normal
        h = self.extrusion_height

        def lift(p: Point3) -> Point3:
            return (p[0] + nx * h, p[1] + ny * h, p[2] + nz * h)

        pts = polygon.points
        segments: list[Segment3] = []
        for base1, base2 in zip(pts, pts[1:] + pts[:1]):
            top1, top2 = lift(base1), lift(base2)
            segments.extend(((base1, top1), (top1, top2), (top2, base2)))
        return segments