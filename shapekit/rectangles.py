"""Axis-aligned rectangles and the filled polygons of their boolean combinations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Point2 = tuple[float, float]
Color = tuple[float, float, float]

RESULT_COLOR: Color = (1.0, 0.0, 0.5)
ERASE_COLOR: Color = (0.0, 0.0, 0.0)


class RectOperation(str, Enum):
    INTERSECTION = "intersection"
    UNION = "union"
    DIFFERENCE = "difference"


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its centre, its length along x and width along y."""

    x: float = 0.0
    y: float = 0.0
    length: float = 0.0
    width: float = 0.0

    def bounds(self) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax)."""
        half_len = self.length / 2.0
        half_wid = self.width / 2.0
        return (self.x - half_len, self.x + half_len, self.y - half_wid, self.y + half_wid)

    def vertices(self) -> list[Point2]:
        """Corners counter-clockwise from the lower left."""
        x1, x2, y1, y2 = self.bounds()
        return [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]


@dataclass(frozen=True)
class FilledPolygon:
    """A polygon to fill, with its colour."""

    vertices: list[Point2]
    color: Color


def overlap(rect1: Rectangle, rect2: Rectangle) -> list[Point2] | None:
    """Corners of the overlap of two rectangles, or None if they do not overlap."""
    ax1, ax2, ay1, ay2 = rect1.bounds()
    bx1, bx2, by1, by2 = rect2.bounds()
    ix1, ix2 = max(ax1, bx1), min(ax2, bx2)
    iy1, iy2 = max(ay1, by1), min(ay2, by2)
    if ix1 < ix2 and iy1 < iy2:
        return [(ix1, iy1), (ix2, iy1), (ix2, iy2), (ix1, iy2)]
    return None


def boolean_polygons(
    rect1: Rectangle, rect2: Rectangle, operation: RectOperation | str | None
) -> list[FilledPolygon]:
    """The polygons to fill, in order, to show ``operation`` on two rectangles.

    A difference paints the overlap in the background colour over the first
    rectangle. No operation gives nothing; an unknown one raises ``ValueError``.
    """
    if operation is None or operation == "":
        return []
    op = RectOperation(operation)
    common = overlap(rect1, rect2)
    if op is RectOperation.INTERSECTION:
        return [FilledPolygon(common, RESULT_COLOR)] if common else []
    if op is RectOperation.UNION:
        return [
            FilledPolygon(rect1.vertices(), RESULT_COLOR),
            FilledPolygon(rect2.vertices(), RESULT_COLOR),
        ]
    result = [FilledPolygon(rect1.vertices(), RESULT_COLOR)]
    if common:
        result.append(FilledPolygon(common, ERASE_COLOR))
    return result