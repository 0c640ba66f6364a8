"""Clicking out polygon faces into a sketch and combining them."""

from __future__ import annotations

import logging

from .sketcher import Edge, Face, Sketcher, Vertex, check_face_edges_validity

log = logging.getLogger(__name__)

Point3 = tuple[float, float, float]

CANVAS_SCALE = 100.0


class SketchSession:
    """Collects clicked points and turns them into faces of a sketch."""

    def __init__(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("the session needs a positive width and height")
        self.width = width
        self.height = height
        self.sketcher = Sketcher()
        self.temp_points: list[Point3] = []
        self.faces: list[Face] = []
        self.creating_shape = False

    def start_creating_shape(self) -> None:
        """Begin a new shape, dropping any clicked points."""
        self.creating_shape = True
        self.temp_points.clear()
        log.debug("Started creating a new shape.")

    def click(self, x: float, y: float) -> Point3:
        """Record a click at pixel (x, y) as a point on the z=0 plane."""
        point = (
            (x / self.width - 0.5) * CANVAS_SCALE,
            (0.5 - y / self.height) * CANVAS_SCALE,
            0.0,
        )
        self.temp_points.append(point)
        return point

    def _ring(self) -> list[Edge]:
        vertices: list[Vertex] = [self.sketcher.add_vertex(*p) for p in self.temp_points]
        n = len(vertices)
        return [self.sketcher.add_edge(vertices[i], vertices[(i + 1) % n]) for i in range(n)]

    def finalize_current_shape(self) -> Face | None:
        """Turn the clicked points into a closed face.

        With fewer than three points nothing happens and None is returned.
        The points are used up even if the edges turn out not to form a face.
        """
        if len(self.temp_points) < 3:
            log.debug("Not enough points to create a polygon: %d", len(self.temp_points))
            return None
        edges = self._ring()
        face = None
        if check_face_edges_validity(edges):
            face = self.sketcher.add_face(edges)
            self.faces.append(face)
        else:
            log.debug("Invalid edges for creating a polygon.")
        self.temp_points.clear()
        self.creating_shape = False
        return face

    def finalize_shape(self) -> Face:
        """Turn the clicked points into a face without any checks."""
        self.creating_shape = False
        edges = self._ring() if self.temp_points else []
        face = self.sketcher.add_face(edges)
        self.faces.append(face)
        self.temp_points.clear()
        return face

    def apply_union(self) -> Face | None:
        """Replace the last two faces by one holding the edges of both."""
        if len(self.faces) < 2:
            return None
        first, second = self.faces[-2], self.faces[-1]
        merged = Face([*first.edges, *second.edges])
        del self.faces[-2:]
        self.faces.append(merged)
        return merged

    def apply_difference(self) -> Face | None:
        """Drop the last face; returns the face dropped."""
        if len(self.faces) < 2:
            return None
        return self.faces.pop()

    def apply_intersection(self) -> Face | None:
        """Replace the last two faces by one holding the edges of the first."""
        if len(self.faces) < 2:
            return None
        result = Face(list(self.faces[-2].edges))
        del self.faces[-2:]
        self.faces.append(result)
        return result