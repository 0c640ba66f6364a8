"""A boundary-representation sketch of vertices, edges, faces and solids."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence, TypeVar, Union

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class Vertex:
    """A point of the sketch; vertices are compared by identity."""

    x: float
    y: float
    z: float

    def coords(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(eq=False)
class Edge:
    """A straight edge between two vertices."""

    start: Vertex
    end: Vertex

    def touches(self, other: "Edge") -> bool:
        """Do the two edges share a vertex?"""
        return any(v is w for v in (self.start, self.end) for w in (other.start, other.end))


@dataclass(eq=False)
class Face:
    """A face bounded by a sequence of edges."""

    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def vertices(self) -> list[Vertex]:
        """The distinct vertices of the edges, in the order they first appear."""
        found: list[Vertex] = []
        for edge in self.edges:
            for v in (edge.start, edge.end):
                if not any(v is seen for seen in found):
                    found.append(v)
        return found


@dataclass(eq=False)
class Solid:
    """A solid bounded by a collection of faces."""

    faces: list[Face] = field(default_factory=list)

    def add_face(self, face: Face) -> None:
        self.faces.append(face)


def check_face_edges_validity(edges: Sequence[Edge]) -> bool:
    """Can ``edges`` form a face: does each touch the next, and the last the first?

    Raises ``ValueError`` for an empty sequence.
    """
    if not edges:
        raise ValueError("a face needs at least one edge")
    if not all(a.touches(b) for a, b in zip(edges, edges[1:])):
        return False
    return edges[0].touches(edges[-1])


def _index_of(items: Sequence[T], item: T) -> int | None:
    return next((i for i, candidate in enumerate(items) if candidate is item), None)


def _remove(items: list[T], target: Union[T, int]) -> bool:
    """Remove by index, ignoring out-of-range indices, or every occurrence by identity."""
    if isinstance(target, int) and not isinstance(target, bool):
        if 0 <= target < len(items):
            del items[target]
            return True
        return False
    kept = [item for item in items if item is not target]
    removed = len(kept) != len(items)
    items[:] = kept
    return removed


def _parse_floats(words: Sequence[str], where: str) -> tuple[float, float, float]:
    try:
        x, y, z = (float(w) for w in words[:3])
    except ValueError:
        raise ValueError(f"{where}: expected three coordinates") from None
    return x, y, z


def _leading_int(token: str, where: str) -> int:
    head = token.split("/", 1)[0]
    try:
        return int(head)
    except ValueError:
        raise ValueError(f"{where}: bad face index {token!r}") from None


class Sketcher:
    """Owns the vertices, edges, faces and solids of one sketch."""

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.edges: list[Edge] = []
        self.faces: list[Face] = []
        self.solids: list[Solid] = []

    # vertices

    def add_vertex(self, x: float, y: float, z: float) -> Vertex:
        """The vertex at exactly (x, y, z), created if there is none yet."""
        for v in self.vertices:
            if v.x == x and v.y == y and v.z == z:
                return v
        vertex = Vertex(x, y, z)
        self.vertices.append(vertex)
        return vertex

    def remove_vertex(self, target: Union[Vertex, int]) -> bool:
        """Remove a vertex given as an object or an index; True if one was removed."""
        return _remove(self.vertices, target)

    def remove_vertex_at(self, x: float, y: float, z: float) -> bool:
        """Remove every vertex at exactly (x, y, z); True if any was removed."""
        before = len(self.vertices)
        self.vertices = [v for v in self.vertices if not (v.x == x and v.y == y and v.z == z)]
        return len(self.vertices) != before

    def _vertex(self, ref: Union[Vertex, int]) -> Vertex:
        if isinstance(ref, Vertex):
            return ref
        if not 0 <= ref < len(self.vertices):
            raise IndexError(f"vertex index {ref} out of range")
        return self.vertices[ref]

    # edges

    def add_edge(self, start: Union[Vertex, int], end: Union[Vertex, int]) -> Edge:
        """The edge between two vertices (objects or indices), in either direction."""
        a, b = self._vertex(start), self._vertex(end)
        for e in self.edges:
            if (e.start is a and e.end is b) or (e.start is b and e.end is a):
                return e
        edge = Edge(a, b)
        self.edges.append(edge)
        return edge

    def remove_edge(self, target: Union[Edge, int]) -> bool:
        """Remove an edge given as an object or an index; True if one was removed."""
        return _remove(self.edges, target)

    def remove_edge_between(self, start: Vertex, end: Vertex) -> bool:
        """Remove every edge running from ``start`` to ``end``."""
        before = len(self.edges)
        self.edges = [e for e in self.edges if not (e.start is start and e.end is end)]
        return len(self.edges) != before

    # faces

    def add_face(self, edges: Iterable[Edge] | None = None) -> Face:
        """Add a face from ``edges`` (empty if None) without checking them."""
        face = Face(list(edges) if edges is not None else [])
        self.faces.append(face)
        return face

    def add_face_by_indices(self, indices: Iterable[int]) -> Face:
        """Add a face from edge indices after checking that the edges connect.

        Raises ``IndexError`` for a bad index and ``ValueError`` if the edges
        do not form a closed chain.
        """
        chosen = []
        for idx in indices:
            if not 0 <= idx < len(self.edges):
                raise IndexError(f"edge index {idx} out of range")
            chosen.append(self.edges[idx])
        if not check_face_edges_validity(chosen):
            raise ValueError("Not valid edges to form a face!")
        return self.add_face(chosen)

    def remove_face(self, target: Union[Face, int]) -> bool:
        """Remove a face given as an object or an index; True if one was removed."""
        return _remove(self.faces, target)

    def _face(self, ref: Union[Face, int, None]) -> Face | None:
        if ref is None or isinstance(ref, Face):
            return ref
        if not 0 <= ref < len(self.faces):
            raise IndexError(f"face index {ref} out of range")
        return self.faces[ref]

    # solids

    def add_solid(self, source: Union[Solid, Iterable[Face], None] = None) -> Solid:
        """Add an empty solid, a copy of ``source`` if it is a solid, or one made of faces."""
        if source is None:
            solid = Solid()
        elif isinstance(source, Solid):
            solid = Solid(list(source.faces))
        else:
            solid = Solid(list(source))
        self.solids.append(solid)
        return solid

    def remove_solid(self, target: Union[Solid, int]) -> bool:
        """Remove a solid given as an object or an index; True if one was removed."""
        return _remove(self.solids, target)

    # lookup

    def find_vertex(self, vertex: Vertex) -> int | None:
        return _index_of(self.vertices, vertex)

    def find_edge(self, edge: Edge) -> int | None:
        return _index_of(self.edges, edge)

    def find_face(self, face: Face) -> int | None:
        return _index_of(self.faces, face)

    def find_solid(self, solid: Solid) -> int | None:
        return _index_of(self.solids, solid)

    # modelling

    def _ring_edges(self, ring: Sequence[Vertex]) -> list[Edge]:
        n = len(ring)
        return [self.add_edge(ring[i], ring[(i + 1) % n]) for i in range(n)]

    def extrude_face(self, face: Union[Face, int, None], height: float) -> Solid | None:
        """Extrude a face along +z by ``height`` into a new solid.

        The solid holds the side faces, the top face and the original face.
        A face of None gives None; a bad index raises ``IndexError``.
        """
        base = self._face(face)
        if base is None:
            return None
        bottom = base.vertices()
        top = [self.add_vertex(v.x, v.y, v.z + height) for v in bottom]
        n = len(bottom)

        faces: list[Face] = []
        for i in range(n):
            j = (i + 1) % n
            e1 = self.add_edge(bottom[i], bottom[j])
            e2 = self.add_edge(top[i], top[j])
            e3 = self.add_edge(bottom[i], top[i])
            e4 = self.add_edge(bottom[j], top[j])
            faces.append(self.add_face([e1, e4, e2, e3]))

        faces.append(self.add_face(self._ring_edges(top)))
        faces.append(base)
        return self.add_solid(faces)

    def revolve_face(
        self, face: Union[Face, int, None], angle: float, steps: int = 20
    ) -> Solid | None:
        """Sweep a face about the y axis by ``angle`` degrees in ``steps`` steps.

        A face of None gives None; a bad index raises ``IndexError``; fewer
        than one step raises ``ValueError``.
        """
        base = self._face(face)
        if base is None:
            return None
        if steps < 1:
            raise ValueError("steps must be at least 1")
        delta = math.radians(angle) / steps
        base_vertices = base.vertices()

        rings: list[list[Vertex]] = []
        for i in range(steps + 1):
            c, s = math.cos(i * delta), math.sin(i * delta)
            rings.append(
                [self.add_vertex(v.x * c + v.z * s, v.y, -v.x * s + v.z * c) for v in base_vertices]
            )

        solid = self.add_solid()
        n = len(base_vertices)
        for ring1, ring2 in zip(rings, rings[1:]):
            for j in range(n):
                k = (j + 1) % n
                v1, v2, v3, v4 = ring1[j], ring1[k], ring2[k], ring2[j]
                e1 = self.add_edge(v1, v2)
                e2 = self.add_edge(v2, v3)
                e3 = self.add_edge(v3, v4)
                e4 = self.add_edge(v4, v1)
                solid.add_face(self.add_face([e1, e4, e3, e2]))

        solid.add_face(self.add_face(self._ring_edges(rings[0])))
        solid.add_face(self.add_face(self._ring_edges(rings[-1])))
        return solid

    def clear(self) -> None:
        """Remove everything from the sketch."""
        self.vertices.clear()
        self.edges.clear()
        self.faces.clear()
        self.solids.clear()

    # loading

    def load_file(self, path: str | Path) -> int:
        """Load an ``.stl`` or ``.obj`` file; returns the number of faces added.

        Raises ``OSError`` if the file cannot be read and ``ValueError`` for
        any other extension.
        """
        name = str(path)
        with open(name, encoding="utf-8", errors="replace"):
            pass
        ext = name[name.rfind(".") + 1:]
        if ext == "stl":
            return self.load_stl(name)
        if ext == "obj":
            return self.load_obj(name)
        raise ValueError(f"Unsupported file format: {ext}")

    def load_stl(self, path: str | Path) -> int:
        """Add every triangle of an ASCII STL file as a face; returns the count."""
        added = 0
        triangle: list[Vertex] = []
        with open(path, encoding="utf-8", errors="replace") as stream:
            for number, line in enumerate(stream, start=1):
                words = line.split()
                if not words:
                    continue
                if words[0] == "vertex":
                    x, y, z = _parse_floats(words[1:], f"{path}:{number}")
                    triangle.append(self.add_vertex(x, y, z))
                elif words[0] == "endloop":
                    if len(triangle) == 3:
                        self.add_face(self._ring_edges(triangle))
                        added += 1
                    triangle.clear()
        log.debug("STL file loaded successfully")
        return added

    def load_obj(self, path: str | Path) -> int:
        """Add the ``v`` vertices and ``f`` faces of an OBJ file; returns the face count.

        Face indices outside the vertices read so far are skipped.
        """
        added = 0
        read: list[Vertex] = []
        with open(path, encoding="utf-8", errors="replace") as stream:
            for number, line in enumerate(stream, start=1):
                line = line.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                words = line.split()
                if not words:
                    continue
                where = f"{path}:{number}"
                if words[0] == "v":
                    read.append(self.add_vertex(*_parse_floats(words[1:], where)))
                elif words[0] == "f":
                    corners = []
                    for token in words[1:]:
                        idx = _leading_int(token, where) - 1
                        if 0 <= idx < len(read):
                            corners.append(read[idx])
                    self.add_face(self._ring_edges(corners))
                    added += 1
        log.debug("OBJ file successfully loaded into sketcher")
        return added