"""Triangle meshes and an ASCII STL reader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Point:
    """A mesh vertex."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Triangle:
    """A triangle given by three vertices."""

    p1: Point = Point()
    p2: Point = Point()
    p3: Point = Point()


def load_stl_triangles(path: str | Path) -> list[Triangle]:
    """Read the triangles of an ASCII STL file.

    Every three ``vertex`` lines make one triangle; a trailing incomplete
    group is dropped. Raises ``OSError`` if the file cannot be opened and
    ``ValueError`` on a malformed vertex line.
    """
    triangles: list[Triangle] = []
    pending: list[Point] = []
    with open(path, encoding="utf-8", errors="replace") as stream:
        for number, line in enumerate(stream, start=1):
            words = line.split()
            if not words or words[0] != "vertex":
                continue
            try:
                x, y, z = (float(w) for w in words[1:4])
            except ValueError:
                raise ValueError(f"{path}:{number}: malformed vertex line") from None
            pending.append(Point(x, y, z))
            if len(pending) == 3:
                triangles.append(Triangle(*pending))
                pending.clear()
    return triangles