import pytest

from shapekit.mesh import Point, Triangle, load_stl_triangles

STL = """solid sample
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 1 0 0
      vertex 0 1 0
    endloop
  endfacet
  facet normal 0 0 -1
    outer loop
      vertex 0.5 0.5 2
      vertex 1.5 0.5 2
      vertex 0.5 1.5 -2
    endloop
  endfacet
endsolid sample
"""


def test_defaults():
    assert Point() == Point(0, 0, 0)
    assert Triangle() == Triangle(Point(), Point(), Point())


def test_load_triangles(tmp_path):
    path = tmp_path / "mesh.stl"
    path.write_text(STL)
    tris = load_stl_triangles(path)
    assert tris == [
        Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)),
        Triangle(Point(0.5, 0.5, 2), Point(1.5, 0.5, 2), Point(0.5, 1.5, -2)),
    ]


def test_incomplete_group_is_dropped(tmp_path):
    path = tmp_path / "mesh.stl"
    path.write_text("vertex 1 2 3\nvertex 4 5 6\nvertex 7 8 9\nvertex 1 1 1\n")
    tris = load_stl_triangles(path)
    assert len(tris) == 1
    assert tris[0].p3 == Point(7, 8, 9)


def test_empty_file(tmp_path):
    path = tmp_path / "empty.stl"
    path.write_text("solid nothing\nendsolid nothing\n")
    assert load_stl_triangles(path) == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stl_triangles(tmp_path / "absent.stl")


def test_malformed_vertex(tmp_path):
    path = tmp_path / "bad.stl"
    path.write_text("vertex 1 two 3\n")
    with pytest.raises(ValueError):
        load_stl_triangles(path)