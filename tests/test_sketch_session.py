import pytest

from shapekit.sketch_session import SketchSession


def _with_triangle(session, offset=0):
    session.click(100 + offset, 100)
    session.click(300 + offset, 100)
    session.click(200 + offset, 300)
    return session.finalize_current_shape()


def test_click_maps_centre_and_corner():
    session = SketchSession(400, 400)
    assert session.click(200, 200) == pytest.approx((0.0, 0.0, 0.0))
    assert session.click(0, 0) == pytest.approx((-50.0, 50.0, 0.0))
    assert len(session.temp_points) == 2


def test_start_creating_shape_clears_points():
    session = SketchSession(400, 400)
    session.click(1, 1)
    session.start_creating_shape()
    assert session.creating_shape is True
    assert session.temp_points == []


def test_finalize_needs_three_points():
    session = SketchSession(400, 400)
    session.click(10, 10)
    session.click(20, 20)
    assert session.finalize_current_shape() is None
    assert len(session.temp_points) == 2
    assert session.faces == []


def test_finalize_creates_closed_face():
    session = SketchSession(400, 400)
    session.start_creating_shape()
    face = _with_triangle(session)
    assert session.faces == [face]
    assert len(face.edges) == 3
    assert len(face.vertices()) == 3
    assert len(session.sketcher.vertices) == 3
    assert session.temp_points == []
    assert session.creating_shape is False


def test_finalize_shape_without_points_gives_empty_face():
    session = SketchSession(400, 400)
    face = session.finalize_shape()
    assert face.edges == []
    assert session.faces == [face]


def test_union_merges_last_two_faces():
    session = SketchSession(400, 400)
    first = _with_triangle(session)
    second = _with_triangle(session, offset=50)
    merged = session.apply_union()
    assert session.faces == [merged]
    assert merged.edges == first.edges + second.edges


def test_difference_drops_last_face():
    session = SketchSession(400, 400)
    first = _with_triangle(session)
    second = _with_triangle(session, offset=50)
    assert session.apply_difference() is second
    assert session.faces == [first]


def test_intersection_keeps_first_face_edges():
    session = SketchSession(400, 400)
    first = _with_triangle(session)
    _with_triangle(session, offset=50)
    result = session.apply_intersection()
    assert session.faces == [result]
    assert result.edges == first.edges


def test_operations_need_two_faces():
    session = SketchSession(400, 400)
    face = _with_triangle(session)
    assert session.apply_union() is None
    assert session.apply_difference() is None
    assert session.apply_intersection() is None
    assert session.faces == [face]


def test_invalid_size():
    with pytest.raises(ValueError):
        SketchSession(100, 0)