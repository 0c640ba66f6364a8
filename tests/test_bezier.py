import pytest

from shapekit.bezier import Bezier, de_casteljau


def test_de_casteljau_endpoints_are_control_endpoints():
    pts = [(1.0, 2.0), (3.0, 7.0), (-4.0, 5.0)]
    assert de_casteljau(pts, 0.0) == pytest.approx((1.0, 2.0))
    assert de_casteljau(pts, 1.0) == pytest.approx((-4.0, 5.0))


def test_de_casteljau_single_point():
    assert de_casteljau([(2.5, -1.5)], 0.3) == (2.5, -1.5)


def test_de_casteljau_empty_raises():
    with pytest.raises(ValueError):
        de_casteljau([], 0.5)


def test_symmetric_curve_is_centred_at_half():
    curve = Bezier([(-1.0, 0.0), (0.0, 2.0), (1.0, 0.0)], 10)
    x, _ = curve.evaluate(0.5)
    assert x == pytest.approx(0.0)


def test_curve_points_count_and_ends():
    curve = Bezier([(0, 0), (1, 3), (2, -1), (4, 0)], 25)
    assert len(curve.curve_points) == 26
    assert curve.curve_points[0] == pytest.approx((0, 0))
    assert curve.curve_points[-1] == pytest.approx((4, 0))


def test_invalid_construction():
    with pytest.raises(ValueError):
        Bezier([], 10)
    with pytest.raises(ValueError):
        Bezier([(0, 0), (1, 1)], 0)


def test_update_control_point_recomputes_curve():
    curve = Bezier([(0, 0), (1, 1)], 10)
    assert curve.update_control_point(1, (5, -2)) is True
    assert curve.control_points[1] == (5.0, -2.0)
    assert curve.curve_points[-1] == pytest.approx((5, -2))


def test_update_control_point_out_of_range():
    curve = Bezier([(0, 0), (1, 1)], 10)
    before = list(curve.curve_points)
    assert curve.update_control_point(2, (9, 9)) is False
    assert curve.update_control_point(-1, (9, 9)) is False
    assert curve.curve_points == before


def test_find_control_point():
    curve = Bezier([(0, 0), (3, 3)], 10)
    assert curve.find_control_point((3.1, 2.9), 0.5) == 1
    assert curve.find_control_point((1.5, 1.5), 0.5) is None
    assert curve.find_control_point((1.5, 1.5)) == 0


def test_evaluate_points_matches_evaluate():
    curve = Bezier([(0, 0), (1, 2), (3, 1)], 5)
    pts = curve.evaluate_points(8)
    assert len(pts) == 9
    assert pts[0] == curve.evaluate(0.0)
    assert pts[4] == pytest.approx(curve.evaluate(0.5))
    with pytest.raises(ValueError):
        curve.evaluate_points(0)


def test_crossing_lines_intersect_near_origin():
    vertical = Bezier([(0, -1), (0, 1)], 10)
    horizontal = Bezier([(-1, 0), (1, 0)], 10)
    hits = vertical.find_intersections(horizontal)
    assert hits
    assert all(x == pytest.approx(0.0) and abs(y) < 0.05 for x, y in hits)


def test_distant_curves_do_not_intersect():
    a = Bezier([(0, 0), (1, 0)], 10)
    b = Bezier([(0, 5), (1, 5)], 10)
    assert a.find_intersections(b) == []