import pytest

from artyengine.circle import Circle
from artyengine.polygon import Polygon
from artyengine.vector import Vector2


def square(half=1.0):
    return [
        Vector2(-half, -half),
        Vector2(half, -half),
        Vector2(half, half),
        Vector2(-half, half),
    ]


NOTCHED = [
    Vector2(0.0, 0.0),
    Vector2(4.0, 0.0),
    Vector2(4.0, 4.0),
    Vector2(2.0, 2.0),
    Vector2(0.0, 4.0),
]


def placed(vertices, mean, degree=0.0, scale=Vector2.UNIT):
    poly = Polygon(vertices)
    poly.update_transform(mean, degree, scale)
    return poly


def test_simplify_drops_collinear_vertex_and_centres():
    points = [
        Vector2(0.0, 0.0),
        Vector2(1.0, 0.0),
        Vector2(2.0, 0.0),
        Vector2(2.0, 2.0),
        Vector2(0.0, 2.0),
    ]
    simplified = Polygon.simplify_vertices(points)
    assert len(simplified) == 4
    assert Polygon.arithmetic_mean(simplified).is_nearly_zero()


def test_simplify_needs_three_vertices():
    assert Polygon.simplify_vertices([Vector2.ZERO, Vector2(1.0, 1.0)]) == []


def test_arithmetic_mean_of_nothing_raises():
    with pytest.raises(ValueError):
        Polygon.arithmetic_mean([])


def test_convexity():
    assert Polygon.is_convex(square())
    assert not Polygon.is_convex(NOTCHED)
    assert not Polygon.is_convex(square()[:2])


def test_construction_flags():
    poly = Polygon(NOTCHED)
    assert poly.valid
    assert not poly.convex
    assert Polygon.arithmetic_mean(poly.init_vertices).is_nearly_zero()
    empty = Polygon()
    assert not empty.valid
    assert empty.convex


def test_translation_places_vertices():
    poly = placed(square(), Vector2(5.0, 5.0))
    assert poly.vertices == [v + Vector2(5.0, 5.0) for v in poly.init_vertices]
    assert poly.mean == Vector2(5.0, 5.0)


def test_rotation_and_scale_keep_shape():
    mean = Vector2(3.0, -2.0)
    poly = placed(square(), mean, 90.0, Vector2(2.0, 2.0))
    for vertex, init in zip(poly.vertices, poly.init_vertices):
        assert Vector2.distance(vertex, mean) == pytest.approx(2.0 * init.size())


def test_extents():
    box = placed(square(), Vector2(5.0, 5.0)).extents()
    assert box.center.equals(Vector2(5.0, 5.0))
    assert box.size.equals(Vector2(2.0, 2.0))


def test_extents_without_vertices_raise():
    with pytest.raises(ValueError):
        Polygon().extents()


def test_contains_square():
    poly = placed(square(), Vector2.ZERO)
    assert poly.contains(Vector2(0.2, 0.3))
    assert not poly.contains(Vector2(3.0, 0.0))
    assert not poly.contains(Vector2(0.0, 3.0))


def test_contains_respects_notch():
    poly = placed(NOTCHED, Polygon.arithmetic_mean(NOTCHED))
    assert poly.contains(Vector2(1.0, 1.0))
    assert not poly.contains(Vector2(2.0, 3.0))


def test_invalid_polygon_contains_nothing():
    assert not Polygon().contains(Vector2.ZERO)


def test_convex_polygons_overlap():
    first = placed(square(), Vector2.ZERO)
    second = placed(square(), Vector2(1.0, 0.0))
    contact = first.intersects_polygon(second)
    assert contact is not None
    assert contact.depth == pytest.approx(1.0)
    assert contact.normal.dot(second.mean - first.mean) > 0


def test_convex_polygons_apart():
    first = placed(square(), Vector2.ZERO)
    second = placed(square(), Vector2(5.0, 0.0))
    assert first.intersects_polygon(second) is None


def test_concave_polygon_reports_inner_vertex():
    notched = placed(NOTCHED, Polygon.arithmetic_mean(NOTCHED))
    small = placed(square(0.25), Vector2(1.0, 1.0))
    contact = notched.intersects_polygon(small)
    assert contact is not None
    assert contact.point in small.vertices
    assert notched.contains(contact.point)
    assert contact.depth > 0


def test_concave_polygon_far_away():
    notched = placed(NOTCHED, Polygon.arithmetic_mean(NOTCHED))
    far = placed(square(0.25), Vector2(20.0, 20.0))
    assert notched.intersects_polygon(far) is None


def test_circle_overlap():
    poly = placed(square(), Vector2.ZERO)
    circle = Circle(Vector2(1.5, 0.0), 1.0)
    contact = poly.intersects_circle(circle)
    assert contact is not None
    assert contact.depth > 0
    assert contact.normal.dot(circle.center - poly.mean) > 0


def test_circle_apart():
    poly = placed(square(), Vector2.ZERO)
    assert poly.intersects_circle(Circle(Vector2(5.0, 0.0), 1.0)) is None