import math

import pytest

from jungle_engine.frustum import Frustum, Plane
from jungle_engine.matrix import identity
from jungle_engine.transforms import create_projection_matrix, create_view_matrix
from jungle_engine.vector import Vector


@pytest.fixture
def unit_frustum():
    return Frustum.from_view_projection(identity())


@pytest.fixture
def camera_frustum():
    view = create_view_matrix(Vector(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0))
    projection = create_projection_matrix(math.pi / 2, 1.0, 1.0, 100.0)
    return Frustum.from_view_projection(view * projection)


def test_plane_in_front():
    plane = Plane(0.0, 0.0, 1.0, 0.0)
    assert plane.is_in_front(Vector(0.0, 0.0, 1.0))
    assert not plane.is_in_front(Vector(0.0, 0.0, -1.0))
    assert not plane.is_in_front(Vector(5.0, 5.0, 0.0))


def test_plane_normalized_has_unit_normal():
    plane = Plane(3.0, 0.0, 4.0, 10.0).normalized()
    assert math.isclose(math.sqrt(plane.a**2 + plane.b**2 + plane.c**2), 1.0)
    assert math.isclose(plane.d / plane.a, 10.0 / 3.0)


def test_plane_normalized_keeps_zero_plane():
    plane = Plane(0.0, 0.0, 0.0, 5.0)
    assert plane.normalized() == plane


def test_plane_normalized_preserves_sidedness():
    plane = Plane(2.0, -1.0, 0.5, 3.0)
    point = Vector(-4.0, 1.0, 2.0)
    assert plane.normalized().is_in_front(point) == plane.is_in_front(point)


def test_identity_frustum_planes_are_unit(unit_frustum):
    for plane in unit_frustum.planes:
        assert math.isclose(math.sqrt(plane.a**2 + plane.b**2 + plane.c**2), 1.0)


def test_identity_frustum_contains_origin(unit_frustum):
    assert unit_frustum.contains_point(Vector(0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "point",
    [
        Vector(2.0, 0.0, 0.0),
        Vector(-2.0, 0.0, 0.0),
        Vector(0.0, 2.0, 0.0),
        Vector(0.0, -2.0, 0.0),
        Vector(0.0, 0.0, 2.0),
        Vector(0.0, 0.0, -2.0),
    ],
)
def test_identity_frustum_excludes_outside_points(unit_frustum, point):
    assert not unit_frustum.contains_point(point)


def test_box_fully_outside(unit_frustum):
    assert not unit_frustum.intersects_box(Vector(2.0, -0.5, -0.5), Vector(3.0, 0.5, 0.5))


def test_box_straddling_boundary(unit_frustum):
    assert unit_frustum.intersects_box(Vector(0.5, -0.5, -0.5), Vector(3.0, 0.5, 0.5))


def test_box_enclosing_frustum(unit_frustum):
    assert unit_frustum.intersects_box(Vector(-10.0, -10.0, -10.0), Vector(10.0, 10.0, 10.0))


def test_camera_sees_point_ahead(camera_frustum):
    assert camera_frustum.contains_point(Vector(0.0, 0.0, 5.0))


def test_camera_does_not_see_behind(camera_frustum):
    assert not camera_frustum.contains_point(Vector(0.0, 0.0, -5.0))


def test_camera_does_not_see_beyond_far(camera_frustum):
    assert not camera_frustum.contains_point(Vector(0.0, 0.0, 200.0))


def test_camera_does_not_see_far_to_the_side(camera_frustum):
    assert not camera_frustum.contains_point(Vector(100.0, 0.0, 5.0))
    assert not camera_frustum.contains_point(Vector(0.0, -100.0, 5.0))


def test_camera_box_culling(camera_frustum):
    assert camera_frustum.intersects_box(Vector(-1.0, -1.0, 4.0), Vector(1.0, 1.0, 6.0))
    assert not camera_frustum.intersects_box(Vector(-1.0, -1.0, -6.0), Vector(1.0, 1.0, -4.0))


def test_contained_point_implies_box_intersection(camera_frustum):
    point = Vector(0.5, -0.5, 10.0)
    assert camera_frustum.contains_point(point)
    assert camera_frustum.intersects_box(point, point)