import math

import pytest

from jungle_engine.matrix import identity
from jungle_engine.quat import Quat, create_rotation, from_axis_angle
from jungle_engine.vector import Vector


def flat(m):
    return [v for row in m for v in row]


def as_tuple(v):
    return (v.x, v.y, v.z)


def test_default_is_identity():
    q = Quat()
    assert (q.w, q.x, q.y, q.z) == (1.0, 0.0, 0.0, 0.0)
    assert q.is_normalized()


def test_identity_multiplication_is_neutral():
    q = Quat(0.5, 0.1, -0.3, 0.7)
    assert Quat() * q == q
    assert q * Quat() == q


def test_identity_rotation_keeps_vector():
    v = Vector(1.0, 2.0, 3.0)
    assert as_tuple(Quat().rotate_vector(v)) == pytest.approx(as_tuple(v))


def test_quarter_turn_about_up():
    q = from_axis_angle(Vector.UP, math.pi / 2)
    assert as_tuple(q.rotate_vector(Vector.FORWARD)) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_rotation_preserves_length():
    q = from_axis_angle(Vector(1.0, 2.0, 2.0).normalize(), 1.1)
    v = Vector(3.0, -4.0, 5.0)
    assert q.rotate_vector(v).magnitude() == pytest.approx(v.magnitude())


def test_same_axis_angles_add():
    axis = Vector(0.0, 1.0, 0.0)
    combined = from_axis_angle(axis, 0.4) * from_axis_angle(axis, 0.9)
    expected = from_axis_angle(axis, 1.3)
    assert (combined.w, combined.x, combined.y, combined.z) == pytest.approx(
        (expected.w, expected.x, expected.y, expected.z)
    )


def test_normalize_produces_unit():
    q = Quat(2.0, 1.0, -3.0, 0.5).normalize()
    assert q.is_normalized()
    assert not Quat(2.0, 1.0, -3.0, 0.5).is_normalized()


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        Quat(0.0, 0.0, 0.0, 0.0).normalize()


def test_identity_to_matrix():
    assert Quat().to_matrix() == identity()


def test_to_matrix_is_orthogonal():
    m = create_rotation(20.0, 35.0, 50.0).to_matrix()
    assert flat(m * m.transpose()) == pytest.approx(flat(identity()), abs=1e-9)
    assert m.determinant() == pytest.approx(1.0)


def test_to_matrix_agrees_with_inverse_rotation_for_row_vectors():
    q = from_axis_angle(Vector(0.0, 0.6, 0.8), 0.7)
    v = Vector(1.0, -2.0, 0.5)
    via_matrix = q.to_matrix().transform_vector(v)
    via_conjugate = q.conjugate().rotate_vector(v)
    assert as_tuple(via_matrix) == pytest.approx(as_tuple(via_conjugate))


def test_create_rotation_single_axis_matches_axis_angle():
    q = create_rotation(0.0, 0.0, 90.0)
    expected = from_axis_angle(Vector.UP, math.radians(90.0))
    assert (q.w, q.x, q.y, q.z) == pytest.approx(
        (expected.w, expected.x, expected.y, expected.z), abs=1e-9
    )


def test_create_rotation_composition_order():
    q = create_rotation(10.0, 20.0, 30.0)
    expected = (
        create_rotation(10.0, 0.0, 0.0)
        * create_rotation(0.0, 20.0, 0.0)
        * create_rotation(0.0, 0.0, 30.0)
    )
    assert (q.w, q.x, q.y, q.z) == pytest.approx((expected.w, expected.x, expected.y, expected.z))
    assert q.is_normalized()