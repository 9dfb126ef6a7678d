"""Model, view and projection matrices and Euler/quaternion conversions."""

from __future__ import annotations

import math

from jungle_engine import matrix as _matrix
from jungle_engine.mathutil import PI
from jungle_engine.matrix import Matrix
from jungle_engine.quat import Quat, from_axis_angle
from jungle_engine.vector import Vector, Vector4


def convert_v3_to_v4(vec3: Vector) -> Vector4:
    """Extend a 3D vector to four components with a zero last component."""
    return Vector4(vec3.x, vec3.y, vec3.z)


def rad_to_deg(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * (180.0 / PI)


def deg_to_rad(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * (PI / 180.0)


def create_model_matrix(translation: Vector, rotation: Vector | Quat, scale: Vector) -> Matrix:
    """Build ``Scale * Rotation * Translation``.

    ``rotation`` is either Euler angles in degrees (roll, pitch, yaw as x, y, z)
    or a quaternion.
    """
    translation_m = _matrix.create_translation(translation)
    if isinstance(rotation, Quat):
        rotation_m = rotation.to_matrix()
    else:
        rotation_m = _matrix.create_rotation(rotation.x, rotation.y, rotation.z)
    scale_m = _matrix.create_scale(scale.x, scale.y, scale.z)
    return scale_m * rotation_m * translation_m


def create_view_matrix(eye: Vector, target: Vector, up: Vector) -> Matrix:
    """Left-handed look-at view matrix."""
    z_axis = (target - eye).normalize()
    x_axis = up.cross(z_axis).normalize()
    y_axis = z_axis.cross(x_axis)
    return Matrix(
        (
            (x_axis.x, y_axis.x, z_axis.x, 0.0),
            (x_axis.y, y_axis.y, z_axis.y, 0.0),
            (x_axis.z, y_axis.z, z_axis.z, 0.0),
            (-x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye), 1.0),
        )
    )


def create_projection_matrix(
    fov: float, aspect: float, near_plane: float, far_plane: float
) -> Matrix:
    """Left-handed perspective projection; ``fov`` is the vertical angle in radians."""
    tan_half_fov = math.tan(fov / 2.0)
    depth = far_plane - near_plane
    m00 = 1.0 / (aspect * tan_half_fov)
    m11 = 1.0 / tan_half_fov
    m22 = far_plane / depth
    m32 = -(near_plane * far_plane) / depth
    return Matrix(
        (
            (m00, 0.0, 0.0, 0.0),
            (0.0, m11, 0.0, 0.0),
            (0.0, 0.0, m22, 1.0),
            (0.0, 0.0, m32, 0.0),
        )
    )


def create_ortho_projection_matrix(
    width: float, height: float, near_plane: float, far_plane: float
) -> Matrix:
    """Left-handed orthographic projection centred on the view axis."""
    r = width * 0.5
    t = height * 0.5
    inv_depth = 1.0 / (far_plane - near_plane)
    return Matrix(
        (
            (1.0 / r, 0.0, 0.0, 0.0),
            (0.0, 1.0 / t, 0.0, 0.0),
            (0.0, 0.0, inv_depth, 0.0),
            (0.0, 0.0, -near_plane * inv_depth, 1.0),
        )
    )


def euler_to_quaternion(euler_degrees: Vector) -> Quat:
    """Quaternion from Euler angles in degrees (x roll, y pitch, z yaw)."""
    yaw = deg_to_rad(euler_degrees.z)
    pitch = deg_to_rad(euler_degrees.y)
    roll = deg_to_rad(euler_degrees.x)

    cos_yaw, sin_yaw = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
    cos_pitch, sin_pitch = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
    cos_roll, sin_roll = math.cos(roll * 0.5), math.sin(roll * 0.5)

    return Quat(
        w=cos_yaw * cos_pitch * cos_roll + sin_yaw * sin_pitch * sin_roll,
        x=cos_yaw * cos_pitch * sin_roll - sin_yaw * sin_pitch * cos_roll,
        y=cos_yaw * sin_pitch * cos_roll + sin_yaw * cos_pitch * sin_roll,
        z=sin_yaw * cos_pitch * cos_roll - cos_yaw * sin_pitch * sin_roll,
    )


def quaternion_to_euler(quat: Quat) -> Vector:
    """Euler angles in degrees (x roll, y pitch, z yaw) of a unit quaternion."""
    q = quat

    sin_yaw = 2.0 * (q.w * q.z + q.x * q.y)
    cos_yaw = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    yaw = rad_to_deg(math.atan2(sin_yaw, cos_yaw))

    sin_pitch = 2.0 * (q.w * q.y - q.z * q.x)
    if math.fabs(sin_pitch) >= 1.0:
        pitch = rad_to_deg(math.copysign(PI / 2, sin_pitch))
    else:
        pitch = rad_to_deg(math.asin(sin_pitch))

    sin_roll = 2.0 * (q.w * q.x + q.y * q.z)
    cos_roll = 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
    roll = rad_to_deg(math.atan2(sin_roll, cos_roll))

    return Vector(roll, pitch, yaw)


def rotate_vector(origin: Vector, rotation: Vector | Quat) -> Vector:
    """Rotate ``origin`` by a quaternion or by Euler angles in degrees."""
    if not isinstance(rotation, Quat):
        rotation = euler_to_quaternion(rotation)
    return rotation.rotate_vector(origin)


def create_rotation_matrix(rotation: Vector) -> Matrix:
    """Row-vector rotation matrix applying Z, then Y, then X rotations (degrees)."""
    quat_x = from_axis_angle(Vector(1.0, 0.0, 0.0), deg_to_rad(rotation.x))
    quat_y = from_axis_angle(Vector(0.0, 1.0, 0.0), deg_to_rad(rotation.y))
    quat_z = from_axis_angle(Vector(0.0, 0.0, 1.0), deg_to_rad(rotation.z))
    combined = (quat_x * quat_y * quat_z).normalize()
    return combined.to_matrix().transpose()