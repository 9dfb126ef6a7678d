"""Quaternions for rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from jungle_engine.matrix import Matrix
from jungle_engine.vector import Vector

_DEG_TO_RAD = 3.14159265359 / 180.0
_NORMALIZED_EPSILON = 1e-6


@dataclass(frozen=True, slots=True)
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def conjugate(self) -> Quat:
        """The conjugate quaternion."""
        return Quat(self.w, -self.x, -self.y, -self.z)

    def rotate_vector(self, vec: Vector) -> Vector:
        """Rotate ``vec`` by computing ``q * v * conj(q)``."""
        result = self * Quat(0.0, vec.x, vec.y, vec.z) * self.conjugate()
        return Vector(result.x, result.y, result.z)

    def is_normalized(self) -> bool:
        """Whether this is a unit quaternion."""
        norm_sq = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        return math.fabs(norm_sq - 1.0) < _NORMALIZED_EPSILON

    def normalize(self) -> Quat:
        """The unit quaternion in the same direction."""
        magnitude = math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)
        if magnitude == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quat(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def to_matrix(self) -> Matrix:
        """The rotation matrix of this quaternion."""
        w, x, y, z = self.w, self.x, self.y, self.z
        return Matrix(
            (
                (1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y), 0.0),
                (2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x), 0.0),
                (2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y), 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )


def from_axis_angle(axis: Vector, angle: float) -> Quat:
    """Quaternion rotating by ``angle`` radians about ``axis``."""
    half = angle * 0.5
    sin_half = math.sin(half)
    return Quat(math.cos(half), axis.x * sin_half, axis.y * sin_half, axis.z * sin_half)


def create_rotation(roll: float, pitch: float, yaw: float) -> Quat:
    """Quaternion from Euler angles in degrees, combined as ``roll * pitch * yaw``."""
    q_roll = from_axis_angle(Vector(1.0, 0.0, 0.0), roll * _DEG_TO_RAD)
    q_pitch = from_axis_angle(Vector(0.0, 1.0, 0.0), pitch * _DEG_TO_RAD)
    q_yaw = from_axis_angle(Vector(0.0, 0.0, 1.0), yaw * _DEG_TO_RAD)
    return q_roll * q_pitch * q_yaw