"""View frustum planes and visibility tests."""

from __future__ import annotations

import math
from dataclasses import dataclass

from jungle_engine.matrix import Matrix
from jungle_engine.vector import Vector


@dataclass(frozen=True, slots=True)
class Plane:
    """A plane ``a*x + b*y + c*z + d = 0``; its front side is where the value is positive."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    def is_in_front(self, point: Vector) -> bool:
        """Whether ``point`` lies strictly on the positive side of the plane."""
        return self.a * point.x + self.b * point.y + self.c * point.z + self.d > 0.0

    def normalized(self) -> Plane:
        """The same plane with a unit-length normal; a zero normal is left unchanged."""
        magnitude = math.sqrt(self.a * self.a + self.b * self.b + self.c * self.c)
        if magnitude > 0.0:
            return Plane(
                self.a / magnitude, self.b / magnitude, self.c / magnitude, self.d / magnitude
            )
        return self


def _column_plane(m: Matrix, column: int, sign: float) -> Plane:
    return Plane(
        m[0][3] + sign * m[0][column],
        m[1][3] + sign * m[1][column],
        m[2][3] + sign * m[2][column],
        m[3][3] + sign * m[3][column],
    ).normalized()


def _box_corners(box_min: Vector, box_max: Vector) -> tuple[Vector, ...]:
    return tuple(
        Vector(x, y, z)
        for z in (box_min.z, box_max.z)
        for y in (box_min.y, box_max.y)
        for x in (box_min.x, box_max.x)
    )


@dataclass(frozen=True, slots=True)
class Frustum:
    """The six planes bounding a camera's view volume, all facing inwards."""

    near: Plane = Plane()
    far: Plane = Plane()
    left: Plane = Plane()
    right: Plane = Plane()
    top: Plane = Plane()
    bottom: Plane = Plane()

    @classmethod
    def from_view_projection(cls, view_projection: Matrix) -> Frustum:
        """Extract the frustum planes from a row-vector view-projection matrix."""
        return cls(
            near=_column_plane(view_projection, 2, 1.0),
            far=_column_plane(view_projection, 2, -1.0),
            left=_column_plane(view_projection, 0, 1.0),
            right=_column_plane(view_projection, 0, -1.0),
            top=_column_plane(view_projection, 1, -1.0),
            bottom=_column_plane(view_projection, 1, 1.0),
        )

    @property
    def planes(self) -> tuple[Plane, ...]:
        """The planes in the order they are tested."""
        return (self.near, self.far, self.left, self.right, self.top, self.bottom)

    def intersects_box(self, box_min: Vector, box_max: Vector) -> bool:
        """Whether the axis-aligned box is not entirely behind any single plane."""
        corners = _box_corners(box_min, box_max)
        return all(
            any(plane.is_in_front(corner) for corner in corners) for plane in self.planes
        )

    def contains_point(self, point: Vector) -> bool:
        """Whether ``point`` is strictly in front of every plane."""
        return all(plane.is_in_front(point) for plane in self.planes)