"""4x4 row-major matrices for row-vector transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator

from jungle_engine.vector import Vector, Vector4

Row = tuple[float, float, float, float]

_ZERO_ROWS: tuple[Row, ...] = ((0.0, 0.0, 0.0, 0.0),) * 4
_SINGULAR_EPSILON = 1e-6
_W_EPSILON = 1e-6
_DEG_TO_RAD = 3.14159265359 / 180.0


def _det3(m: list[list[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def _minor(rows: tuple[Row, ...], skip_row: int, skip_col: int) -> float:
    sub = [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]
    return _det3(sub)


@dataclass(frozen=True, slots=True)
class Matrix:
    """An immutable 4x4 matrix; vectors are treated as rows (``v * M``)."""

    rows: tuple[Row, ...] = _ZERO_ROWS

    IDENTITY: ClassVar[Matrix]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a matrix needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from any iterable of four rows."""
        return cls(tuple(tuple(row) for row in rows))

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            tuple(tuple(a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows))
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(
            tuple(tuple(a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows))
        )

    def __mul__(self, other):
        if isinstance(other, Matrix):
            columns = list(zip(*other.rows))
            return Matrix(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                    for row in self.rows
                )
            )
        if isinstance(other, (int, float)):
            return Matrix(tuple(tuple(v * other for v in row) for row in self.rows))
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, (int, float)):
            return self * scalar
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self * (1.0 / scalar)

    def __getitem__(self, row: int) -> Row:
        return self.rows[row]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        return Matrix(tuple(zip(*self.rows)))

    def determinant(self) -> float:
        """The determinant, by cofactor expansion along the first row."""
        return sum(
            (-1.0 if col % 2 else 1.0) * value * _minor(self.rows, 0, col)
            for col, value in enumerate(self.rows[0])
        )

    def inverse(self) -> Matrix:
        """The inverse matrix; the identity if the matrix is (nearly) singular."""
        det = self.determinant()
        if abs(det) < _SINGULAR_EPSILON:
            return identity()
        inv_det = 1.0 / det
        return Matrix(
            tuple(
                tuple(
                    (1.0 if (i + j) % 2 == 0 else -1.0) * _minor(self.rows, i, j) * inv_det
                    for i in range(4)
                )
                for j in range(4)
            )
        )

    def _transform(self, components: tuple[float, float, float, float]) -> list[float]:
        return [sum(c * row[k] for c, row in zip(components, self.rows)) for k in range(4)]

    def transform_vector(self, v: Vector) -> Vector:
        """Transform a point as a row vector with ``w = 1`` (no perspective divide)."""
        x, y, z, _ = self._transform((v.x, v.y, v.z, 1.0))
        return Vector(x, y, z)

    def transform_vector4(self, v: Vector4) -> Vector4:
        """Transform a four-component row vector."""
        return Vector4(*self._transform((v.x, v.y, v.z, v.a)))

    def transform_position(self, vector: Vector) -> Vector:
        """Transform a point with ``w = 1`` and divide by the resulting ``w`` when non-zero."""
        x, y, z, w = self._transform((vector.x, vector.y, vector.z, 1.0))
        if math.fabs(w) > _W_EPSILON:
            return Vector(x / w, y / w, z / w)
        return Vector(x, y, z)


Matrix.IDENTITY = Matrix(
    (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
)


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return Matrix.IDENTITY


def create_rotation(roll: float, pitch: float, yaw: float) -> Matrix:
    """Rotation from Euler angles in degrees, combined as ``X(roll) * Y(pitch) * Z(yaw)``."""
    rad_roll = roll * _DEG_TO_RAD
    rad_pitch = pitch * _DEG_TO_RAD
    rad_yaw = yaw * _DEG_TO_RAD
    cos_r, sin_r = math.cos(rad_roll), math.sin(rad_roll)
    cos_p, sin_p = math.cos(rad_pitch), math.sin(rad_pitch)
    cos_y, sin_y = math.cos(rad_yaw), math.sin(rad_yaw)

    rotation_z = Matrix(
        (
            (cos_y, sin_y, 0.0, 0.0),
            (-sin_y, cos_y, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    rotation_y = Matrix(
        (
            (cos_p, 0.0, -sin_p, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (sin_p, 0.0, cos_p, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    rotation_x = Matrix(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, cos_r, sin_r, 0.0),
            (0.0, -sin_r, cos_r, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    return rotation_x * rotation_y * rotation_z


def create_scale(scale_x: float, scale_y: float, scale_z: float) -> Matrix:
    """Axis-aligned scale matrix."""
    return Matrix(
        (
            (scale_x, 0.0, 0.0, 0.0),
            (0.0, scale_y, 0.0, 0.0),
            (0.0, 0.0, scale_z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )


def create_translation(position: Vector) -> Matrix:
    """Translation matrix with the offset in the last row."""
    return Matrix(
        (
            (1.0, 0.0, 0.0, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (0.0, 0.0, 1.0, 0.0),
            (position.x, position.y, position.z, 1.0),
        )
    )