"""Scalar math helpers used throughout the engine."""

from __future__ import annotations

import math

PI = 3.1415926535897932
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4
PI_DOUBLE = math.pi


def clamp(x, min_value, max_value):
    """Clamp ``x`` into ``[min_value, max_value]``; ``min_value`` wins if the bounds cross."""
    upper_bounded = x if x < max_value else max_value
    return upper_bounded if min_value < upper_bounded else min_value


def lerp(a, b, alpha):
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(rad_val):
    """Convert radians to degrees."""
    return rad_val * (180.0 / PI_DOUBLE)


def degrees_to_radians(deg_val):
    """Convert degrees to radians."""
    return deg_val * (PI_DOUBLE / 180.0)


def ceil_to_int(value) -> int:
    """Round ``value`` up to the nearest integer."""
    return int(math.ceil(value))


def sin_cos(value) -> tuple[float, float]:
    """Return ``(sin(value), cos(value))``."""
    return math.sin(value), math.cos(value)


def unwind_degrees(a: float) -> float:
    """Bring an angle in degrees into the range ``[-180, 180]``."""
    if not math.isfinite(a):
        raise ValueError(f"cannot unwind a non-finite angle: {a!r}")
    if a > 180.0:
        a -= 360.0 * math.ceil((a - 180.0) / 360.0)
    elif a < -180.0:
        a += 360.0 * math.ceil((-180.0 - a) / 360.0)
    return a