"""Direction helpers for 2D movement vectors."""

from __future__ import annotations

import math
from typing import Optional, Tuple

Vector = Tuple[float, float]

# Upper bound of each 45 degree sector and the direction index it maps to.
_SECTORS = (
    (67.5, 0),
    (112.5, 1),
    (157.5, 2),
    (202.5, 3),
    (247.5, 4),
    (292.5, 5),
    (337.5, 6),
)


def get_vec_dir(vector: Vector) -> Optional[int]:
    """Map a vector to one of eight direction indices (0-7).

    Returns None for the zero vector or a vector that has no angle.
    """
    dx, dy = vector
    if dx == 0 and dy == 0:
        return None

    angle = math.degrees(math.atan2(dy, dx))
    if angle < 0:
        angle += 360.0

    if 0.0 <= angle <= 22.5 or 337.5 <= angle <= 360.0:
        return 7
    for upper, direction in _SECTORS:
        if upper - 45.0 <= angle <= upper:
            return direction
    return None


def get_vec(start: Tuple[float, float], end: Tuple[float, float]) -> Vector:
    """Return the vector from ``start`` to ``end`` as floats."""
    return (float(end[0]) - float(start[0]), float(end[1]) - float(start[1]))