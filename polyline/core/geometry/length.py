"""Arc-length computation for polylines.

Segment lengths follow the scalar kind of the line:
- INTEGER / REAL: Euclidean distance over coordinates converted to double
- COMPLEX: modulus of the complex difference vector, sqrt(|dx|^2 + |dy|^2)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..models.point import Point
from ..models.scalar import ScalarKind


def vertex_array(points: Sequence[Point], kind: ScalarKind) -> np.ndarray:
    """Stack vertices into an ``(n, 2)`` array (complex128 or float64)."""
    dtype = np.complex128 if kind is ScalarKind.COMPLEX else np.float64
    return np.array([(p.x, p.y) for p in points], dtype=dtype).reshape(-1, 2)


def segment_lengths(points: Sequence[Point], kind: ScalarKind) -> np.ndarray:
    """
    Lengths of the segments between consecutive vertices.

    Args:
        points: Ordered vertices
        kind: Scalar kind of the coordinates

    Returns:
        Float array with ``len(points) - 1`` entries (empty for fewer than
        two points)
    """
    if len(points) < 2:
        return np.zeros(0, dtype=float)

    deltas = np.diff(vertex_array(points, kind), axis=0)

    if kind is ScalarKind.COMPLEX:
        return np.sqrt(np.sum(np.abs(deltas) ** 2, axis=1))
    return np.sqrt(deltas[:, 0] * deltas[:, 0] + deltas[:, 1] * deltas[:, 1])


def polyline_length(points: Sequence[Point], kind: ScalarKind) -> float:
    """Total arc length; 0.0 for a single point."""
    return float(np.sum(segment_lengths(points, kind)))
