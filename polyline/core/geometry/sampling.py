"""Uniform coordinate sampling for random polylines.

Only the real parts of the two bounds are used, and the same range serves
both axes.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build a generator; ``seed=None`` seeds from system entropy."""
    return np.random.default_rng(seed)


def real_bounds(m1: Any, m2: Any) -> tuple[float, float]:
    """Return ``(min, max)`` of the real parts of two bounds."""
    a = float(np.real(m1))
    b = float(np.real(m2))
    return min(a, b), max(a, b)


def uniform_coordinates(
    m1: Any,
    m2: Any,
    n: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Draw ``n`` coordinate pairs uniformly from ``[low, high)``.

    Args:
        m1: First bound (real part used)
        m2: Second bound (real part used)
        n: Number of pairs
        rng: Generator to draw from, a fresh entropy-seeded one if None

    Returns:
        Float array of shape ``(n, 2)``, draws taken row by row (x then y)
    """
    if rng is None:
        rng = make_rng()

    low, high = real_bounds(m1, m2)
    logger.debug("Drawing %d points from [%g, %g)", n, low, high)

    if low == high:
        return np.full((n, 2), low, dtype=float)
    return rng.uniform(low, high, size=(n, 2))
