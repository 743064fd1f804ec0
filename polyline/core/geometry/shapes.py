"""Fixed-topology polyline shapes."""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np


def half(value: Any) -> Any:
    """Halve a coordinate; integers truncate toward zero."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        q = abs(value) // 2
        return q if value >= 0 else -q
    return value / 2


def h_shape_points(width: Any, height: Any) -> List[Tuple[Any, Any]]:
    """
    Vertices of an "H" drawn as a single polyline.

    Left leg bottom to top, diagonal down to the centre, diagonal up to the
    top right, right leg down:

        (0, 0), (0, h), (w/2, h/2), (w, h), (w, 0)
    """
    return [
        (0, 0),
        (0, height),
        (half(width), half(height)),
        (width, height),
        (width, 0),
    ]
