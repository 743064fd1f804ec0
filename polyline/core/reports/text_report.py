"""Plain-text rendering of polylines.

Produces the ``Line with N points:`` listing used by ``str(Line)`` plus a
summary block with the line's length, optionally at a fixed precision.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..models.line import Line


def format_scalar(value: Any, precision: Optional[int] = None) -> str:
    """Format one coordinate; only real and complex values honour ``precision``."""
    if precision is None or isinstance(value, (bool, int, np.integer)):
        return str(value)
    if isinstance(value, (complex, np.complexfloating)):
        return f"({value.real:.{precision}f}{value.imag:+.{precision}f}j)"
    if isinstance(value, (float, np.floating)):
        return f"{value:.{precision}f}"
    return str(value)


def format_length(value: float, precision: Optional[int] = None) -> str:
    """Format a length; six significant digits without a precision."""
    if precision is None:
        return f"{value:g}"
    return f"{value:.{precision}f}"


def render_line(line: Line, precision: Optional[int] = None) -> str:
    """Render a line as a header plus one ``(x, y)`` row per vertex."""
    if precision is None:
        return str(line)

    rows = [f"Line with {len(line)} points:"]
    for p in line:
        rows.append(f"({format_scalar(p.x, precision)}, {format_scalar(p.y, precision)})")
    return "\n".join(rows) + "\n"


def render_summary(
    line: Line,
    title: str | None = None,
    precision: Optional[int] = None,
    length_label: str = "Length",
) -> str:
    """Render a titled listing of ``line`` followed by its length."""
    out = []
    if title:
        out.append(f"{title}\n")
    out.append(render_line(line, precision))
    out.append("\n")
    out.append(f"{length_label}: {format_length(line.length(), precision)}\n")
    return "".join(out)
