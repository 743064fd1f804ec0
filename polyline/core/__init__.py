"""
Core module for polyline geometry.

Models are imported before the geometry helpers they are built on; the
helpers only reach back into ``models.point`` and ``models.scalar``.
"""

from .models import (
    ScalarKind,
    Point,
    Line,
    GeometryOptions,
    EPSILON,
)

from .geometry import (
    segment_lengths,
    polyline_length,
    h_shape_points,
    make_rng,
    uniform_coordinates,
)

from .reports import render_line, render_summary

__all__ = [
    # Models
    "ScalarKind",
    "Point",
    "Line",
    "GeometryOptions",
    "EPSILON",

    # Geometry
    "segment_lengths",
    "polyline_length",
    "h_shape_points",
    "make_rng",
    "uniform_coordinates",

    # Reports
    "render_line",
    "render_summary",
]
