"""
Data models for polyline geometry.

This module provides the core data structures:
- ScalarKind: Integer / real / complex classification of coordinate types
- Point: 2D coordinate pair with tolerant equality
- Line: Fixed-size polyline of points
- GeometryOptions: Configuration for comparison, sampling and reporting
"""

from .scalar import ScalarKind, infer_scalar, wider_scalar, widest_kind
from .point import Point, EPSILON
from .line import Line
from .options import GeometryOptions

__all__ = [
    # Scalars
    "ScalarKind",
    "infer_scalar",
    "wider_scalar",
    "widest_kind",

    # Point
    "Point",
    "EPSILON",

    # Line
    "Line",

    # Options
    "GeometryOptions",
]
