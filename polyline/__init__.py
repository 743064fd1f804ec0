"""
Polyline - 2D points and polylines over integer, real and complex scalars

Conventions:
- Coordinates: (x, y), both of the line's scalar type
- Equality: exact for integers, absolute tolerance 1e-5 for real/complex
- Length: Euclidean over doubles, or complex-difference modulus for complex
- Lines are never empty and never change size in place
"""

__version__ = "1.0.0"

from .core.models import Point, Line, ScalarKind, GeometryOptions, EPSILON
from .core.reports import render_line, render_summary

__all__ = [
    # Version
    "__version__",

    # Models
    "Point",
    "Line",
    "ScalarKind",
    "GeometryOptions",
    "EPSILON",

    # Reports
    "render_line",
    "render_summary",
]
