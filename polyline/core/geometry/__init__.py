"""Geometry helpers for polylines (numpy based)."""

from .length import vertex_array, segment_lengths, polyline_length
from .shapes import half, h_shape_points
from .sampling import make_rng, real_bounds, uniform_coordinates

__all__ = [
    "vertex_array",
    "segment_lengths",
    "polyline_length",
    "half",
    "h_shape_points",
    "make_rng",
    "real_bounds",
    "uniform_coordinates",
]
