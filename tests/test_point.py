"""
Tests for the Point class.
"""

import pytest
import sys
import os
from fractions import Fraction

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from polyline.core.models.point import Point, EPSILON
from polyline.core.models.scalar import ScalarKind


class TestPointCreation:
    """Tests for Point creation."""

    def test_default_point_is_origin(self):
        """Both coordinates default to zero."""
        point = Point()

        assert point.x == 0
        assert point.y == 0

    def test_zero_uses_scalar_type(self):
        """Point.zero builds the origin from the scalar's zero value."""
        assert isinstance(Point.zero(float).x, float)
        assert isinstance(Point.zero(complex).y, complex)
        assert Point.zero(int) == Point(0, 0)

    def test_coerce(self):
        """Coercion converts both coordinates and returns a new point."""
        point = Point(1, 2)
        coerced = point.coerce(float)

        assert isinstance(coerced.x, float)
        assert isinstance(coerced.y, float)
        assert coerced is not point

    def test_unpacking(self):
        """Points unpack as (x, y)."""
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)

    def test_kind(self):
        """The widest coordinate kind wins."""
        assert Point(1, 2).kind is ScalarKind.INTEGER
        assert Point(1, 2.0).kind is ScalarKind.REAL
        assert Point(1j, 2.0).kind is ScalarKind.COMPLEX


class TestPointEquality:
    """Tests for Point comparison."""

    def test_integer_points_compare_exactly(self):
        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) != Point(1, 3)

    def test_float_within_tolerance(self):
        """A difference below 1e-5 is equal."""
        assert Point(1.0, 1.0) == Point(1.0 + 9e-6, 1.0)

    def test_float_outside_tolerance(self):
        """A difference above 1e-5 is not equal."""
        assert Point(1.0, 1.0) != Point(1.0 + 2e-5, 1.0)

    def test_tolerance_is_strict(self):
        """A difference of exactly epsilon is not equal."""
        assert not Point(0.0, 0.0).equals(Point(0.5, 0.0), epsilon=0.5)

    def test_complex_within_tolerance(self):
        """Complex coordinates compare by the modulus of their difference."""
        a = Point(1 + 1j, 2 - 1j)
        b = Point(1 + 1j + 5e-6j, 2 - 1j)

        assert a == b
        assert a != Point(1 + 1j + 1e-3, 2 - 1j)

    def test_custom_epsilon(self):
        assert Point(1.0, 1.0).equals(Point(1.05, 1.0), epsilon=0.1)
        assert Point(1.0, 1.0).not_equals(Point(1.05, 1.0), epsilon=0.01)

    def test_default_epsilon(self):
        assert EPSILON == 1e-5

    def test_exact_types_ignore_tolerance(self):
        """Fractions are exact, even for tiny differences."""
        a = Point(Fraction(1, 3), Fraction(0))
        b = Point(Fraction(1, 3) + Fraction(1, 10**9), Fraction(0))
        assert a != b

    def test_numpy_scalars(self):
        assert Point(np.float32(1.0), np.float32(2.0)) == Point(1.0, 2.0 + 1e-6)
        assert Point(np.int64(1), np.int64(2)) == Point(1, 2)

    def test_comparison_with_other_types(self):
        assert Point(1, 2) != (1, 2)

    def test_points_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(Point(1, 2))


class TestPointSerialization:
    """Tests for Point serialization/deserialization."""

    def test_to_dict(self):
        assert Point(1, 2.5).to_dict() == {"x": 1, "y": 2.5}

    def test_to_dict_complex(self):
        """Complex coordinates are split into real and imaginary parts."""
        data = Point(1 + 2j, 3.0).to_dict()

        assert data["x"] == {"real": 1.0, "imag": 2.0}
        assert data["y"] == 3.0

    def test_to_dict_numpy(self):
        """numpy scalars become builtin values."""
        data = Point(np.float64(1.5), np.int32(2)).to_dict()

        assert type(data["x"]) is float
        assert type(data["y"]) is int

    def test_from_dict(self):
        point = Point.from_dict({"x": {"real": 1.0, "imag": -1.0}, "y": 4})

        assert point.x == 1 - 1j
        assert point.y == 4

    def test_from_dict_missing_coordinate(self):
        with pytest.raises(KeyError):
            Point.from_dict({"x": 1})

    def test_from_dict_invalid_coordinate(self):
        with pytest.raises(ValueError, match="Invalid coordinate"):
            Point.from_dict({"x": "1", "y": 2})


class TestPointProperties:
    """Tests for Point string forms."""

    def test_str(self):
        assert str(Point(3, 3)) == "(3, 3)"

    def test_repr(self):
        assert repr(Point(1, 2.5)) == "Point(1, 2.5)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
