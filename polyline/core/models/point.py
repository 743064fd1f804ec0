"""
Point class for polyline geometry.

Conventions:
- Coordinates: x (abscissa), y (ordinate)
- Scalar type: int, float, complex or a numpy/numbers equivalent
- Equality: tolerant (absolute, EPSILON) for real and complex coordinates,
  exact for everything else
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator

import numpy as np

from .scalar import ScalarKind, widest_kind

# Absolute tolerance for comparing real and complex coordinates
EPSILON = 1e-5


@dataclass(eq=False)
class Point:
    """
    A 2D coordinate pair.

    Points are plain values: a Line copies every point it takes in, so
    mutating a point you still hold never changes a line.

    Attributes:
        x: First coordinate
        y: Second coordinate
    """

    x: Any = 0
    y: Any = 0

    @classmethod
    def zero(cls, scalar: type = int) -> 'Point':
        """Create the origin using the zero value of ``scalar``."""
        return cls(scalar(), scalar())

    @property
    def kind(self) -> ScalarKind:
        """Widest scalar kind of the two coordinates."""
        return widest_kind((self.x, self.y))

    def equals(self, other: 'Point', epsilon: float = EPSILON) -> bool:
        """
        Compare two points coordinate by coordinate.

        If either point holds a real or complex coordinate, each pair of
        coordinates must differ by strictly less than ``epsilon``. Otherwise
        coordinates must be exactly equal.

        Args:
            other: Point to compare with
            epsilon: Absolute tolerance for inexact coordinates

        Returns:
            True if both coordinates match
        """
        if self.kind.is_inexact or other.kind.is_inexact:
            return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon
        return self.x == other.x and self.y == other.y

    def not_equals(self, other: 'Point', epsilon: float = EPSILON) -> bool:
        return not self.equals(other, epsilon)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self.equals(other)

    # Tolerant equality is not transitive, so points cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def coerce(self, scalar: type) -> 'Point':
        """Return a new point with both coordinates converted to ``scalar``."""
        return Point(scalar(self.x), scalar(self.y))

    def copy(self) -> 'Point':
        return Point(self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Complex coordinates are written as ``{"real": .., "imag": ..}``.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "x": _encode_scalar(self.x),
            "y": _encode_scalar(self.y),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Point':
        """
        Create a Point from a dictionary.

        Args:
            data: Dictionary with ``x`` and ``y`` entries

        Returns:
            New Point instance

        Raises:
            KeyError: If a coordinate is missing
            ValueError: If a coordinate cannot be decoded
        """
        return cls(
            x=_decode_scalar(data["x"]),
            y=_decode_scalar(data["y"]),
        )

    def __repr__(self) -> str:
        """Return string representation of the point."""
        return f"Point({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _encode_scalar(value: Any) -> Any:
    """Convert a coordinate to a JSON-safe value."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, complex):
        return {"real": value.real, "imag": value.imag}
    return value


def _decode_scalar(value: Any) -> Any:
    """Inverse of :func:`_encode_scalar`."""
    if isinstance(value, dict):
        try:
            return complex(float(value["real"]), float(value["imag"]))
        except KeyError as e:
            raise ValueError(f"Invalid complex coordinate: {value}") from e
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid coordinate: {value!r}")
    return value
