"""
Line (polyline) class.

A Line owns a fixed-size, ordered sequence of Point vertices. The size never
changes after construction: concatenation, appending and prepending all
return a new Line.

Conventions:
- Every Line has at least one vertex
- Vertices are copied on the way in and coerced to the line's scalar type
- Indexing returns the stored vertex, so ``line[i].x = ...`` edits the line
"""

import logging
import operator
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .point import Point, EPSILON
from .scalar import ScalarKind, infer_scalar, wider_scalar
from ..geometry.length import polyline_length, segment_lengths
from ..geometry.sampling import uniform_coordinates
from ..geometry.shapes import h_shape_points

logger = logging.getLogger(__name__)

PointLike = Union[Point, Tuple[Any, Any]]


class Line:
    """
    Polyline over a scalar coordinate type.

    Attributes:
        scalar: Coordinate type every vertex is coerced to
        kind: ScalarKind of ``scalar``, selects equality and length policy
    """

    def __init__(self, points: Iterable[PointLike], scalar: Optional[type] = None):
        """
        Build a line from points, copying them in order.

        Passing another Line makes a copy of it.

        Args:
            points: Points or ``(x, y)`` pairs
            scalar: Coordinate type; inferred from the points if None

        Raises:
            ValueError: If no points are given
        """
        vertices = [_as_point(p) for p in points]
        _check_count(len(vertices))

        if scalar is None:
            if isinstance(points, Line):
                scalar = points.scalar
            else:
                scalar = infer_scalar(c for p in vertices for c in p)

        self._scalar = scalar
        self._vertices: List[Point] = [p.coerce(scalar) for p in vertices]

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def sized(cls, n: int, scalar: type = int) -> 'Line':
        """Create a line of ``n`` default-valued points."""
        _check_count(n)
        return cls._adopt([Point.zero(scalar) for _ in range(n)], scalar)

    @classmethod
    def random(
        cls,
        m1: Any,
        m2: Any,
        n: int,
        scalar: Optional[type] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> 'Line':
        """
        Create a line of ``n`` random points.

        Both coordinates of every point are drawn independently from the
        uniform range ``[min(real(m1), real(m2)), max(real(m1), real(m2)))``
        and converted back to the scalar type (ints truncate toward zero).

        Args:
            m1: First range bound
            m2: Second range bound
            n: Number of points
            scalar: Coordinate type, inferred from the bounds if None
            rng: numpy Generator; a fresh entropy-seeded one if None

        Raises:
            ValueError: If ``n`` is not positive
        """
        _check_count(n)
        if scalar is None:
            scalar = infer_scalar((m1, m2))

        draws = uniform_coordinates(m1, m2, n, rng)
        vertices = [Point(scalar(x), scalar(y)) for x, y in draws]
        logger.debug("Created random line with %d points (%s)", n, scalar.__name__)
        return cls._adopt(vertices, scalar)

    @classmethod
    def h_shape(cls, width: Any, height: Any, scalar: Optional[type] = None) -> 'Line':
        """
        Create the 5-point "H" polyline.

        Returns:
            Line through (0, 0), (0, height), (width/2, height/2),
            (width, height), (width, 0)
        """
        if scalar is None:
            scalar = infer_scalar((width, height))
        else:
            width, height = scalar(width), scalar(height)
        return cls(h_shape_points(width, height), scalar)

    @classmethod
    def _adopt(cls, vertices: List[Point], scalar: type) -> 'Line':
        """Wrap an already-owned vertex list without copying."""
        line = cls.__new__(cls)
        line._scalar = scalar
        line._vertices = vertices
        return line

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def scalar(self) -> type:
        return self._scalar

    @property
    def kind(self) -> ScalarKind:
        return ScalarKind.of(self._scalar)

    @property
    def size(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """Snapshot of the vertices (copies)."""
        return tuple(p.copy() for p in self._vertices)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._vertices)

    def __getitem__(self, index):
        """
        Indexed access.

        An integer index returns the stored point; a slice returns a new Line.

        Raises:
            IndexError: If the index is out of range
            ValueError: If a slice selects no points
        """
        if isinstance(index, slice):
            selected = [p.copy() for p in self._vertices[index]]
            _check_count(len(selected))
            return Line._adopt(selected, self._scalar)
        return self._vertices[self._checked_index(index)]

    def __setitem__(self, index, point: PointLike) -> None:
        """Replace the vertex at ``index`` (coerced to the line's scalar)."""
        i = self._checked_index(index)
        self._vertices[i] = _as_point(point).coerce(self._scalar)

    def _checked_index(self, index) -> int:
        i = operator.index(index)
        n = len(self._vertices)
        if i >= n or i < -n:
            raise IndexError("Index out of range.")
        return i

    # ------------------------------------------------------------------
    # Concatenation
    # ------------------------------------------------------------------

    def __add__(self, other):
        """``line + line`` concatenates, ``line + point`` appends."""
        if isinstance(other, Line):
            scalar = wider_scalar(self._scalar, other._scalar)
            vertices = self._vertices + other._vertices
        elif isinstance(other, Point):
            scalar = wider_scalar(self._scalar, infer_scalar(other))
            vertices = self._vertices + [other]
        else:
            return NotImplemented
        return Line._adopt([p.coerce(scalar) for p in vertices], scalar)

    def __radd__(self, other):
        """``point + line`` prepends."""
        if not isinstance(other, Point):
            return NotImplemented
        scalar = wider_scalar(self._scalar, infer_scalar(other))
        return Line._adopt([p.coerce(scalar) for p in [other] + self._vertices], scalar)

    # ------------------------------------------------------------------
    # Measurement
    # ------------------------------------------------------------------

    def length(self) -> float:
        """Sum of the distances between consecutive vertices."""
        return polyline_length(self._vertices, self.kind)

    def segment_lengths(self) -> np.ndarray:
        """Per-segment distances, ``size - 1`` entries."""
        return segment_lengths(self._vertices, self.kind)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: 'Line', epsilon: float = EPSILON) -> bool:
        """True if both lines have the same size and pairwise equal vertices."""
        if len(self._vertices) != len(other._vertices):
            return False
        return all(a.equals(b, epsilon) for a, b in zip(self._vertices, other._vertices))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return not self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Assignment and copying
    # ------------------------------------------------------------------

    def assign(self, other: 'Line') -> 'Line':
        """
        Replace this line's vertices (and scalar type) with copies of ``other``'s.

        Self-assignment leaves the line untouched.
        """
        if other is self:
            return self
        self._vertices = [p.copy() for p in other._vertices]
        self._scalar = other._scalar
        return self

    def copy(self) -> 'Line':
        return Line._adopt([p.copy() for p in self._vertices], self._scalar)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize line to dictionary."""
        return {
            "kind": self.kind.value,
            "vertices": [p.to_dict() for p in self._vertices],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Line':
        """
        Create a Line from a dictionary produced by :meth:`to_dict`.

        The scalar type is rebuilt as the builtin type of the stored kind,
        or inferred from the vertices when no kind is stored.

        Raises:
            KeyError: If required fields are missing
            ValueError: If data is invalid or holds no vertices
        """
        points = [Point.from_dict(v) for v in data["vertices"]]
        if "kind" not in data:
            return cls(points)
        kind = ScalarKind.from_string(data["kind"])
        return cls(points, kind.python_type)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        parts = [f"Line with {len(self._vertices)} points:\n"]
        parts.extend(f"{p}\n" for p in self._vertices)
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Line({len(self._vertices)} points, kind={self.kind.value}, length={self.length():.3f})"


def _as_point(item: PointLike) -> Point:
    """Copy a Point, or build one from an ``(x, y)`` pair."""
    if isinstance(item, Point):
        return item.copy()
    x, y = item
    return Point(x, y)


def _check_count(n: int) -> None:
    if n <= 0:
        logger.debug("Rejected line with %d points", n)
        raise ValueError("Number of points must be positive.")
