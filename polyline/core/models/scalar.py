"""
Scalar kinds for polyline coordinates.

Conventions:
- A coordinate type is classified once as integer, real or complex
- Real and complex kinds compare with an absolute tolerance, integers exactly
- Anything that is not real or complex (int, bool, Fraction, Decimal, numpy
  integers) is handled as an exact "integer" kind
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Type

import numpy as np


class ScalarKind(Enum):
    """
    Classification of a coordinate value type.

    The kind decides two policies:
    - equality: exact (INTEGER) or within an absolute tolerance (REAL, COMPLEX)
    - distance: Euclidean over doubles (INTEGER, REAL) or modulus of the
      complex difference vector (COMPLEX)
    """
    INTEGER = "integer"
    REAL = "real"
    COMPLEX = "complex"

    @classmethod
    def of(cls, scalar_type: type) -> "ScalarKind":
        """Classify a scalar type."""
        if issubclass(scalar_type, (complex, np.complexfloating)):
            return cls.COMPLEX
        if issubclass(scalar_type, (float, np.floating)):
            return cls.REAL
        return cls.INTEGER

    @classmethod
    def of_value(cls, value: Any) -> "ScalarKind":
        """Classify a single coordinate value by its type."""
        return cls.of(type(value))

    @classmethod
    def from_string(cls, s: str) -> "ScalarKind":
        s = (s or "").strip().lower()
        for kind in cls:
            if kind.value == s or kind.name.lower() == s:
                return kind
        raise ValueError(f"Unknown scalar kind: {s}")

    @property
    def is_inexact(self) -> bool:
        """True for kinds compared within a tolerance."""
        return self is not ScalarKind.INTEGER

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def python_type(self) -> Type:
        """Builtin Python type used when rebuilding values of this kind."""
        return _PYTHON_TYPES[self]


_RANK = {
    ScalarKind.INTEGER: 0,
    ScalarKind.REAL: 1,
    ScalarKind.COMPLEX: 2,
}

_PYTHON_TYPES = {
    ScalarKind.INTEGER: int,
    ScalarKind.REAL: float,
    ScalarKind.COMPLEX: complex,
}


def widest_kind(values: Iterable[Any]) -> ScalarKind:
    """Return the widest kind among the values (INTEGER for no values)."""
    kind = ScalarKind.INTEGER
    for value in values:
        value_kind = ScalarKind.of_value(value)
        if value_kind.rank > kind.rank:
            kind = value_kind
    return kind


def infer_scalar(values: Iterable[Any]) -> type:
    """
    Infer the scalar type for a set of coordinate values.

    The type of the first value of the widest kind wins, so mixing ints and
    floats gives float, and mixing anything with a complex gives complex.

    Args:
        values: Coordinate values

    Returns:
        A scalar type; ``int`` when no values are given
    """
    best_type: type = int
    best_rank = -1
    for value in values:
        rank = ScalarKind.of_value(value).rank
        if rank > best_rank:
            best_type = type(value)
            best_rank = rank
    return best_type


def wider_scalar(a: type, b: type) -> type:
    """Return the wider of two scalar types; ``a`` wins a tie."""
    if ScalarKind.of(b).rank > ScalarKind.of(a).rank:
        return b
    return a
