"""
Options for polyline construction, comparison and reporting.

This module defines the configuration shared by the library helpers and the
demo command line: comparison tolerance, random seed, and output precision.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, Union, TYPE_CHECKING

from .point import Point, EPSILON
from .scalar import ScalarKind

if TYPE_CHECKING:
    from .line import Line

logger = logging.getLogger(__name__)


@dataclass
class GeometryOptions:
    """
    Configuration options for polyline operations.

    Attributes:
        epsilon: Absolute tolerance for real/complex comparisons (default: 1e-5)
        seed: Seed for random lines, None to seed from system entropy
        precision: Decimal places for real coordinates and lengths in
            reports, None for the natural representation
        default_scalar: Scalar kind used for demo lines (default: INTEGER)
    """

    epsilon: float = EPSILON
    seed: Optional[int] = None
    precision: Optional[int] = None
    default_scalar: ScalarKind = ScalarKind.INTEGER

    def __post_init__(self):
        """Validate options after initialization."""
        self.epsilon = float(self.epsilon)
        if not self.epsilon > 0:
            raise ValueError("epsilon must be positive")
        if self.seed is not None and int(self.seed) < 0:
            raise ValueError("seed cannot be negative")
        if self.precision is not None and int(self.precision) < 0:
            raise ValueError("precision cannot be negative")
        if isinstance(self.default_scalar, str):
            self.default_scalar = ScalarKind.from_string(self.default_scalar)

    @property
    def scalar_type(self) -> type:
        """Python type for ``default_scalar``."""
        return self.default_scalar.python_type

    def points_equal(self, a: Point, b: Point) -> bool:
        """Compare two points with this configuration's ``epsilon``."""
        return a.equals(b, self.epsilon)

    def lines_equal(self, a: 'Line', b: 'Line') -> bool:
        """Compare two lines with this configuration's ``epsilon``."""
        return a.equals(b, self.epsilon)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "epsilon": self.epsilon,
            "seed": self.seed,
            "precision": self.precision,
            "default_scalar": self.default_scalar.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeometryOptions':
        """
        Create options from a dictionary.

        Missing keys fall back to defaults; unknown keys are rejected.

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        known = {"epsilon", "seed", "precision", "default_scalar"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")

        return cls(
            epsilon=float(data.get("epsilon", EPSILON)),
            seed=_optional_int(data.get("seed")),
            precision=_optional_int(data.get("precision")),
            default_scalar=ScalarKind.from_string(data.get("default_scalar", "integer")),
        )

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'GeometryOptions':
        """
        Load options from a JSON file.

        Raises:
            ValueError: If the file is not a JSON object or holds invalid options
            OSError: If the file cannot be read
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Options file {path} must contain a JSON object")

        logger.debug("Loaded options from %s: %s", path, data)
        return cls.from_dict(data)


def _optional_int(value: Any) -> Optional[int]:
    """Parse a value to optional int, handling empty strings and None."""
    if value is None or value == '' or value == 'None':
        return None
    return int(value)
