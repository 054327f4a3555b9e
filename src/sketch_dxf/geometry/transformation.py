"""Affine 2D transformations backed by a 3x3 homogeneous matrix.

Composition order follows the sketch tree: ``outer.compose(inner)`` applies
``outer`` first and ``inner`` second.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from sketch_dxf.errors import TransformError
from sketch_dxf.geometry.point import Number, Point
from sketch_dxf.utils.math_helpers import normalize_degrees
from sketch_dxf.utils.units import Quantity, Unit, rad_to_deg

# Determinants below this are treated as non-invertible
DEGENERATE_TOLERANCE = 1e-12


class Transformation:
    """Affine map of the plane."""

    def __init__(self, matrix: Optional[Sequence[Sequence[float]]] = None):
        m = np.identity(3) if matrix is None else np.array(matrix, dtype=float)
        if m.shape != (3, 3):
            raise TransformError(f"Expected a 3x3 matrix, got shape {m.shape}")
        if not np.all(np.isfinite(m)):
            raise TransformError("Transformation matrix contains non-finite values")
        if not np.allclose(m[2], (0.0, 0.0, 1.0)):
            raise TransformError("Transformation matrix is not affine")
        self.matrix = m

    # ── Constructors ─────────────────────────────────────────────────
    @classmethod
    def identity(cls) -> "Transformation":
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> "Transformation":
        return cls([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])

    @classmethod
    def rotation(
        cls, angle: float, origin: Optional[Tuple[float, float]] = None
    ) -> "Transformation":
        """Counter-clockwise rotation by ``angle`` radians about ``origin``."""
        c = math.cos(angle)
        s = math.sin(angle)
        rotate = cls([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        if origin is None:
            return rotate
        ox, oy = origin
        return (
            cls.translation(-ox, -oy)
            .compose(rotate)
            .compose(cls.translation(ox, oy))
        )

    @classmethod
    def scaling(cls, sx: float, sy: Optional[float] = None) -> "Transformation":
        """Scale about the origin; ``sy`` defaults to ``sx``."""
        if sy is None:
            sy = sx
        return cls([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])

    # ── Composition ──────────────────────────────────────────────────
    def compose(self, other: "Transformation") -> "Transformation":
        """Return the transformation that applies ``self`` then ``other``."""
        return Transformation(other.matrix @ self.matrix)

    @property
    def linear(self) -> np.ndarray:
        return self.matrix[:2, :2]

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self.linear))

    @property
    def is_identity(self) -> bool:
        return bool(np.allclose(self.matrix, np.identity(3)))

    def _require_invertible(self) -> None:
        if abs(self.determinant) < DEGENERATE_TOLERANCE:
            raise TransformError("Transformation is degenerate (not invertible)")

    # ── Application ──────────────────────────────────────────────────
    def apply(self, point: Point) -> Point:
        """Transform a point.

        Coordinates tagged with a unit are transformed in that unit and keep
        it; translation offsets are read in the same unit.

        Raises:
            TransformError: If the transformation is degenerate or the point
                mixes plain numbers with unit-tagged coordinates.
        """
        self._require_invertible()
        x, y, unit = _magnitudes(point)
        tx, ty, _ = self.matrix @ np.array([x, y, 1.0])
        if not (math.isfinite(tx) and math.isfinite(ty)):
            raise TransformError(f"Transforming {point!r} produced non-finite values")
        return Point(_tagged(float(tx), unit), _tagged(float(ty), unit))

    def apply_length(self, length: Number) -> Number:
        """Scale a length such as a radius.

        Raises:
            TransformError: If the scale differs between axes or the
                transformation is degenerate.
        """
        self._require_invertible()
        col_x, col_y = self.linear[:, 0], self.linear[:, 1]
        norm_x = float(np.hypot(*col_x))
        norm_y = float(np.hypot(*col_y))
        if not (math.isclose(norm_x, norm_y, rel_tol=1e-9)
                and abs(float(col_x @ col_y)) <= 1e-9 * norm_x * norm_y):
            raise TransformError("Cannot scale a length by a non-uniform transformation")
        if isinstance(length, Quantity):
            return Quantity(length.value * norm_x, length.unit)
        try:
            return float(length) * norm_x
        except (TypeError, ValueError):
            raise TransformError(f"Cannot transform length {length!r}") from None

    def apply_angles(self, start: float, end: float) -> Tuple[float, float]:
        """Map the angles (degrees) of a counter-clockwise arc.

        A reflection reverses the sweep direction, so start and end swap.
        """
        self._require_invertible()
        theta = rad_to_deg(math.atan2(self.linear[1, 0], self.linear[0, 0]))
        sweep = end - start
        if self.determinant > 0:
            if theta == 0.0:
                return start, end
            new_start = normalize_degrees(start + theta)
        else:
            new_start = normalize_degrees(theta - end)
        return new_start, new_start + sweep

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transformation):
            return NotImplemented
        return bool(np.allclose(self.matrix, other.matrix))

    def __repr__(self) -> str:
        return f"Transformation({self.matrix.tolist()!r})"


def _magnitudes(point: Point) -> Tuple[float, float, Optional[Unit]]:
    x, y = point
    if isinstance(x, Quantity) or isinstance(y, Quantity):
        if not (isinstance(x, Quantity) and isinstance(y, Quantity)):
            raise TransformError(f"Point {point!r} mixes plain and unit-tagged coordinates")
        return float(x.value), float(y.to(x.unit)), x.unit
    try:
        return float(x), float(y), None
    except (TypeError, ValueError):
        raise TransformError(f"Cannot transform point {point!r}") from None


def _tagged(value: float, unit: Optional[Unit]) -> Number:
    return value if unit is None else Quantity(value, unit)
