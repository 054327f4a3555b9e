"""2D point type."""
from __future__ import annotations

from typing import NamedTuple, Sequence, Union

from sketch_dxf.utils.units import Quantity

Number = Union[float, int, Quantity]


class Point(NamedTuple):
    """2D point."""
    x: Number
    y: Number


def as_point(value: Union[Point, Sequence[Number]]) -> Point:
    """Coerce an (x, y) pair to a :class:`Point`."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)
