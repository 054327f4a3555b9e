"""Primitive entity dataclasses.

Coordinates and lengths are plain numbers (already in the output unit) or
:class:`~sketch_dxf.utils.units.Quantity` values. Angles are in degrees,
counter-clockwise from the positive X axis.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sketch_dxf.geometry.point import Number, Point, as_point
from sketch_dxf.model.options import EntityOptions, as_options


def _corner(point: Point, dx: Number, dy: Number) -> Point:
    return Point(point.x + dx, point.y + dy)


@dataclass
class Entity:
    """Base class for primitive entities."""

    def __post_init__(self):
        self.options = as_options(self.options)


@dataclass
class Line(Entity):
    """Straight segment from ``first`` to ``last``."""
    first: Point
    last: Point
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.first = as_point(self.first)
        self.last = as_point(self.last)


@dataclass
class Polyline(Entity):
    """Open or closed (``closed`` option) sequence of vertices."""
    vertices: List[Point] = field(default_factory=list)
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.vertices = [as_point(v) for v in self.vertices]

    @property
    def points(self) -> List[Point]:
        return list(self.vertices)


@dataclass
class Rectangle(Entity):
    """Axis-aligned rectangle spanned by two opposite corners."""
    first: Point
    opposite: Point
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.first = as_point(self.first)
        self.opposite = as_point(self.opposite)

    @property
    def points(self) -> List[Point]:
        """Corners, counter-clockwise from ``first``."""
        return [
            self.first,
            Point(self.opposite.x, self.first.y),
            self.opposite,
            Point(self.first.x, self.opposite.y),
        ]


@dataclass
class Square(Entity):
    """Axis-aligned square with lower-left corner ``origin``."""
    origin: Point
    size: Number
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.origin = as_point(self.origin)

    @property
    def points(self) -> List[Point]:
        """Corners, counter-clockwise from ``origin``."""
        return [
            self.origin,
            _corner(self.origin, self.size, 0),
            _corner(self.origin, self.size, self.size),
            _corner(self.origin, 0, self.size),
        ]


@dataclass
class Arc(Entity):
    """Circular arc drawn counter-clockwise from ``start_angle`` to ``end_angle``."""
    center: Point
    radius: Number
    start_angle: float
    end_angle: float
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.center = as_point(self.center)


@dataclass
class Circle(Entity):
    center: Point
    radius: Number
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.center = as_point(self.center)


@dataclass
class Text(Entity):
    """Single-line text inserted at ``position``."""
    position: Point
    content: str
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.position = as_point(self.position)


@dataclass
class Hatch(Entity):
    """Fill region bounded by a single polyline loop."""
    vertices: List[Point] = field(default_factory=list)
    options: EntityOptions = field(default_factory=EntityOptions)

    def __post_init__(self):
        super().__post_init__()
        self.vertices = [as_point(v) for v in self.vertices]
