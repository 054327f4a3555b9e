"""Drawing model: entities, options and sketches."""
from sketch_dxf.geometry.point import Point
from sketch_dxf.model.entities import (
    Arc,
    Circle,
    Entity,
    Hatch,
    Line,
    Polyline,
    Rectangle,
    Square,
    Text,
)
from sketch_dxf.model.options import EntityOptions
from sketch_dxf.model.sketch import Sketch

__all__ = [
    "Arc",
    "Circle",
    "Entity",
    "Hatch",
    "Line",
    "Point",
    "Polyline",
    "Rectangle",
    "Square",
    "Text",
    "EntityOptions",
    "Sketch",
]
