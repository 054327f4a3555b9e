"""Serialize 2D sketches to AutoCAD DXF (R12, ASCII)."""
from sketch_dxf.dxf.document import build_document, render, serialize
from sketch_dxf.dxf.exporter import export_dxf
from sketch_dxf.dxf.reader import loads, read_dxf
from sketch_dxf.errors import (
    DXFError,
    InvalidValue,
    TransformError,
    UnknownUnit,
    UnsupportedEntity,
)

__version__ = "0.1.0"

__all__ = [
    "build_document",
    "render",
    "serialize",
    "export_dxf",
    "loads",
    "read_dxf",
    "DXFError",
    "InvalidValue",
    "TransformError",
    "UnknownUnit",
    "UnsupportedEntity",
]
