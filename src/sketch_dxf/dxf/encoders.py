"""Group-code encoders for primitive entities.

Each encoder transforms the entity's geometry, emits the entity header
(type and layer), the positional data, then the optional property codes.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from sketch_dxf import config
from sketch_dxf.dxf.formatter import DEFAULT_SETTINGS, FormatSettings, GroupCode, format_value
from sketch_dxf.dxf.options import encode_options
from sketch_dxf.geometry.point import Number, Point
from sketch_dxf.geometry.transformation import Transformation
from sketch_dxf.model.entities import Arc, Circle, Hatch, Line, Text
from sketch_dxf.model.options import EntityOptions

Layer = Union[str, int]


def _transform(points: Sequence[Point], transformation: Optional[Transformation]) -> List[Point]:
    if transformation is None:
        return list(points)
    return [transformation.apply(p) for p in points]


def _header(entity_type: str, layer: Layer) -> List[GroupCode]:
    return [GroupCode(0, entity_type), GroupCode(8, layer)]


def point_codes(
    point: Point, settings: FormatSettings, x_code: int = 10, y_code: int = 20
) -> List[GroupCode]:
    """X/Y pair for an already transformed point."""
    return [
        GroupCode(x_code, format_value(point.x, settings)),
        GroupCode(y_code, format_value(point.y, settings)),
    ]


def radius_codes(
    radius: Number,
    transformation: Optional[Transformation],
    settings: FormatSettings,
) -> List[GroupCode]:
    if transformation is not None:
        radius = transformation.apply_length(radius)
    return [GroupCode(40, format_value(radius, settings))]


# ── Entities ─────────────────────────────────────────────────────────
def encode_line(
    line: Line,
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """LINE: 10/20 start, 11/21 end."""
    first, last = _transform([line.first, line.last], transformation)
    return (
        _header("LINE", layer)
        + point_codes(first, settings)
        + point_codes(last, settings, 11, 21)
        + encode_options(line.options, settings)
    )


def encode_polyline(
    points: Sequence[Point],
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    options: Optional[EntityOptions] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """POLYLINE with one VERTEX per point after the first, closed by SEQEND.

    Options follow the POLYLINE header; the first point's coordinates are
    written on the header itself.
    """
    codes = _header("POLYLINE", layer) + encode_options(options, settings)
    for i, point in enumerate(_transform(points, transformation)):
        if i != 0:
            codes += _header("VERTEX", layer)
        codes += point_codes(point, settings)
    codes += _header("SEQEND", layer)
    return codes


def encode_arc(
    arc: Arc,
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """ARC: center, radius, 50 start angle, 51 end angle (degrees)."""
    center, = _transform([arc.center], transformation)
    start, end = arc.start_angle, arc.end_angle
    if transformation is not None:
        start, end = transformation.apply_angles(start, end)
    return (
        _header("ARC", layer)
        + point_codes(center, settings)
        + radius_codes(arc.radius, transformation, settings)
        + [
            GroupCode(50, format_value(start, settings)),
            GroupCode(51, format_value(end, settings)),
        ]
        + encode_options(arc.options, settings)
    )


def encode_circle(
    circle: Circle,
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    center, = _transform([circle.center], transformation)
    return (
        _header("CIRCLE", layer)
        + point_codes(center, settings)
        + radius_codes(circle.radius, transformation, settings)
        + encode_options(circle.options, settings)
    )


def encode_text(
    text: Text,
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """TEXT at the transformed insertion point, in the fixed text style."""
    position, = _transform([text.position], transformation)
    return (
        _header("TEXT", layer)
        + [GroupCode(100, config.TEXT_SUBCLASS)]
        + point_codes(position, settings)
        + [GroupCode(1, text.content), GroupCode(7, config.TEXT_STYLE)]
        + encode_options(text.options, settings)
    )


def encode_hatch(
    hatch: Hatch,
    layer: Layer = config.DEFAULT_LAYER,
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """HATCH with a single polyline boundary loop.

    All x-values are written under group 10, then all y-values under 20,
    one pair per value.
    """
    vertices = _transform(hatch.vertices, transformation)
    codes = _header("HATCH", layer) + [
        GroupCode(100, config.HATCH_SUBCLASS),
        GroupCode(70, config.HATCH_SOLID_FILL),
        GroupCode(91, config.HATCH_LOOP_COUNT),
        GroupCode(92, config.HATCH_PATH_TYPE),
        GroupCode(93, len(vertices)),
    ]
    codes += [GroupCode(10, format_value(v.x, settings)) for v in vertices]
    codes += [GroupCode(20, format_value(v.y, settings)) for v in vertices]
    return codes + encode_options(hatch.options, settings)
