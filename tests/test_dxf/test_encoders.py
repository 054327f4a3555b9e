"""Tests for per-entity group-code encoders."""
import math

import pytest

from sketch_dxf.dxf.encoders import (
    encode_arc,
    encode_circle,
    encode_hatch,
    encode_line,
    encode_polyline,
    encode_text,
)
from sketch_dxf.dxf.formatter import FormatSettings
from sketch_dxf.errors import TransformError
from sketch_dxf.geometry.point import Point
from sketch_dxf.geometry.transformation import Transformation
from sketch_dxf.model import Arc, Circle, EntityOptions, Hatch, Line, Text
from sketch_dxf.utils.units import Quantity


def _count(codes, value):
    return sum(1 for code, v in codes if code == 0 and v == value)


class TestLine:
    def test_line(self):
        codes = encode_line(Line((0, 0), (10, 5)), "cut")
        assert codes == [
            (0, "LINE"), (8, "cut"),
            (10, "0"), (20, "0"),
            (11, "10"), (21, "5"),
        ]

    def test_options_follow_geometry(self):
        codes = encode_line(Line((0, 0), (1, 1), options={"color": 1, "dashed": True}))
        assert codes[-2:] == [(62, 1), (6, "DASHED")]

    def test_translated(self):
        codes = encode_line(Line((0, 0), (1, 2)), "1", Transformation.translation(3, 4))
        assert codes[2:] == [(10, "3"), (20, "4"), (11, "4"), (21, "6")]

    def test_quantities_converted(self):
        line = Line((Quantity(1000, "mm"), Quantity(0, "mm")), (Quantity(1, "ft"), Quantity(0, "ft")))
        codes = encode_line(line, settings=FormatSettings.create("metric"))
        assert codes[2:] == [(10, "1"), (20, "0"), (11, "0.3048"), (21, "0")]

    def test_degenerate_transformation(self):
        with pytest.raises(TransformError):
            encode_line(Line((0, 0), (1, 1)), "1", Transformation.scaling(0))


class TestPolyline:
    @pytest.mark.parametrize("closed", [False, True])
    def test_vertex_and_seqend_counts(self, closed):
        points = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        codes = encode_polyline(points, "1", options=EntityOptions(closed=closed))
        assert _count(codes, "POLYLINE") == 1
        assert _count(codes, "VERTEX") == len(points) - 1
        assert _count(codes, "SEQEND") == 1

    def test_layout(self):
        codes = encode_polyline([Point(0, 0), Point(2, 3)], "L", options=EntityOptions(closed=True))
        assert codes == [
            (0, "POLYLINE"), (8, "L"),
            (70, 1),
            (10, "0"), (20, "0"),
            (0, "VERTEX"), (8, "L"),
            (10, "2"), (20, "3"),
            (0, "SEQEND"), (8, "L"),
        ]

    def test_points_are_formatted(self):
        codes = encode_polyline([Point(1 / 3, 0.5)], settings=FormatSettings(precision=3))
        assert (10, "0.333") in codes
        assert (20, "0.5") in codes

    def test_empty(self):
        codes = encode_polyline([])
        assert codes == [(0, "POLYLINE"), (8, "1"), (0, "SEQEND"), (8, "1")]


class TestArcAndCircle:
    def test_arc(self):
        codes = encode_arc(Arc((1, 2), 3, 0, 90))
        assert codes == [
            (0, "ARC"), (8, "1"),
            (10, "1"), (20, "2"),
            (40, "3"),
            (50, "0"), (51, "90"),
        ]

    def test_arc_rotated(self):
        codes = encode_arc(Arc((1, 0), 1, 0, 90), "1", Transformation.rotation(math.pi / 2))
        assert codes[2:] == [(10, "0"), (20, "1"), (40, "1"), (50, "90"), (51, "180")]

    def test_arc_mirrored(self):
        codes = encode_arc(Arc((2, 0), 1, 0, 90), "1", Transformation.scaling(-1, 1))
        assert codes[2:] == [(10, "-2"), (20, "0"), (40, "1"), (50, "90"), (51, "180")]

    def test_circle(self):
        codes = encode_circle(Circle((1, 1), 3, options={"thickness": 2}), "c")
        assert codes == [
            (0, "CIRCLE"), (8, "c"),
            (10, "1"), (20, "1"),
            (40, "3"),
            (39, "2"),
        ]

    def test_translation_keeps_radius(self):
        codes = encode_circle(Circle((1, 1), 3), "1", Transformation.translation(10, 10))
        assert codes[2:] == [(10, "11"), (20, "11"), (40, "3")]

    def test_uniform_scale_scales_radius(self):
        codes = encode_circle(Circle((1, 1), 3), "1", Transformation.scaling(2))
        assert codes[2:] == [(10, "2"), (20, "2"), (40, "6")]

    def test_non_uniform_scale(self):
        with pytest.raises(TransformError):
            encode_circle(Circle((1, 1), 3), "1", Transformation.scaling(1, 2))


class TestText:
    def test_text(self):
        codes = encode_text(Text((1, 2), "hello"))
        assert codes == [
            (0, "TEXT"), (8, "1"),
            (100, "AcDbText"),
            (10, "1"), (20, "2"),
            (1, "hello"),
            (7, "NewTextStyle_4"),
        ]

    def test_text_is_transformed(self):
        codes = encode_text(Text((1, 2), "x"), "1", Transformation.translation(1, 1))
        assert (10, "2") in codes
        assert (20, "3") in codes

    def test_height_and_rotation_options(self):
        codes = encode_text(Text((0, 0), "x", options={"lineHeight": 2.5, "rotation": 30}))
        assert codes[-2:] == [(40, "2.5"), (50, "30")]


class TestHatch:
    def test_value_arrays_expanded(self):
        codes = encode_hatch(Hatch([(0, 0), (4, 0), (4, 3)]), "fill")
        assert codes == [
            (0, "HATCH"), (8, "fill"),
            (100, "AcDbHatch"),
            (70, 0), (91, 1), (92, 2),
            (93, 3),
            (10, "0"), (10, "4"), (10, "4"),
            (20, "0"), (20, "0"), (20, "3"),
        ]

    def test_hatch_transformed(self):
        codes = encode_hatch(Hatch([(0, 0), (1, 1)]), "1", Transformation.translation(1, 0))
        assert [v for c, v in codes if c == 10] == ["1", "2"]
