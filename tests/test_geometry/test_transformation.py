"""Tests for affine transformations."""
import math

import pytest

from sketch_dxf.errors import TransformError
from sketch_dxf.geometry.point import Point
from sketch_dxf.geometry.transformation import Transformation
from sketch_dxf.utils.units import Quantity, Unit


class TestConstruction:
    def test_identity(self):
        t = Transformation.identity()
        assert t.is_identity
        assert t.apply(Point(3.0, 4.0)) == Point(3.0, 4.0)

    def test_wrong_shape(self):
        with pytest.raises(TransformError):
            Transformation([[1, 0], [0, 1]])

    def test_not_affine(self):
        with pytest.raises(TransformError):
            Transformation([[1, 0, 0], [0, 1, 0], [0, 1, 1]])

    def test_non_finite(self):
        with pytest.raises(TransformError):
            Transformation.translation(float("nan"), 0.0)


class TestComposition:
    def test_self_applied_first(self):
        t = Transformation.translation(1, 0).compose(Transformation.scaling(2))
        assert t.apply(Point(0, 0)) == Point(2.0, 0.0)

    def test_reverse_order(self):
        t = Transformation.scaling(2).compose(Transformation.translation(1, 0))
        assert t.apply(Point(0, 0)) == Point(1.0, 0.0)

    def test_equality(self):
        a = Transformation.translation(1, 2).compose(Transformation.translation(3, 4))
        assert a == Transformation.translation(4, 6)


class TestApply:
    def test_rotation(self):
        p = Transformation.rotation(math.pi / 2).apply(Point(1, 0))
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(1.0)

    def test_rotation_about_origin_point(self):
        p = Transformation.rotation(math.pi, origin=(1, 1)).apply(Point(2, 1))
        assert p.x == pytest.approx(0.0, abs=1e-12)
        assert p.y == pytest.approx(1.0)

    def test_degenerate(self):
        with pytest.raises(TransformError):
            Transformation.scaling(0).apply(Point(1, 1))

    def test_quantity_keeps_unit(self):
        p = Transformation.translation(10, 0).apply(Point(Quantity(5, "mm"), Quantity(1, "cm")))
        assert p.x == Quantity(15.0, Unit.MILLIMETER)
        assert p.y.unit is Unit.MILLIMETER
        assert p.y.value == pytest.approx(10.0)

    def test_mixed_units(self):
        with pytest.raises(TransformError):
            Transformation.identity().apply(Point(Quantity(1, "m"), 2.0))

    def test_non_numeric(self):
        with pytest.raises(TransformError):
            Transformation.identity().apply(Point("a", 2.0))


class TestLengthAndAngles:
    def test_uniform_scale(self):
        t = Transformation.rotation(0.3).compose(Transformation.scaling(3))
        assert t.apply_length(2.0) == pytest.approx(6.0)

    def test_translation_leaves_length(self):
        assert Transformation.translation(10, 10).apply_length(3) == 3.0

    def test_quantity_length(self):
        r = Transformation.scaling(2).apply_length(Quantity(1.5, "in"))
        assert r == Quantity(3.0, Unit.INCH)

    def test_non_uniform_scale(self):
        with pytest.raises(TransformError):
            Transformation.scaling(1, 2).apply_length(1.0)

    def test_translation_leaves_angles(self):
        assert Transformation.translation(5, 5).apply_angles(-90.0, 45.0) == (-90.0, 45.0)

    def test_rotation_shifts_angles(self):
        start, end = Transformation.rotation(math.pi / 2).apply_angles(0.0, 90.0)
        assert start == pytest.approx(90.0)
        assert end == pytest.approx(180.0)

    def test_full_circle_keeps_sweep(self):
        start, end = Transformation.rotation(math.pi / 2).apply_angles(0.0, 360.0)
        assert end - start == pytest.approx(360.0)

    def test_mirror_swaps_start_and_end(self):
        start, end = Transformation.scaling(-1, 1).apply_angles(0.0, 90.0)
        assert start == pytest.approx(90.0)
        assert end == pytest.approx(180.0)
