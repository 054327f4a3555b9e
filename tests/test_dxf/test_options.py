"""Tests for optional property group codes."""
import pytest

from sketch_dxf.dxf.formatter import FormatSettings
from sketch_dxf.dxf.options import encode_options, metadata_code, resolve_layer
from sketch_dxf.errors import InvalidValue
from sketch_dxf.model import EntityOptions
from sketch_dxf.utils.units import Quantity, Unit


class TestEncodeOptions:
    def test_absent_options_emit_nothing(self):
        assert encode_options(EntityOptions()) == []
        assert encode_options(None) == []
        assert encode_options({}) == []

    def test_fixed_order(self):
        opts = EntityOptions(
            metadata=(("a", 1), ("b", "x")),
            closed=True,
            rotation=45,
            thickness=1,
            line_height=2.5,
            dashed=True,
            color=3,
        )
        assert encode_options(opts) == [
            (62, 3),
            (6, "DASHED"),
            (40, "2.5"),
            (39, "1"),
            (50, "45"),
            (70, 1),
            (1000, "a:1,b:x"),
        ]

    def test_only_present_keys(self):
        assert encode_options({"thickness": 2, "closed": True}) == [(39, "2"), (70, 1)]

    def test_false_flags_skipped(self):
        assert encode_options({"dashed": False, "closed": False}) == []

    def test_zero_color_is_present(self):
        assert encode_options({"color": 0}) == [(62, 0)]

    def test_camel_case_line_height(self):
        assert encode_options({"lineHeight": 12}) == [(40, "12")]

    def test_layer_is_not_an_option_code(self):
        assert encode_options({"layer": "cut"}) == []

    def test_lengths_use_settings(self):
        codes = encode_options({"thickness": Quantity(6, "in")}, FormatSettings(Unit.FOOT))
        assert codes == [(39, "0.5")]

    def test_unknown_key(self):
        with pytest.raises(InvalidValue):
            encode_options({"colour": 1})

    def test_non_integer_color(self):
        with pytest.raises(InvalidValue):
            encode_options({"color": "red"})


class TestMetadata:
    def test_insertion_order(self):
        assert metadata_code((("z", 1), ("a", 2))) == (1000, "z:1,a:2")

    def test_mapping_input(self):
        codes = encode_options({"metadata": {"part": "A1", "qty": 2}})
        assert codes == [(1000, "part:A1,qty:2")]

    def test_empty_metadata_present(self):
        assert encode_options({"metadata": {}}) == [(1000, "")]


class TestResolveLayer:
    def test_default(self):
        assert resolve_layer(EntityOptions()) == "1"
        assert resolve_layer(None) == "1"

    def test_own_layer(self):
        assert resolve_layer(EntityOptions(layer="cut")) == "cut"
