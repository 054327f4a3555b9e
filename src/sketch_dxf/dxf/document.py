"""DXF document assembly: sections, tables, entities and EOF."""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from sketch_dxf import config
from sketch_dxf.dxf.dispatcher import to_group_codes
from sketch_dxf.dxf.formatter import FormatSettings, GroupCode
from sketch_dxf.errors import InvalidValue
from sketch_dxf.model.sketch import Sketch
from sketch_dxf.utils.units import UnitLike

logger = logging.getLogger(__name__)

Layer = Union[str, int]


# ── Framing ──────────────────────────────────────────────────────────
def section_start(name: str, data: Optional[Mapping[int, str]] = None) -> List[GroupCode]:
    codes = [GroupCode(0, "SECTION"), GroupCode(2, name)]
    if data:
        codes += [GroupCode(code, value) for code, value in data.items()]
    return codes


def section_end() -> List[GroupCode]:
    return [GroupCode(0, "ENDSEC")]


def table_start(name: str) -> List[GroupCode]:
    return [GroupCode(0, "TABLE"), GroupCode(2, name)]


def table_end() -> List[GroupCode]:
    return [GroupCode(0, "ENDTAB")]


# ── Tables ───────────────────────────────────────────────────────────
def linetype_table() -> List[GroupCode]:
    """LTYPE table declaring the DASHED linetype."""
    return table_start("LTYPE") + [
        GroupCode(100, "AcDbLinetypeTableRecord"),
        GroupCode(2, "LTYPE"),
        GroupCode(0, "LTYPE"),
        GroupCode(2, config.DASHED_LINETYPE),
        GroupCode(70, 0),
        GroupCode(3, ""),
        GroupCode(72, 65),      # Alignment code 'A'
        GroupCode(73, 1),
        GroupCode(40, "0.0"),
    ] + table_end()


def layer_table(layers: Sequence[Layer]) -> List[GroupCode]:
    """LAYER table: count, then one record per layer name."""
    codes = table_start("LAYER") + [GroupCode(70, len(layers))]
    for layer in layers:
        codes += [
            GroupCode(0, "LAYER"),
            GroupCode(100, "AcDbSymbolTable"),
            GroupCode(100, "AcDbLayerTable"),
            GroupCode(2, layer),
            GroupCode(70, 0),
            GroupCode(62, config.LAYER_COLOR),
            GroupCode(6, config.LAYER_LINETYPE),
        ]
    return codes + table_end()


def _warn_undeclared_layers(entities: Iterable[GroupCode], layers: Sequence[Layer]) -> None:
    declared = {str(layer) for layer in layers}
    used = {str(value) for code, value in entities if code == 8}
    missing = sorted(used - declared)
    if missing:
        logger.warning("Entities reference undeclared layers: %s", ", ".join(missing))


# ── Document ─────────────────────────────────────────────────────────
def build_document(
    sketch: Sketch,
    layers: Sequence[Layer] = (config.DEFAULT_LAYER,),
    units: UnitLike = config.DEFAULT_UNITS,
    precision: int = config.DEFAULT_PRECISION,
    comment: str = "",
) -> List[GroupCode]:
    """Build the complete ordered group-code list for a sketch.

    Args:
        sketch: Root sketch; encoded with no inherited transformation.
        layers: Layer names declared in the LAYER table.
        units: Output unit or unit system ("metric", "imperial", "mm", ...).
        precision: Significant digits for every number.
        comment: Free text written as the second 999 comment.

    Raises:
        UnknownUnit, InvalidValue, TransformError, UnsupportedEntity:
            Propagated unchanged; no partial document is returned.
    """
    settings = FormatSettings.create(units, precision)
    layers = list(layers)
    entities = to_group_codes(sketch, None, settings)
    _warn_undeclared_layers(entities, layers)
    logger.debug(
        "Assembled %d entity group codes for sketch %r (%s, %d digits)",
        len(entities), sketch.name, settings.units.value, settings.precision,
    )
    return (
        [GroupCode(999, config.VENDOR_COMMENT), GroupCode(999, comment)]
        + section_start("HEADER", {9: "$ACADVER", 1: config.ACAD_VERSION})
        + section_end()
        + section_start("TABLES")
        + linetype_table()
        + layer_table(layers)
        + section_end()
        + section_start("ENTITIES")
        + entities
        + section_end()
        + [GroupCode(0, "EOF")]
    )


def render(codes: Iterable[GroupCode]) -> str:
    """Join codes and values into DXF text with ``\\r\\n`` line endings.

    Raises:
        InvalidValue: If a value contains a line break, which would shift
            every following code/value pair.
    """
    lines: List[str] = []
    for code, value in codes:
        text = str(value)
        if "\r" in text or "\n" in text:
            raise InvalidValue(f"Group code {code} value contains a line break: {text!r}")
        lines.append(str(code))
        lines.append(text)
    return config.LINE_TERMINATOR.join(lines)


def serialize(
    sketch: Sketch,
    layers: Sequence[Layer] = (config.DEFAULT_LAYER,),
    units: UnitLike = config.DEFAULT_UNITS,
    precision: int = config.DEFAULT_PRECISION,
    comment: str = "",
) -> str:
    """Serialize a sketch to a DXF document string."""
    return render(build_document(sketch, layers, units, precision, comment))
