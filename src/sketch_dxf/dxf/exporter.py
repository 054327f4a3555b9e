"""DXF file export."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

from sketch_dxf import config
from sketch_dxf.dxf.document import Layer, serialize
from sketch_dxf.errors import InvalidValue
from sketch_dxf.model.sketch import Sketch
from sketch_dxf.utils.units import UnitLike

logger = logging.getLogger(__name__)


def export_dxf(
    sketch: Sketch,
    output_path: Union[str, Path] = "sketch.dxf",
    layers: Sequence[Layer] = (config.DEFAULT_LAYER,),
    units: UnitLike = config.DEFAULT_UNITS,
    precision: int = config.DEFAULT_PRECISION,
    comment: str = "",
) -> Path:
    """Write a sketch to a DXF file.

    The document is fully built before the file is opened, so a
    serialization or encoding error never leaves a partial file behind.

    Args:
        sketch: Root sketch.
        output_path: Output DXF file path.
        layers: Layer names to declare.
        units: Output unit or unit system.
        precision: Significant digits.
        comment: Free text comment written after the vendor comment.

    Returns:
        The path written.

    Raises:
        InvalidValue: If the document holds characters outside the
            DXF code page.
    """
    text = serialize(sketch, layers, units, precision, comment)
    try:
        data = text.encode(config.DXF_ENCODING)
    except UnicodeEncodeError as exc:
        raise InvalidValue(
            f"Document contains characters not representable in {config.DXF_ENCODING}: "
            f"{exc.object[exc.start:exc.end]!r}"
        ) from None
    path = Path(output_path)
    path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path
