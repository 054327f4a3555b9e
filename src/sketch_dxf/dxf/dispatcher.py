"""Sketch tree walker: selects an encoder per node and flattens the output."""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from sketch_dxf.dxf.encoders import (
    encode_arc,
    encode_circle,
    encode_hatch,
    encode_line,
    encode_polyline,
    encode_text,
)
from sketch_dxf.dxf.formatter import DEFAULT_SETTINGS, FormatSettings, GroupCode
from sketch_dxf.dxf.options import resolve_layer
from sketch_dxf.errors import UnsupportedEntity
from sketch_dxf.geometry.transformation import Transformation
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
from sketch_dxf.model.sketch import Sketch

logger = logging.getLogger(__name__)


def compose(
    inherited: Optional[Transformation], own: Optional[Transformation]
) -> Optional[Transformation]:
    """Inherited transformation first, the sketch's own second."""
    if inherited is None:
        return own
    if own is None:
        return inherited
    return inherited.compose(own)


def to_group_codes(
    node: Union[Entity, Sketch],
    transformation: Optional[Transformation] = None,
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """Encode a node and, for sketches, all of its descendants.

    Output follows the declared child order; nothing is regrouped.

    Raises:
        UnsupportedEntity: If a node has no encoder.
    """
    if isinstance(node, Sketch):
        effective = compose(transformation, node.transformation)
        logger.debug("Encoding sketch %r with %d children", node.name, len(node.geometry))
        codes: List[GroupCode] = []
        for child in node.geometry:
            codes += to_group_codes(child, effective, settings)
        return codes

    if not isinstance(node, Entity):
        raise UnsupportedEntity(f"No encoder for {type(node).__name__}")

    layer = resolve_layer(node.options)
    if isinstance(node, Line):
        return encode_line(node, layer, transformation, settings)
    if isinstance(node, Square):
        points = node.points
        return encode_polyline(points + points[:1], layer, transformation, node.options, settings)
    if isinstance(node, (Polyline, Rectangle)):
        return encode_polyline(node.points, layer, transformation, node.options, settings)
    if isinstance(node, Arc):
        return encode_arc(node, layer, transformation, settings)
    if isinstance(node, Circle):
        return encode_circle(node, layer, transformation, settings)
    if isinstance(node, Text):
        return encode_text(node, layer, transformation, settings)
    if isinstance(node, Hatch):
        return encode_hatch(node, layer, transformation, settings)
    raise UnsupportedEntity(f"No encoder for {type(node).__name__}")
