"""Read DXF documents written by :mod:`sketch_dxf.dxf.document` back into a sketch.

Only the entity subset the encoder emits is understood. Tokenizing is done by
ezdxf's ASCII tag loader, which also skips 999 comments.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO, Tuple, Union

from ezdxf.lldxf.const import DXFStructureError
from ezdxf.lldxf.tagger import ascii_tags_loader

from sketch_dxf import config
from sketch_dxf.errors import UnsupportedEntity
from sketch_dxf.geometry.point import Point
from sketch_dxf.model.entities import Arc, Circle, Entity, Hatch, Line, Polyline, Text
from sketch_dxf.model.options import EntityOptions
from sketch_dxf.model.sketch import Sketch

logger = logging.getLogger(__name__)

Tag = Tuple[int, str]

# Positional group codes per entity type, in emission order
GEOMETRY_CODES: Dict[str, Tuple[int, ...]] = {
    "LINE": (10, 20, 11, 21),
    "ARC": (10, 20, 40, 50, 51),
    "CIRCLE": (10, 20, 40),
    "TEXT": (100, 10, 20, 1, 7),
    "POLYLINE": (10, 20),
    "VERTEX": (10, 20),
    "SEQEND": (),
    "HATCH": (100, 70, 91, 92, 93),
}


def read_dxf(source: Union[str, Path, TextIO]) -> Sketch:
    """Read a DXF file (path or text stream) into a flat :class:`Sketch`.

    Coordinates are floats in the unit the document was written in.

    Raises:
        DXFStructureError: If the document has no ENTITIES section or a
            VERTEX/SEQEND appears outside a POLYLINE.
        UnsupportedEntity: For entity types the encoder never writes.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        with open(path, "r", encoding=config.DXF_ENCODING) as f:
            return _read_stream(f, path.stem)
    return _read_stream(source, "")


def loads(text: str) -> Sketch:
    """Read a DXF document from a string."""
    return _read_stream(io.StringIO(text), "")


def _read_stream(stream: TextIO, name: str) -> Sketch:
    tags = [(tag.code, tag.value.rstrip("\r")) for tag in ascii_tags_loader(stream)]
    groups = _split_entities(_entities_section(tags))

    sketch = Sketch(name=name)
    i = 0
    while i < len(groups):
        group = groups[i]
        kind = group[0][1]
        if kind == "POLYLINE":
            end = i + 1
            while end < len(groups) and groups[end][0][1] == "VERTEX":
                end += 1
            if end >= len(groups) or groups[end][0][1] != "SEQEND":
                raise DXFStructureError("POLYLINE without SEQEND")
            sketch.push(_polyline(group, groups[i + 1:end]))
            i = end + 1
            continue
        if kind in ("VERTEX", "SEQEND"):
            raise DXFStructureError(f"{kind} outside of a POLYLINE")
        sketch.push(_entity(kind, group))
        i += 1

    logger.debug("Read %d entities", len(sketch))
    return sketch


def _entities_section(tags: Sequence[Tag]) -> List[Tag]:
    for i in range(len(tags) - 1):
        if tags[i] == (0, "SECTION") and tags[i + 1] == (2, "ENTITIES"):
            section = []
            for tag in tags[i + 2:]:
                if tag == (0, "ENDSEC"):
                    return section
                section.append(tag)
            raise DXFStructureError("ENTITIES section is not terminated by ENDSEC")
    raise DXFStructureError("No ENTITIES section found")


def _split_entities(tags: Sequence[Tag]) -> List[List[Tag]]:
    groups: List[List[Tag]] = []
    for tag in tags:
        if tag[0] == 0:
            groups.append([tag])
        elif groups:
            groups[-1].append(tag)
    return groups


def _fields(group: Sequence[Tag]) -> Tuple[Optional[str], Dict[int, str], List[Tag]]:
    """Split a group into layer, positional fields and option tags."""
    remaining = list(GEOMETRY_CODES[group[0][1]])
    layer = None
    geometry: Dict[int, str] = {}
    rest: List[Tag] = []
    for code, value in group[1:]:
        if code == 8 and layer is None:
            layer = value
        elif code in remaining:
            remaining.remove(code)
            geometry[code] = value
        else:
            rest.append((code, value))
    return layer, geometry, rest


def _options(tags: Sequence[Tag], layer: Optional[str]) -> EntityOptions:
    kwargs = {"layer": layer}
    for code, value in tags:
        if code == 62:
            kwargs["color"] = int(value)
        elif code == 6:
            kwargs["dashed"] = value == config.DASHED_LINETYPE
        elif code == 40:
            kwargs["line_height"] = float(value)
        elif code == 39:
            kwargs["thickness"] = float(value)
        elif code == 50:
            kwargs["rotation"] = float(value)
        elif code == 70:
            kwargs["closed"] = int(value) == 1
        elif code == 1000:
            kwargs["metadata"] = parse_metadata(value)
        else:
            logger.debug("Ignoring group code %d (%r)", code, value)
    return EntityOptions(**kwargs)


def parse_metadata(value: str) -> Tuple[Tuple[str, str], ...]:
    """Parse ``key:value,key:value`` extended data into ordered pairs."""
    pairs = []
    for item in value.split(","):
        if not item:
            continue
        key, _, val = item.partition(":")
        pairs.append((key, val))
    return tuple(pairs)


def _point(geometry: Dict[int, str], x_code: int = 10, y_code: int = 20) -> Point:
    return Point(float(geometry[x_code]), float(geometry[y_code]))


def _polyline(header: Sequence[Tag], vertices: Sequence[Sequence[Tag]]) -> Polyline:
    layer, geometry, rest = _fields(header)
    points = [_point(geometry)] if geometry else []
    for vertex in vertices:
        _, vertex_geometry, _ = _fields(vertex)
        points.append(_point(vertex_geometry))
    return Polyline(points, options=_options(rest, layer))


def _hatch(group: Sequence[Tag]) -> Hatch:
    layer, geometry, rest = _fields(group)
    count = int(geometry[93])
    xs = [float(v) for c, v in rest[:count] if c == 10]
    ys = [float(v) for c, v in rest[count:2 * count] if c == 20]
    if len(xs) != count or len(ys) != count:
        raise DXFStructureError(f"HATCH declares {count} vertices but lists {len(xs)}/{len(ys)}")
    return Hatch([Point(x, y) for x, y in zip(xs, ys)], options=_options(rest[2 * count:], layer))


def _entity(kind: str, group: Sequence[Tag]) -> Entity:
    if kind not in GEOMETRY_CODES:
        raise UnsupportedEntity(f"Cannot read {kind} entities")
    if kind == "HATCH":
        return _hatch(group)

    layer, geometry, rest = _fields(group)
    options = _options(rest, layer)
    if kind == "LINE":
        return Line(_point(geometry), _point(geometry, 11, 21), options=options)
    if kind == "ARC":
        return Arc(
            _point(geometry), float(geometry[40]),
            float(geometry[50]), float(geometry[51]), options=options,
        )
    if kind == "CIRCLE":
        return Circle(_point(geometry), float(geometry[40]), options=options)
    return Text(_point(geometry), geometry.get(1, ""), options=options)
