"""Optional entity property group codes."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from sketch_dxf import config
from sketch_dxf.dxf.formatter import DEFAULT_SETTINGS, FormatSettings, GroupCode, format_value
from sketch_dxf.model.options import EntityOptions, MetadataPairs, as_options


def metadata_code(metadata: MetadataPairs) -> GroupCode:
    """Extended data string ``key:value,key:value`` under group 1000."""
    return GroupCode(1000, ",".join(f"{key}:{value}" for key, value in metadata))


def encode_options(
    options: Union[EntityOptions, Mapping[str, Any], None],
    settings: FormatSettings = DEFAULT_SETTINGS,
) -> List[GroupCode]:
    """Group codes for the options that are present, in fixed order.

    color (62), dashed linetype (6), line height (40), thickness (39),
    rotation (50), closed flag (70), metadata (1000).
    """
    opts = as_options(options)
    codes: List[GroupCode] = []
    if opts.color is not None:
        codes.append(GroupCode(62, opts.color))
    if opts.dashed:
        codes.append(GroupCode(6, config.DASHED_LINETYPE))
    if opts.line_height is not None:
        codes.append(GroupCode(40, format_value(opts.line_height, settings)))
    if opts.thickness is not None:
        codes.append(GroupCode(39, format_value(opts.thickness, settings)))
    if opts.rotation is not None:
        codes.append(GroupCode(50, format_value(opts.rotation, settings)))
    if opts.closed:
        codes.append(GroupCode(70, 1))
    if opts.metadata is not None:
        codes.append(metadata_code(opts.metadata))
    return codes


def resolve_layer(options: Optional[EntityOptions]) -> Union[str, int]:
    """Layer named by ``options``, or ``config.DEFAULT_LAYER``."""
    if options is None or options.layer is None:
        return config.DEFAULT_LAYER
    return options.layer
