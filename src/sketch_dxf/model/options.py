"""Optional per-entity properties."""
from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple, Union

from sketch_dxf.errors import InvalidValue

# Original camelCase option names -> field names
_OPTION_ALIASES = {
    "lineHeight": "line_height",
}

MetadataPairs = Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class EntityOptions:
    """Sparse set of optional entity properties.

    ``None`` (or ``False`` for flags) means the option is absent and produces
    no group code. ``layer`` falls back to ``config.DEFAULT_LAYER`` at encode
    time. ``metadata`` is an ordered sequence of (key, value) pairs so the
    extended-data string is deterministic.
    """
    color: Optional[int] = None
    dashed: bool = False
    line_height: Optional[float] = None
    thickness: Optional[float] = None
    rotation: Optional[float] = None
    closed: bool = False
    layer: Optional[Union[str, int]] = None
    metadata: Optional[MetadataPairs] = None

    def __post_init__(self):
        if self.color is not None:
            if isinstance(self.color, bool) or not isinstance(self.color, numbers.Integral):
                raise InvalidValue(f"Color must be an integer color index, got {self.color!r}")
            object.__setattr__(self, "color", int(self.color))
        if self.metadata is not None:
            object.__setattr__(self, "metadata", _metadata_pairs(self.metadata))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "EntityOptions":
        """Build options from a plain mapping.

        Accepts snake_case field names and the camelCase ``lineHeight``.

        Raises:
            InvalidValue: For an unrecognized option name.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidValue(f"Unknown entity option {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


def _metadata_pairs(metadata) -> MetadataPairs:
    if isinstance(metadata, Mapping):
        return tuple(metadata.items())
    try:
        return tuple((key, value) for key, value in metadata)
    except (TypeError, ValueError):
        raise InvalidValue(
            f"Metadata must be a mapping or (key, value) pairs, got {metadata!r}"
        ) from None


def as_options(options: Union[EntityOptions, Mapping[str, Any], None]) -> EntityOptions:
    """Coerce ``None``, a mapping, or ``EntityOptions`` to ``EntityOptions``."""
    if isinstance(options, EntityOptions):
        return options
    return EntityOptions.from_mapping(options)
