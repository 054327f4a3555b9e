"""Numeric value formatting for group-code values."""
from __future__ import annotations

import math
import numbers
from decimal import Decimal
from dataclasses import dataclass
from typing import NamedTuple, Union

from sketch_dxf import config
from sketch_dxf.errors import InvalidValue
from sketch_dxf.utils.units import Quantity, Unit, UnitLike, resolve_unit


class GroupCode(NamedTuple):
    """One DXF group code / value pair."""
    code: int
    value: Union[str, int, float]


@dataclass(frozen=True)
class FormatSettings:
    """Output unit and significant digits for one serialization pass."""
    units: Unit = Unit.METER
    precision: int = config.DEFAULT_PRECISION

    @classmethod
    def create(
        cls,
        units: UnitLike = config.DEFAULT_UNITS,
        precision: int = config.DEFAULT_PRECISION,
    ) -> "FormatSettings":
        """Validate and build settings.

        Raises:
            UnknownUnit: If ``units`` has no defined conversion.
            InvalidValue: If ``precision`` is not a positive integer.
        """
        if isinstance(precision, bool) or not isinstance(precision, numbers.Integral) \
                or precision < 1:
            raise InvalidValue(f"Precision must be a positive integer, got {precision!r}")
        return cls(units=resolve_unit(units), precision=int(precision))


DEFAULT_SETTINGS = FormatSettings()


def format_value(value, settings: FormatSettings = DEFAULT_SETTINGS) -> str:
    """Format a number or quantity as decimal text in the target unit.

    Unit-tagged quantities are converted to ``settings.units``; plain numbers
    are assumed to be in that unit already. Magnitudes below
    ``config.ZERO_TOLERANCE`` are written as ``0``. Values are rounded to
    ``settings.precision`` significant digits and never use exponent notation.

    Raises:
        InvalidValue: For non-numeric or non-finite input.
    """
    if isinstance(value, Quantity):
        magnitude = value.to(settings.units)
    elif isinstance(value, numbers.Real) and not isinstance(value, bool):
        magnitude = float(value)
    else:
        raise InvalidValue(f"Cannot format {value!r} as a DXF number")

    if not math.isfinite(magnitude):
        raise InvalidValue(f"Cannot format non-finite value {value!r}")
    if abs(magnitude) < config.ZERO_TOLERANCE:
        magnitude = 0.0
    # %g rounding, no exponent notation
    text = format(Decimal(f"{magnitude:.{settings.precision}g}"), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
