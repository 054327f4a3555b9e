"""Length unit conversion and unit-tagged quantities."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Union

from sketch_dxf.config import UnitSystem
from sketch_dxf.errors import InvalidValue, UnknownUnit


class Unit(Enum):
    """Length unit."""
    METER = "meter"
    MILLIMETER = "millimeter"
    CENTIMETER = "centimeter"
    INCH = "inch"
    FOOT = "foot"


# Length of one unit in meters
METERS_PER_UNIT = {
    Unit.METER: 1.0,
    Unit.MILLIMETER: 0.001,
    Unit.CENTIMETER: 0.01,
    Unit.INCH: 0.0254,
    Unit.FOOT: 0.3048,
}

UNIT_ALIASES = {
    "m": Unit.METER,
    "meter": Unit.METER,
    "meters": Unit.METER,
    "metre": Unit.METER,
    "metres": Unit.METER,
    "mm": Unit.MILLIMETER,
    "millimeter": Unit.MILLIMETER,
    "millimeters": Unit.MILLIMETER,
    "cm": Unit.CENTIMETER,
    "centimeter": Unit.CENTIMETER,
    "centimeters": Unit.CENTIMETER,
    "in": Unit.INCH,
    "inch": Unit.INCH,
    "inches": Unit.INCH,
    "ft": Unit.FOOT,
    "foot": Unit.FOOT,
    "feet": Unit.FOOT,
}

UNIT_SYSTEMS = {
    UnitSystem.METRIC: Unit.METER,
    UnitSystem.IMPERIAL: Unit.FOOT,
}

UnitLike = Union[Unit, UnitSystem, str]


def resolve_unit(unit: UnitLike) -> Unit:
    """Resolve a unit, unit system, or unit name to a :class:`Unit`.

    Args:
        unit: ``Unit``, ``UnitSystem`` or a name such as "mm", "inches",
            "metric" or "imperial" (case-insensitive).

    Raises:
        UnknownUnit: If the name has no defined conversion.
    """
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, UnitSystem):
        return UNIT_SYSTEMS[unit]
    if isinstance(unit, str):
        key = unit.strip().lower()
        if key in UNIT_ALIASES:
            return UNIT_ALIASES[key]
        for system in UnitSystem:
            if system.value == key:
                return UNIT_SYSTEMS[system]
    raise UnknownUnit(f"No conversion defined for unit {unit!r}")


def convert(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """Convert a length between units."""
    source = resolve_unit(from_unit)
    target = resolve_unit(to_unit)
    if source is target:
        return float(value)
    return value * METERS_PER_UNIT[source] / METERS_PER_UNIT[target]


# Angle conversion
def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(radians)


@dataclass(frozen=True)
class Quantity:
    """A length tagged with its unit, e.g. ``Quantity(25.4, "mm")``."""
    value: float
    unit: Unit

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidValue(f"Quantity value must be a real number, got {self.value!r}")
        object.__setattr__(self, "unit", resolve_unit(self.unit))

    def to(self, unit: UnitLike) -> float:
        """Magnitude of this quantity in another unit."""
        return convert(self.value, self.unit, unit)

    def __add__(self, other):
        if isinstance(other, Quantity):
            other = other.to(self.unit)
        return Quantity(self.value + other, self.unit)

    __radd__ = __add__
