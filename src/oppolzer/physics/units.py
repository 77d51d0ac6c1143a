"""Angular units and the conversion factors between them.

Polar motion offsets are natively computed in milliarcseconds, see :attr:`.NATIVE_UNIT`.
"""

from __future__ import annotations

# Standard Library Imports
from enum import Enum

# Local Imports
from ..common.exceptions import UnitConversionError
from ..common.logger import oppolzerLogError
from . import constants as const


class AngleUnit(Enum):
    """Supported angular units, valued by their conventional symbol."""

    RADIAN = "rad"
    DEGREE = "deg"
    ARCMINUTE = "arcmin"
    ARCSECOND = "arcsec"
    MILLIARCSECOND = "mas"
    MICROARCSECOND = "uas"


NATIVE_UNIT: AngleUnit = AngleUnit.MILLIARCSECOND
""":class:`.AngleUnit`: unit the Oppolzer series amplitudes and raw results are expressed in."""


_RADIANS_PER_UNIT: dict[AngleUnit, float] = {
    AngleUnit.RADIAN: 1.0,
    AngleUnit.DEGREE: const.DEG2RAD,
    AngleUnit.ARCMINUTE: const.ARCMIN2DEG * const.DEG2RAD,
    AngleUnit.ARCSECOND: const.ARCSEC2RAD,
    AngleUnit.MILLIARCSECOND: const.MAS2ARCSEC * const.ARCSEC2RAD,
    AngleUnit.MICROARCSECOND: const.UAS2ARCSEC * const.ARCSEC2RAD,
}
"""dict[AngleUnit, float]: size of one unit, (radians)."""

_UNIT_ALIASES: dict[str, AngleUnit] = {
    "radians": AngleUnit.RADIAN,
    "degrees": AngleUnit.DEGREE,
    "as": AngleUnit.ARCSECOND,
    "arcseconds": AngleUnit.ARCSECOND,
    "milliarcseconds": AngleUnit.MILLIARCSECOND,
    "microarcseconds": AngleUnit.MICROARCSECOND,
    "µas": AngleUnit.MICROARCSECOND,
}


def getAngleUnit(unit: AngleUnit | str) -> AngleUnit:
    """Resolve `unit` into an :class:`.AngleUnit`.

    Args:
        unit (:class:`.AngleUnit` | ``str``): unit member, member name (any case), or symbol.

    Returns:
        :class:`.AngleUnit`: the matching unit.

    Raises:
        UnitConversionError: if `unit` doesn't name a supported angular unit.
    """
    if isinstance(unit, AngleUnit):
        return unit

    if isinstance(unit, str):
        key = unit.strip()
        if key.upper() in AngleUnit.__members__:
            return AngleUnit[key.upper()]

        for member in AngleUnit:
            if member.value == key.lower():
                return member

        if (alias := _UNIT_ALIASES.get(key.lower())) is not None:
            return alias

    msg = f"Unsupported angular unit: {unit!r}"
    oppolzerLogError(msg)
    raise UnitConversionError(msg)


def getConversionFactor(from_unit: AngleUnit | str, to_unit: AngleUnit | str) -> float:
    """Return the multiplier that converts a value in `from_unit` into `to_unit`.

    Args:
        from_unit (:class:`.AngleUnit` | ``str``): unit the value is currently expressed in.
        to_unit (:class:`.AngleUnit` | ``str``): unit to express the value in.

    Returns:
        ``float``: scalar conversion factor, exactly ``1.0`` for identical units.

    Raises:
        UnitConversionError: if either unit is unsupported.
    """
    from_unit = getAngleUnit(from_unit)
    to_unit = getAngleUnit(to_unit)
    if from_unit is to_unit:
        return 1.0

    return _RADIANS_PER_UNIT[from_unit] / _RADIANS_PER_UNIT[to_unit]


def convertAngle(
    value: float,
    to_unit: AngleUnit | str,
    from_unit: AngleUnit | str = NATIVE_UNIT,
) -> float:
    """Convert an angular `value` into `to_unit`.

    Args:
        value (``float``): angle to convert, expressed in `from_unit`.
        to_unit (:class:`.AngleUnit` | ``str``): unit to express the value in.
        from_unit (:class:`.AngleUnit` | ``str``, optional): unit `value` is expressed in.
            Defaults to :attr:`.NATIVE_UNIT`.

    Returns:
        ``float``: `value` expressed in `to_unit`.
    """
    return value * getConversionFactor(from_unit, to_unit)
