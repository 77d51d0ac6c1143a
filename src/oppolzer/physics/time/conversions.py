"""Helper functions that convert between different forms of time."""

from __future__ import annotations

# Local Imports
from .. import constants as const
from ..maths import fractionalPart

_GMST_COEFFICIENTS: tuple[float, float, float, float] = (
    24110.54841,
    8640184.812866,
    0.093104,
    -0.0000062,
)
"""tuple[float, ...]: GMST polynomial in Julian centuries since J2000.0, (seconds)."""


def julianCenturies(modified_julian_date: float) -> float:
    """Return the number of Julian centuries elapsed since J2000.0.

    Args:
        modified_julian_date (``float``): epoch as a Modified Julian Date, (days).

    Returns:
        ``float``: Julian centuries since J2000.0
    """
    return (modified_julian_date - const.MJD_J2000) / const.DAYS_PER_JULIAN_CENTURY


def greenwichMeanSiderealTime(modified_julian_date: float) -> float:
    """Determine the Greenwich mean sidereal time associated with the given epoch.

    References:
        :cite:t:`vallado_2013_astro`, Section 3.5.2

    Args:
        modified_julian_date (``float``): epoch as a Modified Julian Date, (days).

    Returns:
        ``float``: Greenwich mean sidereal time, (seconds). Not reduced to a single day.
    """
    jc = julianCenturies(modified_julian_date)
    c0, c1, c2, c3 = _GMST_COEFFICIENTS
    return c0 + c1 * jc + c2 * jc * jc + c3 * jc * jc * jc


def greenwichMeanSiderealHourAngle(modified_julian_date: float) -> float:
    r"""Determine the Greenwich mean sidereal hour angle associated with the given epoch.

    The day fraction is taken with a floored remainder, so the result is always in
    :math:`[0, 2\pi)`, including for epochs before J2000.0.

    Args:
        modified_julian_date (``float``): epoch as a Modified Julian Date, (days).

    Returns:
        ``float``: Greenwich mean sidereal hour angle, (radians).
    """
    jc = julianCenturies(modified_julian_date)
    gmst = greenwichMeanSiderealTime(modified_julian_date)
    return const.TWOPI * fractionalPart(
        gmst / const.DAYS2SEC + 0.5 + jc * const.DAYS_PER_JULIAN_CENTURY,
    )
