"""Evaluate the Oppolzer terms of diurnal polar motion.

The lunisolar torque on the equatorial bulge produces a diurnal, retrograde wobble of the
instantaneous rotation axis. Its effect on the pole coordinates is a harmonic series whose
arguments are the lunisolar fundamental arguments plus the Greenwich mean sidereal hour angle.

The polar coordinates are obtained in a conventional frame: the X-axis is oriented along the
Greenwich meridian and the Y-axis 90 degrees west.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import cos, sin

# Local Imports
from .. import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from ...parameters import CoefficientTable


@dataclass(frozen=True)
class PolarMotion:
    """Diurnal polar motion offsets in a single angular unit.

    In the Greenwich frame :attr:`.dx` points along the Greenwich meridian and :attr:`.dy` 90 degrees
    west. After :func:`.rotateToStation` the same fields hold the north & east components.
    """

    dx: float
    """``float``: polar coordinate X, or north component in a station frame."""

    dy: float
    """``float``: polar coordinate Y, or east component in a station frame."""

    def scaled(self, factor: float) -> PolarMotion:
        """Return a copy with both components multiplied by `factor`."""
        return PolarMotion(dx=self.dx * factor, dy=self.dy * factor)


def evaluateOppolzerSeries(  # noqa: PLR0913
    el: float,
    el_prime: float,
    f: float,
    d: float,
    omega: float,
    gmsha: float,
    table: CoefficientTable,
    model_index: int,
) -> tuple[float, float]:
    """Sum the Oppolzer harmonic series for a single Earth model.

    Rows are accumulated in table order, each exactly once.

    Args:
        el (``float``): mean anomaly of the Moon (radians).
        el_prime (``float``): mean anomaly of the Sun (radians).
        f (``float``): Moon's argument of latitude (radians).
        d (``float``): mean elongation of the Moon from the Sun (radians).
        omega (``float``): longitude of the Moon's ascending node (radians).
        gmsha (``float``): Greenwich mean sidereal hour angle (radians).
        table (:class:`.CoefficientTable`): validated series coefficients.
        model_index (``int``): column of :attr:`.CoefficientRow.amplitudes` to use.

    Returns:
        ``tuple``: polar coordinates X & Y, (milliarcseconds).
    """
    dx = 0.0
    dy = 0.0
    for row in table.rows:
        arg = row.l * el + row.lp * el_prime + row.f * f + row.d * d + row.omega * omega + gmsha
        amplitude = row.amplitudes[model_index]
        dx = -amplitude * sin(arg) + dx
        dy = amplitude * cos(arg) + dy

    return dx, dy


def rotateToStation(dx: float, dy: float, station_longitude: float) -> tuple[float, float]:
    """Transform Greenwich-frame polar coordinates into a station's north & east components.

    The transform matrix is ``[[cos(lon), -sin(lon)], [-sin(lon), cos(lon)]]``. It isn't orthogonal,
    so the magnitude of the offset changes unless the longitude is a multiple of 90 degrees.

    Args:
        dx (``float``): polar coordinate X, any angular unit.
        dy (``float``): polar coordinate Y, same unit as `dx`.
        station_longitude (``float``): longitude of the station, (degrees).

    Returns:
        ``tuple``: north & east components, same unit as the inputs.
    """
    longitude = const.DEG2RAD * station_longitude
    sin_lon = sin(longitude)
    cos_lon = cos(longitude)

    return dx * cos_lon - dy * sin_lon, -dx * sin_lon + dy * cos_lon


def northComponent(dx: float, dy: float, station_longitude: float) -> float:
    """Return only the north component of :func:`.rotateToStation`."""
    longitude = const.DEG2RAD * station_longitude
    return dx * cos(longitude) - dy * sin(longitude)
