"""Calculate the lunisolar fundamental arguments.

This module holds the polynomial coefficients of the five Delaunay arguments used to build the
arguments of lunisolar periodic series, see :func:`.getFundamentalArguments`.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import fmod

# Local Imports
from .. import constants as const
from ..maths import reduceRevolution
from ..time.conversions import julianCenturies

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator


FUNDAMENTAL_ARGUMENT_POLYNOMIALS: tuple[tuple[float, float, float, float], ...] = (
    (485866.733, 715922.633, 31.310, 0.064),
    (1287099.804, 1292581.224, -0.577, -0.012),
    (335778.877, 295263.137, -13.257, 0.011),
    (1072261.307, 1105601.328, -6.891, 0.019),
    (450160.280, -482890.539, 7.455, 0.008),
)
"""tuple: constant, linear, quadratic & cubic coefficients of each argument, (arcseconds).

Rows are ordered as the Moon's mean anomaly, the Sun's mean anomaly, the Moon's argument of
latitude, the Moon's mean elongation from the Sun, and the longitude of the Moon's ascending node.
"""

FUNDAMENTAL_ARGUMENT_RATES: tuple[float, ...] = (1325.0, 99.0, 1342.0, 1236.0, -5.0)
"""tuple: whole revolutions per Julian century of each argument, same order as the polynomials."""


@dataclass(frozen=True)
class FundamentalArguments:
    """The five lunisolar fundamental arguments at a given epoch, each in :math:`[0, 2\\pi]`."""

    el: float
    """``float``: mean anomaly of the Moon (radians)."""

    el_prime: float
    """``float``: mean anomaly of the Sun (radians)."""

    f: float
    """``float``: mean longitude of the Moon minus the longitude of its ascending node (radians)."""

    d: float
    """``float``: mean elongation of the Moon from the Sun (radians)."""

    omega: float
    """``float``: mean longitude of the Moon's ascending node (radians)."""

    def __iter__(self) -> Iterator[float]:
        """Iterate in ``(EL, ELPRIM, F, D, OMEGA)`` order, so instances unpack like a tuple."""
        return iter(astuple(self))


def getFundamentalArguments(modified_julian_date: float) -> FundamentalArguments:
    """Return the lunisolar fundamental arguments at the given epoch.

    References:
        :cite:t:`iers_1992_standards`

    Args:
        modified_julian_date (``float``): epoch as a Modified Julian Date, (days).

    Returns:
        :class:`.FundamentalArguments`: all five arguments, (radians).
    """
    jc = julianCenturies(modified_julian_date)

    arguments = []
    for (c0, c1, c2, c3), rate in zip(FUNDAMENTAL_ARGUMENT_POLYNOMIALS, FUNDAMENTAL_ARGUMENT_RATES):
        arcseconds = ((c3 * jc + c2) * jc + c1) * jc + c0 + fmod(rate * jc, 1.0) * const.REVOLUTION_ARCSEC
        arguments.append(reduceRevolution(arcseconds) / const.SECCON)

    return FundamentalArguments(*arguments)
