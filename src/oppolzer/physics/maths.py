"""General mathematics functions that provided extended capability to `numpy`.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Third Party Imports
from numpy import fmod, remainder

# Local Imports
from . import constants as const


def reduceRevolution(arcseconds: float) -> float:
    """Reduce an angle in arcseconds into a single revolution, :math:`[0, 1296000]`.

    The truncated remainder is applied twice, then negative results are shifted up by a revolution.
    A negative input smaller in magnitude than half a ULP of 1296000 lands exactly on 1296000.

    Args:
        arcseconds (``float``): angle to reduce, (arcseconds).

    Returns:
        ``float``: reduced angle, (arcseconds).
    """
    arcseconds = fmod(arcseconds, const.REVOLUTION_ARCSEC)
    arcseconds = fmod(arcseconds, const.REVOLUTION_ARCSEC)
    if arcseconds < 0:
        arcseconds += const.REVOLUTION_ARCSEC
    return arcseconds


def fractionalPart(value: float) -> float:
    """Return the non-negative fractional part of `value`, always in :math:`[0, 1)`."""
    # Remainder takes sign of divisor (second arg)
    fraction = remainder(value, 1.0)
    # Tiny negative values round up to exactly one
    if fraction == 1.0:
        return 0.0
    return fraction
