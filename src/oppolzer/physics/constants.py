"""Global math & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`vallado_2013_astro`
    #. :cite:t:`iers_1992_standards`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
TWOPI = 2.0 * pi
DAYS2SEC = 86400.0
DEG2RAD = pi / 180.0
ARCMIN2DEG = 1.0 / 60.0
ARCSEC2DEG = 1.0 / 3600.0
ARCSEC2RAD = ARCSEC2DEG * DEG2RAD
MAS2ARCSEC = 1.0e-3
UAS2ARCSEC = 1.0e-6

REVOLUTION_ARCSEC: float = 1296000.0
"""``float``: one full revolution, (arcseconds)."""

SECCON: float = 206264.8062470964
"""``float``: arcseconds per radian used when reducing the fundamental arguments."""

# Time constants
MJD_J2000: float = 51544.5
"""``float``: Modified Julian Date of the J2000.0 epoch, (days)."""

MJD_ZERO_JD: float = 2400000.5
"""``float``: Julian Date of the Modified Julian Date origin, (days)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0
"""``float``: number of days in a Julian century."""
