"""Defines the :class:`.ModifiedJulianDate` class and supporting functions.

Epochs are passed around as plain `float` values everywhere in OPPOLZER. Subclassing `float`
lets a caller tag a value as a Modified Julian Date and convert it to a calendar date without
changing how the value behaves arithmetically.

.. code-block:: python

    epoch = datetimeToModifiedJulianDate(datetime(2000, 1, 1, 12))
    assert epoch == 51544.5
    assert isinstance(epoch, float)
"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta, timezone

# Local Imports
from .. import constants as const

MJD_EPOCH: datetime = datetime(1858, 11, 17)
"""``datetime``: calendar date & time at which the Modified Julian Date is zero."""


class ModifiedJulianDate(float):
    """Class representing an epoch as a Modified Julian Date, in floating point days."""

    @classmethod
    def fromJulianDate(cls, julian_date: float) -> ModifiedJulianDate:
        """Build a :class:`.ModifiedJulianDate` from a Julian Date, (days)."""
        return cls(float(julian_date) - const.MJD_ZERO_JD)

    @property
    def julian_date(self) -> float:
        """``float``: the equivalent Julian Date, (days)."""
        return float(self) + const.MJD_ZERO_JD

    @property
    def calendar_date(self) -> datetime:
        """``datetime``: the equivalent calendar date & time."""
        return modifiedJulianDateToDatetime(self)

    def __repr__(self) -> str:
        """Return a string representation of this :class:`.ModifiedJulianDate`."""
        date_time = modifiedJulianDateToDatetime(self)

        return f"ModifiedJulianDate({float(self)}, ISO={date_time.isoformat(timespec='microseconds')})"

    def __str__(self) -> str:
        """Return a string representation of this :class:`.ModifiedJulianDate`."""
        return self.__repr__()


def datetimeToModifiedJulianDate(date_time: datetime) -> ModifiedJulianDate:
    """Convert a ``datetime`` object to a :class:`.ModifiedJulianDate`.

    Note:
        Timezone-aware values are converted to UTC and then treated as naive.

    Args:
        date_time (datetime): ``datetime`` object to be converted.

    Returns:
        ModifiedJulianDate: Converted :class:`.ModifiedJulianDate` object.
    """
    if date_time.tzinfo is not None:
        date_time = date_time.astimezone(timezone.utc).replace(tzinfo=None)

    elapsed = date_time - MJD_EPOCH
    return ModifiedJulianDate(
        elapsed.days + (elapsed.seconds + elapsed.microseconds / 1e6) / const.DAYS2SEC,
    )


def modifiedJulianDateToDatetime(modified_julian_date: float) -> datetime:
    """Convert a Modified Julian Date to a ``datetime`` object.

    Args:
        modified_julian_date (``float``): epoch to be converted, (days).

    Returns:
        datetime: Converted ``datetime`` object, rounded to the nearest microsecond.
    """
    return MJD_EPOCH + timedelta(days=float(modified_julian_date))
