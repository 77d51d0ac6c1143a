"""Infrastructure shared by the computation, parameter & command line packages."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Format `dt` as a time stamp usable in file names, e.g. ``20181201T120000123456``.

    Args:
        dt (``datetime``, optional): time to format. Defaults to now.
    """
    if dt is None:
        dt = datetime.now()
    return dt.strftime("%Y%m%dT%H%M%S%f")
