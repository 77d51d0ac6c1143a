"""Define the command line interface for the OPPOLZER tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path
from datetime import datetime

# Local Imports
from ..physics.time.stardate import datetimeToModifiedJulianDate
from ..physics.units import AngleUnit
from .logger import oppolzerLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        oppolzerLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def isoDateChecker(iso_date):
    """Convert an ISO 8601 date & time passed to the CLI parser into a Modified Julian Date.

    Args:
        iso_date (``str``): date & time given to CLI parser, e.g. ``2018-12-01T12:00:00``.

    Raises:
        ValueError: if `iso_date` isn't a valid ISO 8601 string

    Returns:
        :class:`.ModifiedJulianDate`: the converted epoch
    """
    try:
        return datetimeToModifiedJulianDate(datetime.fromisoformat(iso_date))
    except ValueError:
        oppolzerLogError(f"Bad ISO date given to CLI: {iso_date!r}")
        raise


def earthModelChecker(earth_model):
    """Return `earth_model` as an ``int`` index if it looks like one, otherwise as a model name."""
    try:
        return int(earth_model)
    except ValueError:
        return earth_model


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(
        description="OPPOLZER Command Line Interface: diurnal lunisolar polar motion",
    )
    epoch_group = parser.add_argument_group("Epochs")
    station_group = parser.add_argument_group("Station Frame")

    parser.add_argument(
        "parameter_file",
        metavar="PARAM_FILE",
        type=fileChecker,
        help="Path to the Oppolzer coefficient table (JSON or XML)",
    )

    epoch_group.add_argument(
        "epochs",
        metavar="MJD",
        nargs="*",
        type=float,
        help="Epochs to evaluate, as Modified Julian Dates",
    )

    epoch_group.add_argument(
        "--date",
        dest="dates",
        metavar="ISO_DATE",
        action="append",
        default=[],
        type=isoDateChecker,
        help="Epoch to evaluate, as an ISO 8601 date & time. May be repeated",
    )

    station_group.add_argument(
        "-l",
        "--longitude",
        dest="station_longitude",
        metavar="DEGREES",
        default=None,
        type=float,
        help="Station longitude. Rotates results into the station north/east frame",
    )

    station_group.add_argument(
        "--north",
        dest="north_only",
        action="store_true",
        default=False,
        help="Only report the north component. Requires --longitude",
    )

    parser.add_argument(
        "-m",
        "--model",
        dest="earth_model",
        metavar="MODEL",
        default=None,
        type=earthModelChecker,
        help="Earth model index or name. DEFAULT: behavioral config value",
    )

    parser.add_argument(
        "-u",
        "--unit",
        dest="output_unit",
        metavar="UNIT",
        default=None,
        type=str,
        help=f"Output unit, one of {', '.join(unit.name for unit in AngleUnit)} or its symbol",
    )

    parser.add_argument(
        "--loader",
        dest="loader_name",
        metavar="LOADER",
        default=None,
        type=str,
        help="Coefficient table loader name. DEFAULT: chosen by file suffix",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a custom behavioral config file",
    )

    return parser
