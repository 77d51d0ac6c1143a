"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime
from pathlib import Path

# OPPOLZER Imports
from oppolzer.physics.time.stardate import datetimeToModifiedJulianDate

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
SAMPLE_JSON_PATH = Path("parameters/sample_oppolzer_terms.json")
SAMPLE_XML_PATH = Path("parameters/sample_oppolzer_terms.xml")

# Common epochs
J2000_MJD: float = 51544.5
TEST_START_DATETIME = datetime(2018, 12, 1, 12)
TEST_START_MJD: float = datetimeToModifiedJulianDate(TEST_START_DATETIME)

SAMPLE_MODELS: tuple[str, ...] = ("rigid", "elastic", "liquid core")
"""tuple[str, ...]: Earth models of the sample coefficient table."""

SAMPLE_TERMS: tuple[tuple[tuple[float, ...], tuple[float, ...]], ...] = (
    ((0.0, 0.0, 2.0, 0.0, 2.0), (-6.2, -5.7, -5.1)),
    ((1.0, 0.0, 2.0, 0.0, 2.0), (-1.2, -1.1, -1.0)),
    ((0.0, 0.0, 2.0, -2.0, 2.0), (-2.9, -2.7, -2.4)),
    ((0.0, 0.0, 0.0, 0.0, 1.0), (0.5, 0.45, 0.4)),
    ((0.0, 0.0, 2.0, 0.0, 1.0), (-1.3, -1.2, -1.1)),
)
"""tuple: ``(multipliers, amplitudes)`` of each term in the sample coefficient table files."""
