"""Check the full pipeline against a direct, scalar evaluation of the Oppolzer terms.

Pinned reference values live in :mod:`.test_oppolzer_golden`.
"""

from __future__ import annotations

# Standard Library Imports
from math import cos, fmod, pi, radians, sin

# Third Party Imports
import pytest

# OPPOLZER Imports
from oppolzer.parameters import CoefficientTable
from oppolzer.terms import OppolzerTerms

# Local Imports
from .. import SAMPLE_MODELS

REGRESSION_EPOCHS: tuple[float, ...] = (30000.0, 41684.0, 51544.5, 58453.5, 60000.25)

TOLERANCE: float = 1.0e-6
"""``float``: allowed difference from the direct evaluation, (milliarcseconds)."""

_ARGUMENTS: tuple[tuple[float, float, float, float, float], ...] = (
    (485866.733, 715922.633, 31.310, 0.064, 1325.0),
    (1287099.804, 1292581.224, -0.577, -0.012, 99.0),
    (335778.877, 295263.137, -13.257, 0.011, 1342.0),
    (1072261.307, 1105601.328, -6.891, 0.019, 1236.0),
    (450160.280, -482890.539, 7.455, 0.008, -5.0),
)


def _directEvaluation(table: CoefficientTable, model_index: int, mjd: float) -> tuple[float, float]:
    """Evaluate the Oppolzer terms for one epoch with plain scalar math."""
    jc = (mjd - 51544.5) / 36525.0

    arguments = []
    for c0, c1, c2, c3, rate in _ARGUMENTS:
        arcsec = c0 + c1 * jc + c2 * jc**2 + c3 * jc**3 + fmod(rate * jc, 1.0) * 1296000.0
        arcsec = fmod(fmod(arcsec, 1296000.0), 1296000.0)
        if arcsec < 0.0:
            arcsec += 1296000.0
        arguments.append(arcsec / 206264.8062470964)

    gmst = 24110.54841 + 8640184.812866 * jc + 0.093104 * jc**2 - 0.0000062 * jc**3
    gmsha = 2.0 * pi * ((gmst / 86400.0 + 0.5 + jc * 36525.0) % 1.0)

    d_x = 0.0
    d_y = 0.0
    for row in table.rows:
        arg = sum(m * a for m, a in zip(row.multipliers, arguments)) + gmsha
        d_x -= row.amplitudes[model_index] * sin(arg)
        d_y += row.amplitudes[model_index] * cos(arg)

    return d_x, d_y


@pytest.mark.parametrize("mjd", REGRESSION_EPOCHS)
@pytest.mark.parametrize("model_index", range(len(SAMPLE_MODELS)))
def testGreenwichFrame(oppolzer_terms: OppolzerTerms, model_index: int, mjd: float):
    """Test the Greenwich-frame pole offsets of each Earth model."""
    oppolzer_terms.setEarthModel(model_index)
    expected_x, expected_y = _directEvaluation(oppolzer_terms.table, model_index, mjd)

    result = oppolzer_terms.compute(mjd)
    assert result.dx == pytest.approx(expected_x, abs=TOLERANCE)
    assert result.dy == pytest.approx(expected_y, abs=TOLERANCE)


@pytest.mark.parametrize("mjd", REGRESSION_EPOCHS)
@pytest.mark.parametrize("longitude", [-155.5, 2.3, 139.7])
def testStationFrame(oppolzer_terms: OppolzerTerms, longitude: float, mjd: float):
    """Test the north & east components at a few station longitudes."""
    d_x, d_y = _directEvaluation(oppolzer_terms.table, 0, mjd)
    lam = radians(longitude)

    result = oppolzer_terms.compute(mjd, station_longitude=longitude)
    assert result.dx == pytest.approx(d_x * cos(lam) - d_y * sin(lam), abs=TOLERANCE)
    assert result.dy == pytest.approx(-d_x * sin(lam) + d_y * cos(lam), abs=TOLERANCE)
    assert oppolzer_terms.computeNorthComponent(mjd, longitude) == pytest.approx(result.dx, abs=TOLERANCE)
