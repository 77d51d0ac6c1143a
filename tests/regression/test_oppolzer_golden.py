"""Pin the Oppolzer terms of the sample coefficient table to fixed reference values."""

from __future__ import annotations

# Third Party Imports
import pytest

# OPPOLZER Imports
from oppolzer.parameters import loadCoefficientTable
from oppolzer.physics.time.conversions import greenwichMeanSiderealHourAngle, greenwichMeanSiderealTime
from oppolzer.physics.transforms.fundamental_arguments import getFundamentalArguments
from oppolzer.terms import OppolzerTerms

# Local Imports
from .. import FIXTURE_DATA_DIR, SAMPLE_JSON_PATH, SAMPLE_XML_PATH, TEST_START_MJD

TOLERANCE: float = 1.0e-6
"""``float``: allowed difference from the reference values, (milliarcseconds)."""

GOLDEN_POLAR_MOTION: tuple[tuple[float, int, float, float], ...] = (
    (41684.0, 0, -8.008264535250, -0.035466017409),
    (41684.0, 1, -7.391980053614, -0.063038149636),
    (41684.0, 2, -6.601610730407, -0.074050301348),
    (51544.5, 0, 1.670335639167, -2.727667237853),
    (51544.5, 1, 1.565236393879, -2.496018100855),
    (51544.5, 2, 1.379846136549, -2.216587777279),
    (58453.5, 0, -3.921376126905, 1.694216786018),
    (58453.5, 1, -3.578737409743, 1.521865017680),
    (58453.5, 2, -3.202309144698, 1.382882691612),
    (60000.25, 0, -5.158086315287, -2.430113845567),
    (60000.25, 1, -4.767105849905, -2.201617597616),
    (60000.25, 2, -4.279192610714, -2.000307790542),
)
"""tuple: ``(mjd, earth model, X, Y)`` of the sample table in the Greenwich frame, (milliarcseconds)."""

GOLDEN_ARGUMENTS: tuple[float, ...] = (
    0.715577404722818,
    5.707926068029172,
    0.957358313890546,
    4.952126367420450,
    2.080206187205185,
)
"""tuple: ``(EL, ELPRIM, F, D, OMEGA)`` at 2018-12-01T12:00:00, (radians)."""

GOLDEN_GMST: float = 1658471.588622640
"""``float``: unreduced GMST at 2018-12-01T12:00:00, (seconds)."""

GOLDEN_GMSHA: float = 4.368529201541823
"""``float``: GMSHA at 2018-12-01T12:00:00, (radians)."""


def testGoldenArguments():
    """Test the fundamental arguments & sidereal time against fixed values."""
    assert list(getFundamentalArguments(TEST_START_MJD)) == pytest.approx(GOLDEN_ARGUMENTS, abs=1e-12)
    assert greenwichMeanSiderealTime(TEST_START_MJD) == pytest.approx(GOLDEN_GMST, abs=1e-6)
    assert greenwichMeanSiderealHourAngle(TEST_START_MJD) == pytest.approx(GOLDEN_GMSHA, abs=1e-10)


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
@pytest.mark.parametrize("sample_path", [SAMPLE_JSON_PATH, SAMPLE_XML_PATH])
@pytest.mark.parametrize(("mjd", "earth_model", "d_x", "d_y"), GOLDEN_POLAR_MOTION)
def testGoldenPolarMotion(  # noqa: PLR0913
    datafiles,
    sample_path,
    mjd: float,
    earth_model: int,
    d_x: float,
    d_y: float,
):
    """Test the sample table files reproduce the reference pole offsets."""
    terms = OppolzerTerms(
        loadCoefficientTable(datafiles / sample_path),
        earth_model=earth_model,
        output_unit="mas",
    )
    result = terms.compute(mjd)
    assert result.dx == pytest.approx(d_x, abs=TOLERANCE)
    assert result.dy == pytest.approx(d_y, abs=TOLERANCE)


@pytest.mark.parametrize(("mjd", "earth_model", "d_x", "d_y"), GOLDEN_POLAR_MOTION)
def testGoldenNorthComponent(
    oppolzer_terms: OppolzerTerms,
    mjd: float,
    earth_model: int,
    d_x: float,
    d_y: float,
):
    """Test the reference offsets carried through the station transform & unit conversion."""
    oppolzer_terms.setEarthModel(earth_model)
    oppolzer_terms.setOutputUnit("uas")

    # cos(60) = 0.5, sin(60) = sqrt(3) / 2
    expected_north = (d_x * 0.5 - d_y * 0.8660254037844386) * 1.0e3
    north = oppolzer_terms.computeNorthComponent(mjd, 60.0)
    assert north == pytest.approx(expected_north, abs=TOLERANCE * 1.0e3)
