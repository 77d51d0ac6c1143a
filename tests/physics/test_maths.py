from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isnan, nan

# OPPOLZER Imports
from oppolzer.physics.constants import REVOLUTION_ARCSEC
from oppolzer.physics.maths import fractionalPart, reduceRevolution


@pytest.mark.parametrize(
    ("arcseconds", "expected"),
    [
        (0.0, 0.0),
        (1.0, 1.0),
        (-1.0, REVOLUTION_ARCSEC - 1.0),
        (REVOLUTION_ARCSEC, 0.0),
        (-REVOLUTION_ARCSEC, 0.0),
        (3 * REVOLUTION_ARCSEC + 5.0, 5.0),
        (-7 * REVOLUTION_ARCSEC - 5.0, REVOLUTION_ARCSEC - 5.0),
    ],
)
def testReduceRevolution(arcseconds: float, expected: float):
    """Test that angles in arcseconds are folded into a single revolution."""
    reduced = reduceRevolution(arcseconds)
    assert reduced == pytest.approx(expected)
    assert 0.0 <= reduced < REVOLUTION_ARCSEC


def testReduceRevolutionIdempotent():
    """Test that reducing an already reduced angle leaves it unchanged."""
    for arcseconds in (12345.678, 1295999.999, -0.001, 2.5e9):
        once = reduceRevolution(arcseconds)
        assert reduceRevolution(once) == once


def testReduceRevolutionNonFinite():
    """Test that non-finite input propagates rather than raising."""
    assert isnan(reduceRevolution(nan))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.25, 0.25),
        (3.75, 0.75),
        (-0.25, 0.75),
        (-3.75, 0.25),
        (2.0, 0.0),
    ],
)
def testFractionalPart(value: float, expected: float):
    """Test that the fractional part is always non-negative."""
    assert fractionalPart(value) == pytest.approx(expected)


def testReduceRevolutionUpperBoundary():
    """Test that a tiny negative angle lands on the closed upper boundary."""
    assert reduceRevolution(-1.0e-11) == REVOLUTION_ARCSEC


def testFractionalPartTinyNegative():
    """Test that a tiny negative value folds to zero rather than one."""
    assert fractionalPart(-1.0e-17) == 0.0
    assert fractionalPart(-1.0e-17) < 1.0
