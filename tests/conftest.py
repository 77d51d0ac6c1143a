from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# OPPOLZER Imports
from oppolzer.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from oppolzer.common.logger import PACKAGE_LOGGER_NAME
from oppolzer.parameters import CoefficientRow, CoefficientTable
from oppolzer.terms import OppolzerTerms

# Local Imports
from . import SAMPLE_MODELS, SAMPLE_TERMS


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig()


@pytest.fixture(autouse=True)
def _resetPackageLogger() -> None:
    """Detach handlers added to the package logger, so they don't outlive captured streams."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="coefficient_table")
def getCoefficientTable() -> CoefficientTable:
    """Create the sample :class:`.CoefficientTable`, matching the sample table files."""
    rows = [CoefficientRow.fromMultipliers(mults, amps) for mults, amps in SAMPLE_TERMS]
    return CoefficientTable(models=SAMPLE_MODELS, rows=rows)


@pytest.fixture(name="oppolzer_terms")
def getOppolzerTerms(coefficient_table: CoefficientTable) -> OppolzerTerms:
    """Create an :class:`.OppolzerTerms` around the sample table, in native units."""
    return OppolzerTerms(coefficient_table, earth_model=0, output_unit="mas")
