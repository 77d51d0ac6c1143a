"""Defines :class:`.OppolzerTerms`, the entry point for computing diurnal lunisolar polar motion.

Lunisolar effects on the equatorial component of the Earth's rotation vector are evaluated for a
rigid, purely elastic or liquid-core Earth model, whichever column of the coefficient table is
selected. Pole coordinates are returned in the conventional frame (X along the Greenwich meridian,
Y 90 degrees west), or transformed into a station's north & east frame.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import asarray, empty

# Local Imports
from .common.behavioral_config import BehavioralConfig
from .common.exceptions import ModelIndexError
from .common.logger import oppolzerLogDebug, oppolzerLogError
from .parameters import CoefficientTable, loadCoefficientTable
from .physics.time.conversions import greenwichMeanSiderealHourAngle
from .physics.transforms.fundamental_arguments import getFundamentalArguments
from .physics.transforms.oppolzer import (
    PolarMotion,
    evaluateOppolzerSeries,
    northComponent,
    rotateToStation,
)
from .physics.units import NATIVE_UNIT, AngleUnit, getAngleUnit, getConversionFactor

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable
    from pathlib import Path

    # Third Party Imports
    from numpy import ndarray


@dataclass(frozen=True)
class OppolzerConfig:
    """Immutable selection of Earth model & output unit for a computation.

    The conversion factor from :attr:`.NATIVE_UNIT` is resolved once, when the config is built, and
    travels with the unit it belongs to.
    """

    earth_model: int
    """``int``: amplitude column of the coefficient table to evaluate."""

    output_unit: AngleUnit
    """:class:`.AngleUnit`: unit results are expressed in."""

    conversion_factor: float
    """``float``: multiplier from :attr:`.NATIVE_UNIT` to :attr:`.output_unit`."""

    @classmethod
    def build(
        cls,
        table: CoefficientTable,
        earth_model: int | str = 0,
        output_unit: AngleUnit | str = NATIVE_UNIT,
    ) -> OppolzerConfig:
        """Validate the selections against `table` and build the config.

        Args:
            table (:class:`.CoefficientTable`): table the config will be evaluated against.
            earth_model (``int`` | ``str``, optional): model column index, or model name.
                Defaults to the first model.
            output_unit (:class:`.AngleUnit` | ``str``, optional): unit of the results.
                Defaults to :attr:`.NATIVE_UNIT`.

        Returns:
            :class:`.OppolzerConfig`: validated configuration.

        Raises:
            ModelIndexError: if `earth_model` doesn't select one of the table's models.
            TypeError: if `earth_model` is neither an integer nor a model name.
            UnitConversionError: if `output_unit` isn't a supported unit.
        """
        if isinstance(earth_model, str):
            earth_model = table.getModelIndex(earth_model)

        if isinstance(earth_model, bool) or not isinstance(earth_model, Integral):
            err = f"Earth model must be an integer index or model name, not {type(earth_model)}"
            oppolzerLogError(err)
            raise TypeError(err)

        if not 0 <= earth_model < table.model_count:
            err = f"Earth model index {earth_model} outside of [0, {table.model_count}) for models {table.models}"
            oppolzerLogError(err)
            raise ModelIndexError(err)

        output_unit = getAngleUnit(output_unit)
        return cls(
            earth_model=int(earth_model),
            output_unit=output_unit,
            conversion_factor=getConversionFactor(NATIVE_UNIT, output_unit),
        )


class OppolzerTerms:
    """Calculates the Oppolzer terms (diurnal lunisolar polar motion).

    The coefficient table is shared, read-only data. The Earth model & output unit are kept in an
    immutable :class:`.OppolzerConfig`; the setters build a complete replacement and swap it in a
    single assignment, and every computation reads the config once on entry. A computation is
    therefore always evaluated under one consistent configuration, even if a setter runs meanwhile.
    """

    def __init__(
        self,
        table: CoefficientTable,
        earth_model: int | str | None = None,
        output_unit: AngleUnit | str | None = None,
    ):
        """Initialize the calculator.

        Args:
            table (:class:`.CoefficientTable`): validated series coefficients.
            earth_model (``int`` | ``str``, optional): model column index, or model name. Defaults
                to the ``computation.EarthModel`` behavioral config value.
            output_unit (:class:`.AngleUnit` | ``str``, optional): unit of the results. Defaults to
                the ``computation.OutputUnit`` behavioral config value.
        """
        if not isinstance(table, CoefficientTable):
            err = f"Unexpected 'table' type: {type(table)}"
            raise TypeError(err)

        behave_config = BehavioralConfig.getConfig()
        if earth_model is None:
            earth_model = behave_config.computation.EarthModel
        if output_unit is None:
            output_unit = behave_config.computation.OutputUnit

        self._table = table
        self._config = OppolzerConfig.build(table, earth_model, output_unit)

    @classmethod
    def fromParameterFile(
        cls,
        path: str | Path,
        loader_name: str | None = None,
        earth_model: int | str | None = None,
        output_unit: AngleUnit | str | None = None,
    ) -> OppolzerTerms:
        """Load a coefficient table from `path` and build a calculator around it.

        See Also:
            :func:`.loadCoefficientTable` for `loader_name`, :meth:`.__init__` for the rest.
        """
        table = loadCoefficientTable(path, loader_name=loader_name)
        return cls(table, earth_model=earth_model, output_unit=output_unit)

    @property
    def table(self) -> CoefficientTable:
        """:class:`.CoefficientTable`: series coefficients this calculator evaluates."""
        return self._table

    @property
    def config(self) -> OppolzerConfig:
        """:class:`.OppolzerConfig`: current Earth model & output unit selection."""
        return self._config

    @property
    def earth_model(self) -> int:
        """``int``: index of the selected Earth model."""
        return self._config.earth_model

    @property
    def model_name(self) -> str:
        """``str``: name of the selected Earth model."""
        return self._table.models[self._config.earth_model]

    @property
    def output_unit(self) -> AngleUnit:
        """:class:`.AngleUnit`: unit results are expressed in."""
        return self._config.output_unit

    def setOutputUnit(self, output_unit: AngleUnit | str) -> None:
        """Select the unit results are expressed in, keeping the current Earth model.

        Raises:
            UnitConversionError: if `output_unit` isn't a supported unit.
        """
        current = self._config
        self._config = OppolzerConfig.build(self._table, current.earth_model, output_unit)
        oppolzerLogDebug(f"Output unit set to {self._config.output_unit.name}")

    def setEarthModel(self, earth_model: int | str) -> None:
        """Select the Earth model whose amplitudes are evaluated, keeping the current unit.

        Raises:
            ModelIndexError: if `earth_model` doesn't select one of the table's models.
        """
        current = self._config
        self._config = OppolzerConfig.build(self._table, earth_model, current.output_unit)
        oppolzerLogDebug(f"Earth model set to {self.model_name!r}")

    def compute(self, mjd: float, station_longitude: float | None = None) -> PolarMotion:
        """Calculate the Oppolzer terms at the given epoch.

        Args:
            mjd (``float``): epoch as a Modified Julian Date, (days).
            station_longitude (``float``, optional): longitude of a station, (degrees). If given,
                the result is transformed into the station's north & east frame.

        Returns:
            :class:`.PolarMotion`: polar coordinates X & Y in the Greenwich frame, or the north &
            east components, in :attr:`.output_unit`.
        """
        return self._compute(self._config, mjd, station_longitude)

    def computeNorthComponent(self, mjd: float, station_longitude: float) -> float:
        """Calculate only the north component of the Oppolzer terms at a station.

        Args:
            mjd (``float``): epoch as a Modified Julian Date, (days).
            station_longitude (``float``): longitude of the station, (degrees).

        Returns:
            ``float``: north component, in :attr:`.output_unit`.
        """
        polar_motion = self._compute(self._config, mjd)
        return northComponent(polar_motion.dx, polar_motion.dy, station_longitude)

    def computeEpochs(self, epochs: Iterable[float], station_longitude: float | None = None) -> ndarray:
        """Calculate the Oppolzer terms at several epochs under a single configuration.

        Args:
            epochs (``Iterable[float]``): epochs as Modified Julian Dates, (days).
            station_longitude (``float``, optional): see :meth:`.compute`.

        Returns:
            ``ndarray``: Nx2 array of ``(dx, dy)`` rows, in :attr:`.output_unit`.
        """
        config = self._config
        epochs = asarray(epochs, dtype=float).ravel()
        results = empty((epochs.size, 2))
        for index, mjd in enumerate(epochs):
            polar_motion = self._compute(config, mjd, station_longitude)
            results[index] = (polar_motion.dx, polar_motion.dy)

        return results

    def _compute(
        self,
        config: OppolzerConfig,
        mjd: float,
        station_longitude: float | None = None,
    ) -> PolarMotion:
        """Run the full pipeline for one epoch under `config`."""
        arguments = getFundamentalArguments(mjd)
        gmsha = greenwichMeanSiderealHourAngle(mjd)
        d_x, d_y = evaluateOppolzerSeries(*arguments, gmsha, self._table, config.earth_model)

        polar_motion = PolarMotion(dx=d_x, dy=d_y).scaled(config.conversion_factor)
        if station_longitude is None:
            return polar_motion

        north, east = rotateToStation(polar_motion.dx, polar_motion.dy, station_longitude)
        return PolarMotion(dx=north, dy=east)
