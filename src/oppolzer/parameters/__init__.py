"""Oppolzer series coefficient table package."""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass, field
from numbers import Real

# Local Imports
from ..common.exceptions import ModelIndexError, ParameterTableError
from ..common.logger import oppolzerLogError

MULTIPLIER_NAMES: tuple[str, ...] = ("L", "LP", "F", "D", "OMEGA")
"""tuple[str, ...]: names of the fundamental argument multipliers, in argument order."""


def _tableError(message: str) -> ParameterTableError:
    """Log `message` and return a :class:`.ParameterTableError` carrying it."""
    oppolzerLogError(message)
    return ParameterTableError(message)


def _asReal(value, label: str) -> float:
    """Return `value` as a ``float``, rejecting anything that isn't a real number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise _tableError(f"{label} must be a real number, not {type(value).__name__}: {value!r}")
    return float(value)


@dataclass(frozen=True)
class CoefficientRow:
    """Single term of the Oppolzer series.

    The argument of the term is ``L*EL + LP*ELPRIM + F*F + D*D + OMEGA*OMEGA + GMSHA``.
    """

    l: float  # noqa: E741
    """``float``: multiplier of the Moon's mean anomaly."""

    lp: float
    """``float``: multiplier of the Sun's mean anomaly."""

    f: float
    """``float``: multiplier of the Moon's argument of latitude."""

    d: float
    """``float``: multiplier of the Moon's mean elongation from the Sun."""

    omega: float
    """``float``: multiplier of the longitude of the Moon's ascending node."""

    amplitudes: tuple[float, ...] = field(default_factory=tuple)
    """tuple[float, ...]: amplitude of the term for each Earth model (milliarcseconds)."""

    def __post_init__(self):
        """Coerce all values to ``float`` and the amplitudes into a ``tuple``."""
        for name in ("l", "lp", "f", "d", "omega"):
            object.__setattr__(self, name, _asReal(getattr(self, name), f"Multiplier {name.upper()}"))

        if isinstance(self.amplitudes, (str, bytes)):
            raise _tableError(f"Amplitudes must be a sequence of numbers, not {self.amplitudes!r}")
        try:
            amplitudes = tuple(self.amplitudes)
        except TypeError as err:
            raise _tableError(f"Amplitudes must be a sequence of numbers, not {self.amplitudes!r}") from err
        object.__setattr__(
            self,
            "amplitudes",
            tuple(_asReal(amp, "Amplitude") for amp in amplitudes),
        )

    @property
    def multipliers(self) -> tuple[float, float, float, float, float]:
        """tuple: the ``(L, LP, F, D, OMEGA)`` multipliers."""
        return (self.l, self.lp, self.f, self.d, self.omega)

    @classmethod
    def fromMultipliers(cls, multipliers, amplitudes) -> CoefficientRow:
        """Build a row from a five-element `multipliers` sequence and its `amplitudes`.

        Raises:
            ParameterTableError: if `multipliers` doesn't hold exactly five values.
        """
        multipliers = tuple(multipliers)
        if len(multipliers) != len(MULTIPLIER_NAMES):
            raise _tableError(
                f"Expected {len(MULTIPLIER_NAMES)} multipliers {MULTIPLIER_NAMES}, got {len(multipliers)}",
            )
        return cls(*multipliers, amplitudes=amplitudes)


@dataclass(frozen=True)
class CoefficientTable:
    """Ordered Oppolzer series coefficients with one amplitude column per Earth model.

    Instances are validated on construction and never change afterwards, so they may be shared
    freely between any number of readers.
    """

    models: tuple[str, ...]
    """tuple[str, ...]: names of the Earth models, e.g. rigid, elastic & liquid core."""

    rows: tuple[CoefficientRow, ...]
    """tuple[CoefficientRow, ...]: series terms, in evaluation order."""

    def __post_init__(self):
        """Validate the table structure.

        Raises:
            ParameterTableError: if the table is structurally inconsistent.
        """
        if isinstance(self.models, str):
            raise _tableError(f"Models must be a sequence of names, not a single string: {self.models!r}")
        models = tuple(self.models)
        if not models:
            raise _tableError("Coefficient table must define at least one Earth model")
        for name in models:
            if not isinstance(name, str):
                raise _tableError(f"Earth model names must be strings, not {type(name).__name__}: {name!r}")

        rows = tuple(self.rows)
        for number, row in enumerate(rows):
            if not isinstance(row, CoefficientRow):
                raise _tableError(f"Row {number} is not a CoefficientRow: {row!r}")
            if len(row.amplitudes) != len(models):
                raise _tableError(
                    f"Row {number} has {len(row.amplitudes)} amplitudes, expected one per model {models}",
                )

        object.__setattr__(self, "models", models)
        object.__setattr__(self, "rows", rows)

    def __len__(self) -> int:
        """Return the number of series terms."""
        return len(self.rows)

    @property
    def model_count(self) -> int:
        """``int``: number of Earth models with amplitudes in this table."""
        return len(self.models)

    def getModelIndex(self, model_name: str) -> int:
        """Return the amplitude column index of the Earth model called `model_name`.

        Raises:
            ModelIndexError: if no model is called `model_name`.
        """
        try:
            return self.models.index(model_name)
        except ValueError:
            msg = f"Unknown Earth model {model_name!r}, valid models: {self.models}"
            oppolzerLogError(msg)
            raise ModelIndexError(msg) from None


# Local Imports
# forward-facing API import
from .getter import loadCoefficientTable, saveCoefficientTable  # noqa: E402, F401
