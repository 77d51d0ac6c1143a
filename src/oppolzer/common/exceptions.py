"""Contains all the custom-defined exceptions used in OPPOLZER."""

from __future__ import annotations


class ParameterTableError(ValueError):
    """Exception indicating a malformed or structurally inconsistent coefficient table."""


class ModelIndexError(IndexError):
    """Exception indicating an Earth model selection outside of the coefficient table's models."""


class UnitConversionError(ValueError):
    """Exception indicating that no conversion factor exists for the requested unit."""
