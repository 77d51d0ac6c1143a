"""Module defining how to retrieve & store coefficient tables through the configured loaders."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.logger import oppolzerLogError
from .loaders import JSONParameterLoader, XMLParameterLoader

if TYPE_CHECKING:
    # Local Imports
    from . import CoefficientTable
    from .loaders import ParameterLoader


AUTO_LOADER: str = "auto"
"""``str``: loader name that selects a loader from the file suffix."""

_LOADER_MAP: dict[str, type[ParameterLoader]] = {
    "JSONParameterLoader": JSONParameterLoader,
    "XMLParameterLoader": XMLParameterLoader,
}
"""dict[str, type[ParameterLoader]]: Maps loader class names to loader class references."""

_SUFFIX_MAP: dict[str, str] = {
    ".json": "JSONParameterLoader",
    ".xml": "XMLParameterLoader",
}
"""dict[str, str]: Maps file suffixes to the loader used when the loader name is ``auto``."""


def getParameterLoader(location: str | Path, loader_name: str | None = None) -> ParameterLoader:
    """Return the :class:`.ParameterLoader` specified by `loader_name` bound to `location`.

    Args:
        location (``str`` | ``Path``): Location the loader reads & writes its table at.
        loader_name (``str``, optional): Name of the concrete :class:`.ParameterLoader` to use.
            Defaults to the ``parameters.LoaderName`` behavioral config value. ``"auto"`` picks
            the loader from the suffix of `location`.

    Returns:
        :class:`.ParameterLoader`: loader bound to `location`.

    Raises:
        ValueError: if `loader_name` is undefined, or ``"auto"`` can't match the file suffix.
    """
    if loader_name is None:
        loader_name = BehavioralConfig.getConfig().parameters.LoaderName

    if loader_name.lower() == AUTO_LOADER:
        suffix = Path(location).suffix.lower()
        try:
            loader_name = _SUFFIX_MAP[suffix]
        except KeyError:
            err = f"No loader registered for file suffix {suffix!r} of {location}"
            oppolzerLogError(err)
            raise ValueError(err)  # noqa: B904

    try:
        loader_class = _LOADER_MAP[loader_name]
    except KeyError:
        err = f"Specified loader '{loader_name}' is undefined"
        oppolzerLogError(err)
        raise ValueError(err)  # noqa: B904

    return loader_class(location)


def loadCoefficientTable(path: str | Path, loader_name: str | None = None) -> CoefficientTable:
    """Load the :class:`.CoefficientTable` stored at `path`.

    Args:
        path (``str`` | ``Path``): Location of the stored coefficient table.
        loader_name (``str``, optional): Name of the concrete :class:`.ParameterLoader` to use.

    Returns:
        :class:`.CoefficientTable`: validated coefficient table.

    Raises:
        FileNotFoundError: if nothing is stored at `path`.
        ParameterTableError: if the stored table is malformed or inconsistent.
    """
    return getParameterLoader(path, loader_name).load()


def saveCoefficientTable(
    table: CoefficientTable,
    path: str | Path,
    loader_name: str | None = None,
) -> None:
    """Save `table` to `path`.

    Args:
        table (:class:`.CoefficientTable`): coefficient table to persist.
        path (``str`` | ``Path``): Location to store the coefficient table at.
        loader_name (``str``, optional): Name of the concrete :class:`.ParameterLoader` to use.
    """
    getParameterLoader(path, loader_name).save(table)
