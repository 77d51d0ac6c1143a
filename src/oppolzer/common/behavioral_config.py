"""Defines a global set of configurations that define how the computation behaves."""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any, Final


CONFIG_ENV_VARIABLE: str = "OPPOLZER_BEHAVIOR_CONFIG"
"""``str``: environment variable pointing to a custom behavioral config file."""


class SubConfig:
    """Class that represents a section in the configuration.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of section that this SubConfig object represents
        """
        self.section = section
        if not isinstance(self.section, str):
            raise TypeError("Config section must be a string")

    def setonce(self, name: str, value: Any):
        """Set the field for this `SubConfig`, but raise an error if the field was already set.

        Args:
            name (``str``): name of field to set
            value (``any``): value to set the field to
        """
        if hasattr(self, name):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Perform custom parsing operations on our custom config convention."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return logging level for this config file."""
        got = self.get(section, option)

        return self.LOGGING_LEVELS.get(got.upper(), NOTSET)


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "parameters": {
            "LoaderName": "auto",
        },
        "computation": {
            "EarthModel": 0,
            "OutputUnit": "MILLIARCSECOND",
        },
    }

    LOGGING_LEVEL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("Level",)}

    STR_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": ("OutputLocation",),
        "parameters": ("LoaderName",),
        "computation": ("OutputUnit",),
    }

    INT_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": (
            "MaxFileSize",
            "MaxFileCount",
        ),
        "computation": ("EarthModel",),
    }

    BOOL_ITEMS: Final[dict[str, tuple[str, ...]]] = {
        "logging": ("AllowMultipleHandlers",),
    }

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | Path | None = None):
        """Initialize the configuration object."""
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("oppolzer.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            # Read in the config file if it exists, otherwise use the defaults
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, section_config in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for key, value in section_config.items():
                # Grab the appropriate `getter` object for each key
                getter: Callable[[str, str], Any]
                if key in self.STR_ITEMS.get(section, ()):
                    getter = self._parser.get

                elif key in self.INT_ITEMS.get(section, ()):
                    getter = self._parser.getint

                elif key in self.BOOL_ITEMS.get(section, ()):
                    getter = self._parser.getboolean

                elif key in self.LOGGING_LEVEL_ITEMS.get(section, ()):
                    getter = self._parser.getlogginglevel

                else:
                    raise KeyError(
                        f"Configuration item '{section}::{key}' lacks a type classification.",
                    )

                try:
                    value = getter(section, key)  # noqa: PLW2901
                except ConfigError:
                    # Use default
                    pass
                finally:
                    sub.setonce(key, value)

            # Set this config object's `SubConfig`
            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    @classmethod
    def getConfig(cls, config_file_path: str | Path | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        If no `config_file_path` is given, the path stored in the ``OPPOLZER_BEHAVIOR_CONFIG``
        environment variable is used when set.
        """
        if cls.__shared_inst is None:
            if not config_file_path:
                config_file_path = os.environ.get(CONFIG_ENV_VARIABLE) or None

            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst
