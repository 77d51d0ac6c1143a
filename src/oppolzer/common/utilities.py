"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Standard Library Imports
import json

# Local Imports
from .logger import oppolzerLogError


def getTypeString(class_instance):
    """Return the class type as a string without any base class information.

    Args:
        class_instance (generic class instance): instance of a general class

    Returns:
        ``str``: name of the class without base classes
    """
    return class_instance.__class__.__name__


def loadJSONFile(file_name):
    """Load in a JSON file into a Python object.

    Args:
        file_name (``str``): name of JSON file to load

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``json.decoder.JSONDecodeError``: error parsing JSON file (bad syntax)

    Returns:
        ``dict``: documents loaded from the JSON file
    """
    try:
        with open(file_name, encoding="utf-8") as input_file:
            json_data = json.load(input_file)
    except FileNotFoundError as err:
        msg = f"Could not find JSON file: {file_name}"
        oppolzerLogError(msg)

        raise err
    except json.decoder.JSONDecodeError as err:
        msg = f"Decoding error reading JSON file: {file_name}"
        oppolzerLogError(msg)

        raise err

    return json_data


def saveJSONFile(file_name, json_data):
    """Save a Python object to a JSON file.

    Args:
        file_name (``str`` | ``Path``): name of JSON file to write
        json_data (``dict``): JSON-serializable documents to write

    Returns:
        ``str``: name of the JSON file that was written
    """
    with open(file_name, "w", encoding="utf-8") as out_file:
        json.dump(json_data, out_file, indent=2)
        out_file.write("\n")

    return file_name
