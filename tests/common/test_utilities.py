from __future__ import annotations

# Standard Library Imports
import json
from datetime import datetime

# Third Party Imports
import pytest

# OPPOLZER Imports
import oppolzer.common.utilities as utils
from oppolzer.common import pathSafeTime
from oppolzer.parameters.loaders import JSONParameterLoader, ParameterLoader


def testGetTypeString(tmp_path):
    """Ensure proper type string is returned for parent & child classes."""

    class DummyClass1:
        pass

    class DummyClass2(DummyClass1):
        pass

    assert utils.getTypeString(DummyClass1()) == "DummyClass1"
    assert utils.getTypeString(DummyClass2()) == "DummyClass2"
    loader = JSONParameterLoader(tmp_path / "table.json")
    assert isinstance(loader, ParameterLoader)
    assert utils.getTypeString(loader) == "JSONParameterLoader"


def testJSONFileRoundTrip(tmp_path):
    """Ensure JSON files are written and read back unchanged."""
    documents = {"models": ["rigid"], "values": [1.5, -2.0, 1e-12]}
    file_name = tmp_path / "documents.json"

    assert utils.saveJSONFile(file_name, documents) == file_name
    assert utils.loadJSONFile(file_name) == documents


def testLoadJSONFileErrors(tmp_path):
    """Ensure JSON file loader reports bad files."""
    with pytest.raises(FileNotFoundError):
        utils.loadJSONFile(tmp_path / "missing.json")

    bad_file = tmp_path / "bad.json"
    bad_file.write_text('{"models": [', encoding="utf-8")
    with pytest.raises(json.decoder.JSONDecodeError):
        utils.loadJSONFile(bad_file)


def testPathSafeTime():
    """Ensure time stamps contain no path-unsafe characters."""
    stamp = pathSafeTime()
    assert ":" not in stamp
    assert "." not in stamp
    assert pathSafeTime(datetime(2018, 12, 1, 12, 30, 5, 250)) == "20181201T123005000250"
