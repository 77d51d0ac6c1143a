"""Module defining the infrastructure used to persist Oppolzer series coefficient tables."""

from __future__ import annotations

# Standard Library Imports
import json
from abc import ABC, abstractmethod
from pathlib import Path

# Third Party Imports
from lxml import etree

# Local Imports
from ..common.exceptions import ParameterTableError
from ..common.logger import oppolzerLogDebug, oppolzerLogError
from ..common.utilities import getTypeString, loadJSONFile, saveJSONFile
from . import MULTIPLIER_NAMES, CoefficientRow, CoefficientTable


class ParameterLoader(ABC):
    """Abstract class defining how a :class:`.CoefficientTable` is read from & written to storage."""

    def __init__(self, location: str | Path):
        """Initializes the loader.

        Args:
            location (``str`` | ``Path``): Specifies where the coefficient table is stored.
        """
        self._location = location
        self._path = Path(location)

    @property
    def location(self) -> str | Path:
        """``str`` | ``Path``: where this loader reads & writes its coefficient table."""
        return self._location

    def load(self) -> CoefficientTable:
        """Read and validate the coefficient table at :attr:`.location`.

        Returns:
            :class:`.CoefficientTable`: validated, immutable coefficient table.

        Raises:
            FileNotFoundError: if nothing is stored at :attr:`.location`.
            ParameterTableError: if the stored table is malformed or inconsistent.
        """
        if not self._path.is_file():
            msg = f"Could not find coefficient table: {self._location}"
            oppolzerLogError(msg)
            raise FileNotFoundError(msg)

        table = self._readTable()
        oppolzerLogDebug(
            f"{getTypeString(self)} loaded {len(table)} terms for models {table.models} from {self._location}",
        )
        return table

    def save(self, table: CoefficientTable) -> None:
        """Write `table` to :attr:`.location`, replacing any existing content.

        Args:
            table (:class:`.CoefficientTable`): coefficient table to persist.

        Raises:
            TypeError: if `table` isn't a :class:`.CoefficientTable`.
        """
        if not isinstance(table, CoefficientTable):
            err = f"Unexpected 'table' type: {type(table)}"
            raise TypeError(err)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._writeTable(table)
        oppolzerLogDebug(f"{getTypeString(self)} saved {len(table)} terms to {self._location}")

    def _malformed(self, reason: str) -> ParameterTableError:
        """Log and return an error describing why the stored table can't be used."""
        msg = f"Malformed coefficient table {self._location}: {reason}"
        oppolzerLogError(msg)
        return ParameterTableError(msg)

    @abstractmethod
    def _readTable(self) -> CoefficientTable:
        """Parse the stored content into a :class:`.CoefficientTable`."""
        raise NotImplementedError

    @abstractmethod
    def _writeTable(self, table: CoefficientTable) -> None:
        """Serialize `table` into the stored content."""
        raise NotImplementedError


class JSONParameterLoader(ParameterLoader):
    """Concrete class storing coefficient tables as JSON documents.

    .. code-block:: json

        {
          "models": ["rigid", "elastic", "liquid core"],
          "parameters": [
            {"L": 0.0, "LP": 0.0, "F": 2.0, "D": 0.0, "OMEGA": 2.0, "model": [1.0, 2.0, 3.0]}
          ]
        }
    """

    MODELS_KEY: str = "models"
    PARAMETERS_KEY: str = "parameters"
    AMPLITUDES_KEY: str = "model"

    def _readTable(self) -> CoefficientTable:
        """Parse the JSON document into a :class:`.CoefficientTable`."""
        try:
            raw_data = loadJSONFile(self._path)
        except json.JSONDecodeError as err:
            raise self._malformed(f"invalid JSON ({err})") from err

        if not isinstance(raw_data, dict):
            raise self._malformed("top level must be a JSON object")

        try:
            models = raw_data[self.MODELS_KEY]
            parameters = raw_data[self.PARAMETERS_KEY]
        except KeyError as err:
            raise self._malformed(f"missing required key {err}") from err

        if not isinstance(models, list) or not isinstance(parameters, list):
            raise self._malformed(f"{self.MODELS_KEY!r} and {self.PARAMETERS_KEY!r} must be lists")

        rows = []
        for number, parameter in enumerate(parameters):
            if not isinstance(parameter, dict):
                raise self._malformed(f"parameter {number} must be a JSON object")
            try:
                multipliers = [parameter[name] for name in MULTIPLIER_NAMES]
                amplitudes = parameter[self.AMPLITUDES_KEY]
            except KeyError as err:
                raise self._malformed(f"parameter {number} is missing key {err}") from err
            rows.append(CoefficientRow.fromMultipliers(multipliers, amplitudes))

        return CoefficientTable(models=models, rows=rows)

    def _writeTable(self, table: CoefficientTable) -> None:
        """Serialize `table` into a JSON document."""
        parameters = []
        for row in table.rows:
            parameter = dict(zip(MULTIPLIER_NAMES, row.multipliers))
            parameter[self.AMPLITUDES_KEY] = list(row.amplitudes)
            parameters.append(parameter)

        saveJSONFile(
            self._path,
            {self.MODELS_KEY: list(table.models), self.PARAMETERS_KEY: parameters},
        )


class XMLParameterLoader(ParameterLoader):
    """Concrete class storing coefficient tables in the ``OppolzerParameter`` XML layout.

    .. code-block:: xml

        <OppolzerParameter>
          <Models>rigid</Models>
          <Models>elastic</Models>
          <parameter>
            <Parameter L="0" LP="0" F="2" D="0" OMEGA="2">
              <model>
                <double>1.0</double>
                <double>2.0</double>
              </model>
            </Parameter>
          </parameter>
        </OppolzerParameter>
    """

    ROOT_TAG: str = "OppolzerParameter"
    MODELS_TAG: str = "Models"
    PARAMETERS_TAG: str = "parameter"
    ROW_TAG: str = "Parameter"
    AMPLITUDES_TAG: str = "model"
    VALUE_TAG: str = "double"

    NSMAP: dict[str, str] = {
        "xsi": "http://www.w3.org/2001/XMLSchema-instance",
        "xsd": "http://www.w3.org/2001/XMLSchema",
    }
    """dict[str, str]: namespace declarations written on the root element."""

    def _readTable(self) -> CoefficientTable:
        """Parse the XML document into a :class:`.CoefficientTable`."""
        try:
            tree = etree.parse(str(self._path))
        except etree.XMLSyntaxError as err:
            raise self._malformed(f"invalid XML ({err})") from err

        root = tree.getroot()
        if root.tag != self.ROOT_TAG:
            raise self._malformed(f"root element must be <{self.ROOT_TAG}>, not <{root.tag}>")

        models = [element.text or "" for element in root.iterchildren(self.MODELS_TAG)]

        rows = []
        parameters = root.find(self.PARAMETERS_TAG)
        if parameters is not None:
            for number, element in enumerate(parameters.iterchildren(self.ROW_TAG)):
                try:
                    multipliers = [float(element.attrib[name]) for name in MULTIPLIER_NAMES]
                except KeyError as err:
                    raise self._malformed(f"parameter {number} is missing attribute {err}") from err
                except ValueError as err:
                    raise self._malformed(f"parameter {number} has a non-numeric multiplier") from err

                amplitudes = []
                if (model := element.find(self.AMPLITUDES_TAG)) is not None:
                    try:
                        amplitudes = [float(value.text) for value in model.iterchildren(self.VALUE_TAG)]
                    except (TypeError, ValueError) as err:
                        raise self._malformed(f"parameter {number} has a non-numeric amplitude") from err

                rows.append(CoefficientRow.fromMultipliers(multipliers, amplitudes))

        return CoefficientTable(models=models, rows=rows)

    def _writeTable(self, table: CoefficientTable) -> None:
        """Serialize `table` into an XML document."""
        root = etree.Element(self.ROOT_TAG, nsmap=self.NSMAP)
        for name in table.models:
            etree.SubElement(root, self.MODELS_TAG).text = name

        parameters = etree.SubElement(root, self.PARAMETERS_TAG)
        for row in table.rows:
            element = etree.SubElement(parameters, self.ROW_TAG)
            for name, multiplier in zip(MULTIPLIER_NAMES, row.multipliers):
                element.set(name, repr(multiplier))

            model = etree.SubElement(element, self.AMPLITUDES_TAG)
            for amplitude in row.amplitudes:
                etree.SubElement(model, self.VALUE_TAG).text = repr(amplitude)

        etree.ElementTree(root).write(
            str(self._path),
            encoding="utf-8",
            xml_declaration=True,
            pretty_print=True,
        )
