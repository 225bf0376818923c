"""
JSON Schema Contract Validators

Validates numeral system definitions supplied as plain data (e.g. parsed
from a JSON or YAML configuration file) against the formal contract, then
builds the immutable Pydantic model.

Schemas:
- numeral_system.json (one definition, discriminated by "kind")
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import TypeAdapter

from numerals.core.domain.numeral_system import NumeralSystemKind

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for the JSON Schema files shipped in contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schemas by name
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'numeral_system')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()

_NUMERAL_SYSTEM_ADAPTER: TypeAdapter[NumeralSystemKind] = TypeAdapter(NumeralSystemKind)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class NumeralSystemValidator:
    """
    Checks plain-data definitions against numeral_system.json.

    The schema is compiled once per instance; instances are reusable.
    """

    SCHEMA_NAME = "numeral_system"

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema = loader.load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If data violates the contract
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Every contract violation in data, e.g. for reporting a whole file."""
        return self._validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeral_system(data: Dict[str, Any]) -> None:
    """
    Validate numeral system definition data.

    Raises:
        ValidationError: If data violates the schema
    """
    NumeralSystemValidator().validate(data)


def load_numeral_system(data: Dict[str, Any]) -> NumeralSystemKind:
    """
    Validate data against the contract and build the definition.

    Args:
        data: Definition as plain data, e.g.
            {"kind": "bijective", "symbols": ["a", "b", "c"]}

    Returns:
        Frozen numeral system model

    Raises:
        jsonschema.ValidationError: If data violates the contract
        pydantic.ValidationError: If the model rejects the data
    """
    validate_numeral_system(data)
    return _NUMERAL_SYSTEM_ADAPTER.validate_python(data)


def dump_numeral_system(system: NumeralSystemKind) -> Dict[str, Any]:
    """
    Plain-data form of a definition, accepted by load_numeral_system().

    Tuples become lists and enums their values (JSON-compatible).
    """
    return _NUMERAL_SYSTEM_ADAPTER.dump_python(system, mode="json")
