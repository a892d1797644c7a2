"""
JSON Schema Contract Validators

Symbol tables and format directives can be supplied as configuration
(JSON files or plain dicts). They are validated against the JSON Schema
contracts in schema/ before being materialized as immutable models.

Schemas:
- symbols.json (Symbols)
- format_directive.json (FormatDirective)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.directive import FormatDirective
from src.core.domain.symbols import DEFAULT_SYMBOLS, Symbols

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader of JSON Schema files.

    Schemas live in schema/ next to this module.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'symbols')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: if the schema file does not exist
            ValueError: if the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class of contract validators.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: if data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class SymbolsValidator(ContractValidator):
    """Validator of the symbols contract"""

    def __init__(self):
        super().__init__("symbols")


class FormatDirectiveValidator(ContractValidator):
    """Validator of the format_directive contract"""

    def __init__(self):
        super().__init__("format_directive")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_symbols(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: if data does not match symbols.json
    """
    SymbolsValidator().validate(data)


def validate_format_directive(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: if data does not match format_directive.json
    """
    FormatDirectiveValidator().validate(data)


def load_symbols(data: Dict[str, Any], base: Symbols = DEFAULT_SYMBOLS) -> Symbols:
    """
    Build a Symbols table from configuration data.

    Keys not present in data keep the value from base, including
    individual unit strings inside dms_units / hms_units.

    Args:
        data: mapping matching symbols.json
        base: table providing the values for missing keys

    Returns:
        New immutable Symbols

    Raises:
        ValidationError: if data does not match the schema

    Examples:
        >>> load_symbols({"dms_units": {"hr_deg": "d"}}).dms_units.hr_deg
        'd'
    """
    validate_symbols(data)
    merged = base.model_dump()
    for key, value in data.items():
        if isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return Symbols.model_validate(merged)


def load_symbols_file(path: Union[str, Path], base: Symbols = DEFAULT_SYMBOLS) -> Symbols:
    """
    Load a Symbols table from a JSON file (see load_symbols).
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    symbols = load_symbols(data, base)
    logger.info("loaded symbol table from %s", path)
    return symbols


def load_format_directive(data: Dict[str, Any]) -> FormatDirective:
    """
    Build a FormatDirective from configuration data.

    Raises:
        ValidationError: if data does not match format_directive.json
    """
    validate_format_directive(data)
    return FormatDirective.model_validate(data)
