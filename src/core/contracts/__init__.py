"""
Contract Validation Module

Validation of symbol table and format directive configuration against
JSON Schema contracts.
"""

from .validators import (
    ContractValidator,
    FormatDirectiveValidator,
    SchemaLoader,
    SymbolsValidator,
    load_format_directive,
    load_symbols,
    load_symbols_file,
    validate_format_directive,
    validate_symbols,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SymbolsValidator",
    "FormatDirectiveValidator",
    # Functions
    "validate_symbols",
    "validate_format_directive",
    "load_symbols",
    "load_symbols_file",
    "load_format_directive",
]
