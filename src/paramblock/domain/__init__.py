"""Domain layer - pure parameter logic with no I/O or framework dependencies.

Contents:
    * :mod:`.store` - Case-insensitive parameter store and three-way merge
    * :mod:`.registry` - Typed, defaulted, string-settable parameter definitions
    * :mod:`.coercion` - Type coercion with an explicit converter registry
    * :mod:`.interfaces` - Retrieval and diagnostic-logger protocols
    * :mod:`.enums` - Domain enumerations (ValueKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .coercion import (
    DEFAULT_CONVERTERS,
    Converter,
    ConverterRegistry,
    build_default_registry,
    coerce,
    zero_value,
)
from .enums import OutputFormat, ValueKind
from .errors import (
    ConfigurationError,
    ConversionError,
    DuplicateParameterError,
    ParameterError,
    UnsupportedOperationError,
)
from .interfaces import DiagnosticLogger, Parameters
from .registry import ParameterDefn, ServiceParameters
from .store import ParamBlock

__all__ = [
    # Store
    "ParamBlock",
    # Registry
    "ParameterDefn",
    "ServiceParameters",
    # Coercion
    "DEFAULT_CONVERTERS",
    "Converter",
    "ConverterRegistry",
    "build_default_registry",
    "coerce",
    "zero_value",
    # Interfaces
    "DiagnosticLogger",
    "Parameters",
    # Enums
    "OutputFormat",
    "ValueKind",
    # Errors
    "ConfigurationError",
    "ConversionError",
    "DuplicateParameterError",
    "ParameterError",
    "UnsupportedOperationError",
]
