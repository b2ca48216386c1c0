"""Case-insensitive parameter stores, typed parameter registries and their merge.

Public surface:
    * :class:`ParamBlock` - name/value store with the three-way :meth:`ParamBlock.merge`
    * :class:`ServiceParameters` / :class:`ParameterDefn` - typed, string-settable parameters
    * :func:`coerce` - best-effort type conversion
    * :func:`get_config` / :func:`resolve_params` - layered configuration as parameter sources
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config, resolve_params
from .domain import (
    ConfigurationError,
    ConversionError,
    ConverterRegistry,
    DiagnosticLogger,
    DuplicateParameterError,
    ParamBlock,
    ParameterDefn,
    ParameterError,
    Parameters,
    ServiceParameters,
    UnsupportedOperationError,
    coerce,
    zero_value,
)

__all__ = [
    "ConfigurationError",
    "ConversionError",
    "ConverterRegistry",
    "DiagnosticLogger",
    "DuplicateParameterError",
    "ParamBlock",
    "ParameterDefn",
    "ParameterError",
    "Parameters",
    "ServiceParameters",
    "UnsupportedOperationError",
    "coerce",
    "get_config",
    "print_info",
    "resolve_params",
]
