"""Application layer - port definitions implemented by the adapters.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DiagnosticLogger,
    DisplayConfig,
    DisplayParams,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    Parameters,
    ResolveParams,
)

__all__ = [
    "DiagnosticLogger",
    "DisplayConfig",
    "DisplayParams",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "Parameters",
    "ResolveParams",
]
