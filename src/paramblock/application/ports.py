"""Application ports - callable Protocols matched by adapter functions.

Each Protocol's ``__call__`` mirrors the signature of the production adapter
and its in-memory counterpart, so both satisfy it structurally.

System Role:
    Sits between domain and adapters. ``Config`` and ``Console`` are
    imported under ``TYPE_CHECKING`` only; the domain's retrieval and
    logging protocols are re-exported for callers that depend on ports.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.interfaces import DiagnosticLogger, Parameters
from ..domain.store import ParamBlock

if TYPE_CHECKING:
    from lib_layered_config import Config
    from rich.console import Console


class GetConfig(Protocol):
    """Load layered configuration with the bundled defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path of the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display configuration in the requested format."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        console: Console | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class ResolveParams(Protocol):
    """Merge a config section, ``NAME=VALUE`` strings and required defaults."""

    def __call__(
        self,
        config: Config,
        raws: Iterable[str] = ...,
        *,
        params_section: str = ...,
        required_section: str = ...,
    ) -> ParamBlock: ...


class DisplayParams(Protocol):
    """Display a parameter store."""

    def __call__(
        self,
        block: ParamBlock,
        *,
        output_format: OutputFormat = ...,
        title: str | None = ...,
        console: Console | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize the lib_log_rich runtime from configuration."""

    def __call__(self, config: Config) -> None: ...


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
