"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config, display_params
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.params import resolve_params
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory import ParamsRecorder
    from ..application.ports import (
        DisplayConfig,
        DisplayParams,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        ResolveParams,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_resolve_params: ResolveParams = resolve_params
    _assert_display_params: DisplayParams = display_params
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding one implementation per application port."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    resolve_params: ResolveParams
    display_params: DisplayParams
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire the production adapters."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        resolve_params=resolve_params,
        display_params=display_params,
        init_logging=init_logging,
    )


def build_testing(*, recorder: ParamsRecorder | None = None) -> AppServices:
    """Wire the in-memory adapters.

    Merging stays the production :func:`resolve_params`; it is pure.

    Args:
        recorder: Receives every store the CLI would display. A fresh
            :class:`ParamsRecorder` when None.
    """
    from ..adapters.memory import (
        ParamsRecorder,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        resolve_params=resolve_params,
        display_params=recorder if recorder is not None else ParamsRecorder(),
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "display_params",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "resolve_params",
]
