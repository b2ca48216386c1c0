"""In-memory adapters for the testing composition.

They satisfy the same ports as the production adapters without touching
the filesystem, the console or the lib_log_rich runtime.

Contents:
    * :mod:`.config` - configuration loading and display stand-ins
    * :mod:`.logging` - no-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    ParamsRecorder,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from paramblock.application.ports import (
        DisplayConfig,
        DisplayParams,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_display_params: DisplayParams = ParamsRecorder()
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "ParamsRecorder",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
