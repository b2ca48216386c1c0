"""Configuration adapter - loading, parameter sources and display.

Contents:
    * :mod:`.loader` - lib_layered_config loading with caching and profiles
    * :mod:`.params` - Config tables and ``NAME=VALUE`` strings as parameter stores
    * :mod:`.display` - Configuration and parameter rendering
"""

from __future__ import annotations

from .display import display_config, display_params
from .loader import get_config, get_default_config_path
from .params import params_from_assignments, params_from_config, resolve_params

__all__ = [
    "display_config",
    "display_params",
    "get_config",
    "get_default_config_path",
    "params_from_assignments",
    "params_from_config",
    "resolve_params",
]
