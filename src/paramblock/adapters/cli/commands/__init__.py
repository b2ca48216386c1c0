"""CLI subcommands registered on the root group.

Contents:
    * :func:`.info.cli_info` - package metadata
    * :func:`.config.cli_config` - layered configuration display
    * :func:`.resolve.cli_resolve` - parameter merge
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .resolve import cli_resolve

__all__ = ["cli_config", "cli_info", "cli_resolve"]
