"""Adapters layer - configuration, logging and command-line integrations.

Contents:
    * :mod:`.config` - Layered configuration loading, parameter sources, display
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.memory` - In-memory stand-ins used by the testing composition
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
