"""Logging adapter - one-time lib_log_rich initialization for the CLI."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
