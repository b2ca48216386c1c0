"""Shared pytest fixtures for domain, adapter and CLI tests."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from paramblock.adapters.memory import ParamsRecorder
    from paramblock.composition import AppServices


def _load_dotenv() -> None:
    """Load a project ``.env`` when present so local runs can tweak LOG_* settings."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner; use ``result.stdout`` when parsing output."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """The production services factory for ``cli_runner.invoke(obj=...)``."""
    from paramblock.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper removing ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset lib_cli_exit_tools' flags to a clean baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` cache before the test (only before: it may be monkeypatched)."""
    from paramblock.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def params_recorder() -> ParamsRecorder:
    """A fresh recorder standing in for ``display_params``."""
    from paramblock.adapters.memory import ParamsRecorder

    return ParamsRecorder()


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Return ``inject(config, **overrides)`` building a services factory around ``config``.

    Only the configuration loader is replaced; logging, display and merge
    stay production adapters unless overridden by keyword.
    """
    from paramblock.composition import AppServices, build_production

    def _inject(config: Config, **overrides: Any) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(
            build_production(),
            get_config=_fake_get_config,
            **overrides,
        )
        return lambda: services

    return _inject


@pytest.fixture
def config_cli_context(
    inject_config: Callable[..., Callable[[], AppServices]],
) -> Callable[..., Callable[[], AppServices]]:
    """Like ``inject_config`` but takes the configuration as a plain dict."""

    def _create(config_data: dict[str, Any], **overrides: Any) -> Callable[[], AppServices]:
        return inject_config(Config(config_data, {}), **overrides)

    return _create


@pytest.fixture
def param_logger() -> logging.Logger:
    """A dedicated stdlib logger for registry diagnostics, captured by ``caplog``."""
    logger = logging.getLogger("tests.paramblock.registry")
    logger.setLevel(logging.DEBUG)
    return logger
