"""CLI config stories: display, JSON format, sections, missing sections."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result

from paramblock.adapters import cli as cli_mod
from paramblock.adapters.cli.exit_codes import ExitCode


@pytest.mark.os_agnostic
def test_config_displays_the_bundled_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "required"], obj=production_factory)

    assert result.exit_code == 0
    assert "port" in result.output


@pytest.mark.os_agnostic
def test_config_displays_injected_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    factory = config_cli_context({"params": {"port": 9000, "host": "db"}})

    result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "params" in result.output
    assert "9000" in result.output


@pytest.mark.os_agnostic
def test_config_json_section_is_parseable(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    factory = config_cli_context({"params": {"port": 9000}, "other": {"x": 1}})

    result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "params"], obj=factory)

    assert result.exit_code == 0
    payload = orjson.loads(result.stdout)
    assert "9000" in str(payload)
    assert "other" not in result.stdout


@pytest.mark.os_agnostic
def test_config_with_unknown_section_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    factory = config_cli_context({"params": {"port": 1}})

    result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "nope"], obj=factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "Error:" in result.stderr


@pytest.mark.os_agnostic
def test_config_rejects_unknown_formats(
    cli_runner: CliRunner,
    config_cli_context: Callable[..., Callable[[], Any]],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "yaml"], obj=config_cli_context({}))

    assert result.exit_code == 2
