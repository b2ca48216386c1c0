"""CLI core stories: traceback handling, main entry, help, info, unknown commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from paramblock import __init__conf__
from paramblock.adapters import cli as cli_mod
from paramblock.adapters.memory import get_config_in_memory
from paramblock.composition import AppServices, build_production, build_testing


def _exploding_resolve(*_args: Any, **_kwargs: Any) -> Any:
    raise RuntimeError("resolver exploded")


def _failing_factory() -> AppServices:
    return replace(build_production(), get_config=get_config_in_memory, resolve_params=_exploding_resolve)


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_and_restore_traceback_preferences(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True

    cli_mod.restore_traceback_state(previous)

    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append(cli_mod.snapshot_traceback_state())

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    with pytest.raises(ValueError, match="services_factory"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_runs_info_with_production_services(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["info"], services_factory=build_production) == 0

    assert f"Info for {__init__conf__.name}:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_without_arguments_shows_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main([], services_factory=build_testing) == 0

    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_reports_version(managed_traceback_state: None, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["--version"], services_factory=build_testing) == 0

    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_failures_are_summarized_without_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["resolve"], services_factory=_failing_factory)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "resolver exploded" in plain_err
    assert "Traceback (most recent call last)" not in plain_err


@pytest.mark.os_agnostic
def test_traceback_flag_prints_the_full_traceback(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    exit_code = cli_mod.main(["--traceback", "resolve"], services_factory=_failing_factory)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: resolver exploded" in plain_err
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_cli_without_arguments_prints_help(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "resolve" in result.output


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_is_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=build_testing)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_profile_is_passed_to_the_config_loader(cli_runner: CliRunner) -> None:
    seen: list[str | None] = []

    def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Any:
        seen.append(profile)
        return get_config_in_memory()

    services = replace(build_production(), get_config=_capturing_get_config)

    result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "info"], obj=lambda: services)

    assert result.exit_code == 0
    assert seen == ["staging"]


@pytest.mark.os_agnostic
def test_missing_services_factory_is_reported(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
