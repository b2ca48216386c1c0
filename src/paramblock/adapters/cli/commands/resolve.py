"""``paramblock resolve`` - merge configured, passed and required parameters.

The ``[required]`` table names every parameter with its default; the
``[params]`` table and ``--param NAME=VALUE`` options override those
defaults, ``--param`` winning. Names match regardless of case.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Final

import lib_log_rich.runtime
import orjson
import rich_click as click

from paramblock.adapters.config.params import DEFAULT_PARAMS_SECTION, DEFAULT_REQUIRED_SECTION, parse_param
from paramblock.domain.coercion import coerce
from paramblock.domain.enums import OutputFormat
from paramblock.domain.errors import ConfigurationError
from paramblock.domain.store import ParamBlock

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from .config import FORMAT_CHOICE

logger = logging.getLogger(__name__)

#: Target types selectable with ``--type``.
VALUE_TYPES: Final[dict[str, type[Any]]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
    "date": datetime.date,
    "datetime": datetime.datetime,
    "path": Path,
    "object": object,
}


def _validate_params(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> tuple[str, ...]:
    for raw in value:
        try:
            parse_param(raw)
        except ConfigurationError as exc:
            raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc
    return value


def _render_single(name: str, value: Any, fmt: OutputFormat) -> str:
    if fmt is OutputFormat.JSON:
        return orjson.dumps({name: value}, default=str).decode()
    return coerce(value, str)


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--param",
    "params",
    multiple=True,
    metavar="NAME=VALUE",
    callback=_validate_params,
    help="Pass a parameter value; beats the configuration (repeatable)",
)
@click.option(
    "--params-section",
    default=DEFAULT_PARAMS_SECTION,
    show_default=True,
    help="Configuration table with configured values",
)
@click.option(
    "--required-section",
    default=DEFAULT_REQUIRED_SECTION,
    show_default=True,
    help="Configuration table naming the expected parameters and their defaults",
)
@click.option(
    "--format",
    "output_format",
    type=FORMAT_CHOICE,
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option("--get", "get_name", default=None, metavar="NAME", help="Print only this parameter")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(list(VALUE_TYPES), case_sensitive=False),
    default="str",
    show_default=True,
    help="Type the --get value is converted to",
)
@click.pass_context
def cli_resolve(
    ctx: click.Context,
    params: tuple[str, ...],
    params_section: str,
    required_section: str,
    output_format: str,
    get_name: str | None,
    type_name: str,
) -> None:
    r"""Show the parameters a service would receive.

    \b
    Examples:
      paramblock resolve
      paramblock resolve --param port=9000 --format json
      paramblock resolve --get port --type int
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    extra = {"command": "resolve", "passed": len(params), "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-resolve", extra=extra):
        try:
            block = cli_ctx.services.resolve_params(
                cli_ctx.config,
                params,
                params_section=params_section,
                required_section=required_section,
            )
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        logger.info("Resolved %d parameters", len(block), extra={"required_section": required_section})

        if get_name is None:
            title = f"Resolved parameters ({required_section})"
            cli_ctx.services.display_params(block, output_format=fmt, title=title)
            return
        _echo_single(block, get_name, VALUE_TYPES[type_name.lower()], fmt)


def _echo_single(block: ParamBlock, name: str, target: type[Any], fmt: OutputFormat) -> None:
    if not block.has(name):
        click.echo(f"Error: unknown parameter {name!r}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT)
    click.echo(_render_single(name, block.get_typed(name, target), fmt))


__all__ = ["VALUE_TYPES", "cli_resolve"]
