"""Render configuration and resolved parameters.

Contents:
    * :func:`display_config` - delegates to lib_layered_config's Rich display.
    * :func:`display_params` - a :class:`ParamBlock` as a table or as JSON.

Both flush pending lib_log_rich output first so log lines do not interleave
with the rendered result.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console
from rich.table import Table
from rich.text import Text

from paramblock.domain.enums import OutputFormat, ValueKind
from paramblock.domain.store import ParamBlock


def _flush_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display the layered configuration with provenance comments.

    Args:
        config: Loaded layered configuration.
        output_format: TOML-like human output or JSON.
        section: Show only this top-level section.
        console: Target console; lib_layered_config's default when None.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: ``section`` does not exist.
    """
    _flush_logs()
    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


def render_params_json(block: ParamBlock) -> str:
    """Serialize ``block`` as indented JSON, keeping insertion order.

    Values orjson cannot represent natively are written with ``str()``.

    Example:
        >>> print(render_params_json(ParamBlock({"Port": 8080, "debug": False})))
        {
          "Port": 8080,
          "debug": false
        }
    """
    return orjson.dumps(block.as_dict(), option=orjson.OPT_INDENT_2, default=str).decode()


def build_params_table(block: ParamBlock, *, title: str | None = None) -> Table:
    """Return a Rich table with one row per parameter: name, value, kind.

    Cells are plain :class:`Text`, so brackets in values are not read as markup.
    """
    table = Table(title=title)
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Kind", style="dim")
    for name, value in block.items():
        shown = repr(value) if isinstance(value, str) else str(value)
        table.add_row(Text(name), Text(shown), Text(ValueKind.of(value).value))
    return table


def display_params(
    block: ParamBlock,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Write ``block`` to ``console`` as a table (HUMAN) or as JSON.

    Args:
        block: The parameters to show.
        output_format: Rendering mode.
        title: Table title; ignored for JSON.
        console: Target console; a fresh stdout console when None.
    """
    _flush_logs()
    target = console if console is not None else Console()
    if output_format is OutputFormat.JSON:
        target.print(render_params_json(block), markup=False, highlight=False, soft_wrap=True)
        return
    target.print(build_params_table(block, title=title))


__all__ = [
    "build_params_table",
    "display_config",
    "display_params",
    "render_params_json",
]
