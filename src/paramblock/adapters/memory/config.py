"""In-memory configuration adapters."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from lib_layered_config import Config
from rich.console import Console

from ...domain.enums import OutputFormat
from ...domain.store import ParamBlock


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path that is never read."""
    return Path(tempfile.gettempdir()) / "paramblock" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


def _empty_blocks() -> list[tuple[ParamBlock, OutputFormat]]:
    return []


@dataclass
class ParamsRecorder:
    """Collects the stores passed to it instead of printing them.

    Example:
        >>> recorder = ParamsRecorder()
        >>> recorder(ParamBlock({"a": 1}), output_format=OutputFormat.JSON)
        >>> recorder.last.as_dict()
        {'a': 1}
    """

    shown: list[tuple[ParamBlock, OutputFormat]] = field(default_factory=_empty_blocks)

    def __call__(
        self,
        block: ParamBlock,
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
        title: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.shown.append((block, output_format))

    @property
    def last(self) -> ParamBlock:
        """The most recently shown store; raises IndexError when none was shown."""
        return self.shown[-1][0]


__all__ = [
    "ParamsRecorder",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
