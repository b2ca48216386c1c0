"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; the metadata tests
compare both.

Contents:
    * Package identity: :data:`name`, :data:`title`, :data:`version`, ...
    * Layered configuration identifiers used by ``lib_layered_config``.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "paramblock"
#: One-line description shown by ``--help``.
title: Final[str] = "Layered parameter resolution with typed, command-line settable parameters"
#: Release version.
version: Final[str] = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://example.com/paramblock"
#: Author name.
author: Final[str] = "paramblock maintainers"
#: Author contact.
author_email: Final[str] = "maintainers@example.com"
#: Console script name.
shell_command: Final[str] = "paramblock"

#: Vendor directory name used by lib_layered_config on macOS/Windows.
LAYEREDCONF_VENDOR: Final[str] = "paramblock"
#: Application directory name used by lib_layered_config on macOS/Windows.
LAYEREDCONF_APP: Final[str] = "Paramblock"
#: Slug used for XDG paths and environment-variable prefixes.
LAYEREDCONF_SLUG: Final[str] = "paramblock"


def print_info() -> None:
    """Print the package metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for paramblock:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
