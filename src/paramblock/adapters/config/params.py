"""Build parameter stores from layered configuration and ``NAME=VALUE`` strings.

Contents:
    * :class:`ParamAssignment` - one parsed ``NAME=VALUE`` assignment.
    * :func:`parse_param` / :func:`coerce_value` - string parsing.
    * :func:`params_from_assignments` - the caller-passed source.
    * :func:`params_from_config` - one config table as a source.
    * :func:`resolve_params` - the merge performed by ``paramblock resolve``.

System Role:
    Adapter between ``lib_layered_config`` and the domain store. The domain
    never sees a :class:`Config`; it only receives :class:`ParamBlock`
    instances built here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config

from paramblock.domain.errors import ConfigurationError
from paramblock.domain.store import ParamBlock

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""

#: Config table holding file-sourced parameter values.
DEFAULT_PARAMS_SECTION = "params"
#: Config table holding the expected names and their defaults.
DEFAULT_REQUIRED_SECTION = "required"


@dataclass(frozen=True, slots=True)
class ParamAssignment:
    """A single parsed ``NAME=VALUE`` assignment."""

    name: str
    value: CoercedValue


def parse_param(raw: str) -> ParamAssignment:
    """Split ``NAME=VALUE`` at the first ``=`` and coerce the value.

    Surrounding whitespace is stripped from the name, never from the value.

    Raises:
        ConfigurationError: ``raw`` has no ``=`` or the name is empty.

    Examples:
        >>> parse_param("port=9000")
        ParamAssignment(name='port', value=9000)
        >>> parse_param("url=http://h/?a=b").value
        'http://h/?a=b'
        >>> parse_param("port")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        paramblock.domain.errors.ConfigurationError: Invalid parameter 'port': must be NAME=VALUE
    """
    if "=" not in raw:
        raise ConfigurationError(f"Invalid parameter {raw!r}: must be NAME=VALUE")
    name, value_str = raw.split("=", maxsplit=1)
    name = name.strip()
    if not name:
        raise ConfigurationError(f"Invalid parameter {raw!r}: name is empty")
    return ParamAssignment(name=name, value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal, falling back to the string itself.

    Examples:
        >>> coerce_value("true"), coerce_value("8"), coerce_value("0.5")
        (True, 8, 0.5)
        >>> coerce_value("null")
        >>> coerce_value("info")
        'info'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def params_from_assignments(raws: Iterable[str]) -> ParamBlock:
    """Build the caller-passed source from ``NAME=VALUE`` strings.

    A name given twice (in any casing) keeps the later value.

    Example:
        >>> params_from_assignments(["Port=1", "port=2"]).as_dict()
        {'Port': 2}
    """
    block = ParamBlock()
    for raw in raws:
        assignment = parse_param(raw)
        block.set(assignment.name, assignment.value)
    return block


def _flatten(prefix: str, table: Mapping[str, Any], out: dict[str, Any]) -> None:
    for key, value in table.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            _flatten(f"{name}.", value, out)
        else:
            out[name] = value


def params_from_config(config: Config, section: str) -> ParamBlock:
    """Return the config table ``section`` as a parameter store.

    Nested tables become dotted names (``[params.db] host = "x"`` yields
    ``db.host``). A missing section gives an empty store.

    Raises:
        ConfigurationError: ``section`` exists but is not a table.

    Example:
        >>> config = Config({"params": {"port": 1, "db": {"host": "x"}}}, {})
        >>> params_from_config(config, "params").as_dict()
        {'port': 1, 'db.host': 'x'}
        >>> len(params_from_config(config, "absent"))
        0
    """
    raw: object = config.get(section, default=None)
    if raw is None:
        return ParamBlock()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Configuration section {section!r} must be a table, got {type(raw).__name__}")
    flat: dict[str, Any] = {}
    _flatten("", raw, flat)
    block = ParamBlock()
    for name, value in flat.items():
        block.set(name, value)
    return block


def resolve_params(
    config: Config,
    raws: Iterable[str] = (),
    *,
    params_section: str = DEFAULT_PARAMS_SECTION,
    required_section: str = DEFAULT_REQUIRED_SECTION,
) -> ParamBlock:
    """Merge ``[params]``, ``NAME=VALUE`` strings and ``[required]`` defaults.

    Passed assignments beat configuration values, which beat the defaults
    of ``required_section``. Only names of ``required_section`` appear in
    the result.

    Example:
        >>> config = Config({"required": {"port": 80, "host": "h"}, "params": {"port": 81}}, {})
        >>> resolve_params(config, ["HOST=example"]).as_dict()
        {'port': 81, 'host': 'example'}
    """
    passed = params_from_assignments(raws)
    from_config = params_from_config(config, params_section)
    required = params_from_config(config, required_section)
    return ParamBlock.merge(from_config, passed, required)


__all__ = [
    "DEFAULT_PARAMS_SECTION",
    "DEFAULT_REQUIRED_SECTION",
    "CoercedValue",
    "ParamAssignment",
    "coerce_value",
    "params_from_assignments",
    "params_from_config",
    "resolve_params",
]
