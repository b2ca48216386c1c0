"""Parameter sources built from configuration tables and ``NAME=VALUE`` strings."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import rtoml
from lib_layered_config import Config

from paramblock.adapters.config.loader import get_default_config_path
from paramblock.adapters.config.params import (
    ParamAssignment,
    coerce_value,
    params_from_assignments,
    params_from_config,
    parse_param,
    resolve_params,
)
from paramblock.domain import ConfigurationError

# ======================== parse_param ========================


@pytest.mark.os_agnostic
def test_parse_param_coerces_json_literals() -> None:
    assert parse_param("port=9000") == ParamAssignment(name="port", value=9000)
    assert parse_param("debug=true").value is True
    assert parse_param("tags=[\"a\",\"b\"]").value == ["a", "b"]


@pytest.mark.os_agnostic
def test_parse_param_keeps_plain_strings() -> None:
    assert parse_param("level=warning").value == "warning"


@pytest.mark.os_agnostic
def test_parse_param_splits_at_the_first_equals_only() -> None:
    assert parse_param("dsn=a=b").value == "a=b"


@pytest.mark.os_agnostic
def test_parse_param_strips_the_name_but_not_the_value() -> None:
    result = parse_param(" host = x ")

    assert result.name == "host"
    assert result.value == " x "


@pytest.mark.os_agnostic
def test_parse_param_allows_an_empty_value() -> None:
    assert parse_param("host=").value == ""


@pytest.mark.os_agnostic
def test_parse_param_rejects_missing_equals() -> None:
    with pytest.raises(ConfigurationError, match="NAME=VALUE"):
        parse_param("port")


@pytest.mark.os_agnostic
def test_parse_param_rejects_empty_name() -> None:
    with pytest.raises(ConfigurationError, match="name is empty"):
        parse_param("=1")


@pytest.mark.os_agnostic
def test_coerce_value_reads_null_as_none() -> None:
    assert coerce_value("null") is None


# ======================== params_from_assignments ========================


@pytest.mark.os_agnostic
def test_later_assignments_win_and_keep_first_casing() -> None:
    block = params_from_assignments(["Port=1", "PORT=2", "host=h"])

    assert block.as_dict() == {"Port": 2, "host": "h"}


@pytest.mark.os_agnostic
def test_no_assignments_give_an_empty_store() -> None:
    assert len(params_from_assignments([])) == 0


# ======================== params_from_config ========================


@pytest.mark.os_agnostic
def test_params_from_config_reads_one_table(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"params": {"Port": 1, "host": "h"}, "other": {"x": 1}})

    block = params_from_config(config, "params")

    assert block.as_dict() == {"Port": 1, "host": "h"}


@pytest.mark.os_agnostic
def test_params_from_config_flattens_nested_tables(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"params": {"db": {"host": "x", "pool": {"size": 5}}}})

    block = params_from_config(config, "params")

    assert block.as_dict() == {"db.host": "x", "db.pool.size": 5}
    assert block.get_typed("DB.POOL.SIZE", int) == 5


@pytest.mark.os_agnostic
def test_params_from_config_missing_section_is_empty(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    assert len(params_from_config(config_factory({}), "params")) == 0


@pytest.mark.os_agnostic
def test_params_from_config_rejects_non_table_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    with pytest.raises(ConfigurationError, match="must be a table"):
        params_from_config(config_factory({"params": 3}), "params")


# ======================== resolve_params ========================


@pytest.mark.os_agnostic
def test_resolve_params_applies_all_three_layers(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory(
        {
            "required": {"host": "localhost", "port": 8080, "debug": False},
            "params": {"PORT": 9000, "stray": 1},
        }
    )

    block = resolve_params(config, ["Debug=true"])

    assert block.as_dict() == {"host": "localhost", "port": 9000, "debug": True}


@pytest.mark.os_agnostic
def test_resolve_params_accepts_custom_sections(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    config = config_factory({"schema": {"a": 1}, "values": {"a": 2}})

    block = resolve_params(config, params_section="values", required_section="schema")

    assert block.as_dict() == {"a": 2}


@pytest.mark.os_agnostic
def test_resolve_params_without_required_section_is_empty(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    assert len(resolve_params(config_factory({"params": {"a": 1}}), ["a=2"])) == 0


@pytest.mark.os_agnostic
def test_resolve_params_uses_bundled_defaults() -> None:
    defaults = rtoml.load(get_default_config_path())
    block = resolve_params(Config(defaults, {}))

    assert block.get_typed("port", int) == defaults["required"]["port"]
    assert block.names() == list(defaults["required"])
