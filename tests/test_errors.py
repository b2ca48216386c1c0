"""Domain error types: hierarchy and message preservation."""

from __future__ import annotations

import pytest

from paramblock.domain.errors import (
    ConfigurationError,
    ConversionError,
    DuplicateParameterError,
    ParameterError,
    UnsupportedOperationError,
)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "error_type",
    [ConfigurationError, ConversionError, DuplicateParameterError, UnsupportedOperationError],
)
def test_every_error_derives_from_parameter_error(error_type: type[Exception]) -> None:
    assert issubclass(error_type, ParameterError)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error_type", "builtin"),
    [
        (DuplicateParameterError, KeyError),
        (ConversionError, ValueError),
        (UnsupportedOperationError, NotImplementedError),
    ],
)
def test_errors_can_be_caught_as_their_builtin_counterpart(
    error_type: type[Exception],
    builtin: type[Exception],
) -> None:
    with pytest.raises(builtin):
        raise error_type("boom")


@pytest.mark.os_agnostic
def test_duplicate_parameter_error_message_is_not_quoted() -> None:
    """KeyError quotes its argument; the duplicate error shows it verbatim."""
    exc = DuplicateParameterError("Parameter 'Port' already exists")

    assert str(exc) == "Parameter 'Port' already exists"


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    assert str(ConfigurationError("Section 'params' is not a table")) == "Section 'params' is not a table"
