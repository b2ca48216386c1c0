"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ParameterError(Exception):
    """Base class for every error raised by the parameter core.

    Example:
        >>> from paramblock.domain.errors import ParameterError
        >>> str(ParameterError("boom"))
        'boom'
    """


class DuplicateParameterError(ParameterError, KeyError):
    """A parameter name is already present.

    Raised by :meth:`ParamBlock.add` when the name exists in any casing, and
    when a registry is declared with two definitions sharing a name. Inherits
    from KeyError so mapping-style callers can catch it as a key problem.

    Example:
        >>> from paramblock.domain.errors import DuplicateParameterError
        >>> err = DuplicateParameterError("Parameter 'Port' already exists")
        >>> isinstance(err, KeyError)
        True
    """

    def __str__(self) -> str:
        # KeyError.__str__ reprs its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ConversionError(ParameterError, ValueError):
    """A value could not be converted to the requested type.

    Raised by :class:`ConverterRegistry` parse/convert operations. Never
    escapes :func:`coerce` or ``get_typed``, which fall back to the zero value.

    Example:
        >>> from paramblock.domain.errors import ConversionError
        >>> err = ConversionError("Cannot convert 'abc' to int")
        >>> isinstance(err, ValueError)
        True
    """


class UnsupportedOperationError(ParameterError, NotImplementedError):
    """The operation is not available on this parameter source.

    Raised by :meth:`ServiceParameters.remove` because a registry's schema is
    fixed when it is declared.

    Example:
        >>> from paramblock.domain.errors import UnsupportedOperationError
        >>> err = UnsupportedOperationError("ServiceParameters does not support remove")
        >>> isinstance(err, NotImplementedError)
        True
    """


class ConfigurationError(ParameterError):
    """Missing, invalid, or incomplete configuration input.

    Raised at the adapter boundary when a ``NAME=VALUE`` assignment is
    malformed or a configuration section is not a table. Typically caught at
    CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from paramblock.domain.errors import ConfigurationError
        >>> str(ConfigurationError("Section 'params' is not a table"))
        "Section 'params' is not a table"
    """


__all__ = [
    "ConfigurationError",
    "ConversionError",
    "DuplicateParameterError",
    "ParameterError",
    "UnsupportedOperationError",
]
