"""Type-safe domain enums for stored value kinds and output formats."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum


class ValueKind(str, Enum):
    """Discriminator for the opaque values held by a parameter store.

    Stored values are untyped; converters switch on the kind reported by
    :meth:`ValueKind.of` instead of probing the value's type ad hoc.

    Attributes:
        NONE: The ``None`` value.
        BOOL: ``True`` or ``False`` (checked before INT).
        INT: Integral numbers.
        FLOAT: Any other number (float, Decimal, Fraction).
        STRING: Text.
        MAPPING: Dict-like values.
        SEQUENCE: Lists and tuples (not text or bytes).
        OTHER: Everything else.

    Example:
        >>> ValueKind.of(True)
        <ValueKind.BOOL: 'bool'>
        >>> ValueKind.of(3) == "int"
        True
        >>> ValueKind.of([1, 2]).value
        'sequence'
    """

    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OTHER = "other"

    @classmethod
    def of(cls, value: object) -> ValueKind:
        """Classify ``value``."""
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, numbers.Integral):
            return cls.INT
        if isinstance(value, numbers.Number):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, Mapping):
            return cls.MAPPING
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return cls.SEQUENCE
        return cls.OTHER


class OutputFormat(str, Enum):
    """Output format options for configuration and parameter display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output (TOML-like for config, a table for parameters).
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "ValueKind",
]
