"""Generic value coercion with an explicit per-type converter registry.

Stored parameter values are opaque; callers ask for them with a static type.
:func:`coerce` converts a stored value to that type through a
specificity-first chain and never raises: when every step fails the caller
receives :func:`zero_value` of the requested type.

Contents:
    * :class:`Converter` - parse/convert/zero functions registered for one type.
    * :class:`ConverterRegistry` - type tag to converter mapping with MRO lookup.
    * :data:`DEFAULT_CONVERTERS` - registry populated for the supported primitives.
    * :func:`coerce` - convert a stored value to a requested type.
    * :func:`zero_value` - the default value of a requested type.
    * :func:`optional_inner` - unwrap ``X | None`` to ``X``.

System Role:
    Shared by :mod:`.store` (``ParamBlock.get_typed``) and :mod:`.registry`
    (``ParameterDefn.set_value``). Pure; no I/O and no logging.
"""

from __future__ import annotations

import math
import types
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any, TypeVar, Union, cast, get_args, get_origin

from .enums import ValueKind
from .errors import ConversionError

T = TypeVar("T")

ParseFn = Callable[[str, Any], Any]
"""``parse(raw, target)`` - the type's canonical string parser."""

ConvertFn = Callable[[Any, Any], Any]
"""``convert(value, target)`` - structural conversion of an arbitrary value."""

ZeroFn = Callable[[Any], Any]
"""``zero(target)`` - build the default value of ``target``."""

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


@dataclass(frozen=True, slots=True)
class Converter:
    """Conversion functions registered for one type tag."""

    parse: ParseFn | None = None
    convert: ConvertFn | None = None
    zero: ZeroFn | None = None


def optional_inner(target: Any) -> Any | None:
    """Return ``X`` when ``target`` is ``Optional[X]`` / ``X | None``, else None.

    Example:
        >>> from typing import Optional
        >>> optional_inner(Optional[int])
        <class 'int'>
        >>> optional_inner(int | None)
        <class 'int'>
        >>> optional_inner(int) is None
        True
    """
    if get_origin(target) not in (Union, types.UnionType):
        return None
    members = [arg for arg in get_args(target) if arg is not type(None)]
    if len(members) != 1 or len(members) == len(get_args(target)):
        return None
    return members[0]


def _is_passthrough(target: Any) -> bool:
    return target is object or target is Any


def _is_instance(value: Any, target: Any) -> bool:
    origin = get_origin(target) or target
    if not isinstance(origin, type):
        return False
    # bool subclasses int but is not an integer parameter value
    if isinstance(value, bool) and origin is not bool and issubclass(origin, int):
        return False
    return isinstance(value, origin)


class ConverterRegistry:
    """Mapping from a type tag to the functions that produce values of it.

    Lookup walks the target's MRO, so a single registration for a base class
    (``Enum``) serves every subclass. ``parse`` and ``convert`` raise
    :class:`ConversionError`; only :func:`coerce` turns failures into zero
    values.

    Example:
        >>> registry = ConverterRegistry()
        >>> registry.register(int, parse=lambda raw, _t: int(raw), zero=lambda _t: 0)
        >>> registry.parse("12", int)
        12
        >>> int in registry
        True
    """

    def __init__(self) -> None:
        self._converters: dict[type[Any], Converter] = {}

    def register(
        self,
        target: type[Any],
        *,
        parse: ParseFn | None = None,
        convert: ConvertFn | None = None,
        zero: ZeroFn | None = None,
    ) -> None:
        """Register (or replace) the converter for ``target``."""
        self._converters[target] = Converter(parse=parse, convert=convert, zero=zero)

    def lookup(self, target: Any) -> Converter | None:
        """Return the converter registered for ``target`` or its nearest base."""
        origin = get_origin(target) or target
        exact = self._converters.get(origin) if isinstance(origin, type) else None
        if exact is not None:
            return exact
        # IntEnum/StrEnum also inherit int/str; the Enum registration wins
        if isinstance(origin, type) and issubclass(origin, Enum) and Enum in self._converters:
            return self._converters[Enum]
        for klass in getattr(origin, "__mro__", ()):
            converter = self._converters.get(klass)
            if converter is not None:
                return converter
        return None

    def __contains__(self, target: object) -> bool:
        return self.lookup(target) is not None

    def copy(self) -> ConverterRegistry:
        """Return an independent registry with the same registrations."""
        clone = ConverterRegistry()
        clone._converters.update(self._converters)
        return clone

    def has_parser(self, target: Any) -> bool:
        converter = self.lookup(target)
        return converter is not None and converter.parse is not None

    def parse(self, raw: str, target: Any) -> Any:
        """Parse ``raw`` with the parser registered for ``target``.

        Raises:
            ConversionError: No parser is registered or the parser rejected ``raw``.
        """
        converter = self.lookup(target)
        if converter is None or converter.parse is None:
            raise ConversionError(f"No parser registered for {type_name(target)}")
        try:
            return converter.parse(raw, target)
        except ConversionError:
            raise
        except (ValueError, TypeError, KeyError, ArithmeticError) as exc:
            raise ConversionError(f"Cannot parse {raw!r} as {type_name(target)}: {exc}") from exc

    def convert(self, value: Any, target: Any) -> Any:
        """Structurally convert ``value`` to ``target``.

        Uses the registered ``convert`` function, then the registered parser
        for string values, then the target's constructor for unregistered
        classes.

        Raises:
            ConversionError: The value cannot be represented as ``target``.
        """
        converter = self.lookup(target)
        try:
            if converter is not None and converter.convert is not None:
                return converter.convert(value, target)
            if isinstance(value, str) and converter is not None and converter.parse is not None:
                return converter.parse(value, target)
            if converter is None and isinstance(target, type) and value is not None:
                return target(value)
        except ConversionError:
            raise
        except (ValueError, TypeError, KeyError, ArithmeticError) as exc:
            raise ConversionError(f"Cannot convert {value!r} to {type_name(target)}: {exc}") from exc
        raise ConversionError(f"Cannot convert {ValueKind.of(value).value} value {value!r} to {type_name(target)}")

    def zero(self, target: Any) -> Any:
        """Return the default value of ``target`` (None when none is registered)."""
        if optional_inner(target) is not None or _is_passthrough(target):
            return None
        converter = self.lookup(target)
        if converter is None or converter.zero is None:
            return None
        return converter.zero(target)


def type_name(target: Any) -> str:
    """Return a readable name for a type tag (``Optional[int]`` included).

    Example:
        >>> type_name(int)
        'int'
        >>> type_name(int | None)
        'int | None'
    """
    if get_args(target):
        return repr(target)
    return getattr(target, "__name__", None) or repr(target)


def _unsupported(value: Any, target: Any) -> ConversionError:
    return ConversionError(f"Cannot convert {ValueKind.of(value).value} value {value!r} to {type_name(target)}")


# ---------------------------------------------------------------- primitives


def _parse_str(raw: str, _target: Any) -> str:
    return raw


def _convert_str(value: Any, target: Any) -> str:
    kind = ValueKind.of(value)
    if kind is ValueKind.NONE:
        raise _unsupported(value, target)
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _parse_int(raw: str, _target: Any) -> int:
    return int(raw.strip())


def _convert_int(value: Any, target: Any) -> int:
    kind = ValueKind.of(value)
    if kind in (ValueKind.BOOL, ValueKind.INT):
        return int(value)
    if kind is ValueKind.FLOAT:
        # round half to even, like other structural numeric narrowing
        return int(round(value))
    if kind is ValueKind.STRING:
        return _parse_int(value, target)
    raise _unsupported(value, target)


def _parse_float(raw: str, _target: Any) -> float:
    return float(raw.strip())


def _convert_float(value: Any, target: Any) -> float:
    kind = ValueKind.of(value)
    if kind in (ValueKind.BOOL, ValueKind.INT, ValueKind.FLOAT):
        return float(value)
    if kind is ValueKind.STRING:
        return _parse_float(value, target)
    raise _unsupported(value, target)


def _parse_bool(raw: str, target: Any) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConversionError(f"Cannot parse {raw!r} as {type_name(target)}")


def _convert_bool(value: Any, target: Any) -> bool:
    kind = ValueKind.of(value)
    if kind is ValueKind.BOOL:
        return bool(value)
    if kind in (ValueKind.INT, ValueKind.FLOAT):
        if isinstance(value, float) and math.isnan(value):
            raise _unsupported(value, target)
        return value != 0
    if kind is ValueKind.STRING:
        return _parse_bool(value, target)
    raise _unsupported(value, target)


def _parse_decimal(raw: str, _target: Any) -> Decimal:
    return Decimal(raw.strip())


def _convert_decimal(value: Any, target: Any) -> Decimal:
    kind = ValueKind.of(value)
    if kind in (ValueKind.BOOL, ValueKind.INT):
        return Decimal(int(value))
    if kind is ValueKind.FLOAT:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    if kind is ValueKind.STRING:
        return _parse_decimal(value, target)
    raise _unsupported(value, target)


def _parse_datetime(raw: str, _target: Any) -> datetime:
    return datetime.fromisoformat(raw.strip())


def _convert_datetime(value: Any, target: Any) -> datetime:
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    kind = ValueKind.of(value)
    if kind in (ValueKind.INT, ValueKind.FLOAT):
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    if kind is ValueKind.STRING:
        return _parse_datetime(value, target)
    raise _unsupported(value, target)


def _parse_date(raw: str, _target: Any) -> date:
    return date.fromisoformat(raw.strip())


def _convert_date(value: Any, target: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if ValueKind.of(value) is ValueKind.STRING:
        return _parse_date(value, target)
    raise _unsupported(value, target)


def _parse_path(raw: str, _target: Any) -> Path:
    return Path(raw)


def _convert_path(value: Any, target: Any) -> Path:
    if isinstance(value, (str, PathLike)):
        return Path(cast("str | PathLike[str]", value))
    raise _unsupported(value, target)


def _parse_enum(raw: str, target: Any) -> Enum:
    enum_type = cast("type[Enum]", target)
    text = raw.strip()
    if text in enum_type.__members__:
        return enum_type[text]
    folded = text.casefold()
    for member_name, member in enum_type.__members__.items():
        if member_name.casefold() == folded:
            return member
    for member in enum_type:
        if str(member.value) == text:
            return member
    raise ConversionError(f"{raw!r} is not a member of {enum_type.__name__}")


def _convert_enum(value: Any, target: Any) -> Enum:
    if isinstance(value, str):
        return _parse_enum(value, target)
    return cast("type[Enum]", target)(value)


def _zero_enum(target: Any) -> Enum | None:
    return next(iter(cast("type[Enum]", target)), None)


def build_default_registry() -> ConverterRegistry:
    """Return a registry populated for every supported primitive/value type.

    Example:
        >>> registry = build_default_registry()
        >>> registry.parse("2.5", float)
        2.5
        >>> registry.zero(str)
        ''
    """
    registry = ConverterRegistry()
    registry.register(str, parse=_parse_str, convert=_convert_str, zero=lambda _t: "")
    registry.register(int, parse=_parse_int, convert=_convert_int, zero=lambda _t: 0)
    registry.register(float, parse=_parse_float, convert=_convert_float, zero=lambda _t: 0.0)
    registry.register(bool, parse=_parse_bool, convert=_convert_bool, zero=lambda _t: False)
    registry.register(Decimal, parse=_parse_decimal, convert=_convert_decimal, zero=lambda _t: Decimal(0))
    registry.register(datetime, parse=_parse_datetime, convert=_convert_datetime, zero=lambda _t: datetime.min)
    registry.register(date, parse=_parse_date, convert=_convert_date, zero=lambda _t: date.min)
    registry.register(Path, parse=_parse_path, convert=_convert_path)
    registry.register(Enum, parse=_parse_enum, convert=_convert_enum, zero=_zero_enum)
    return registry


DEFAULT_CONVERTERS: ConverterRegistry = build_default_registry()


def _convert_chain(value: Any, target: Any, registry: ConverterRegistry) -> Any:
    if _is_instance(value, target):
        return value
    convert_to = getattr(value, "convert_to", None)
    if callable(convert_to):
        return convert_to(target)
    return registry.convert(value, target)


def coerce(value: Any, target: type[T], registry: ConverterRegistry | None = None) -> T:
    """Convert ``value`` to ``target``, falling back to the zero value.

    The chain, most specific first:

    1. ``value`` already is a ``target`` (or ``target`` is ``object``/``Any``).
    2. ``target`` is ``X | None``: ``None`` stays ``None``, strings are parsed
       with ``X``'s parser, anything else continues against ``X``.
    3. ``value`` exposes ``convert_to(target)``.
    4. The registry's structural conversion.
    5. Otherwise :func:`zero_value` of ``target``.

    Args:
        value: Stored, untyped value.
        target: Requested type.
        registry: Converter registry; defaults to :data:`DEFAULT_CONVERTERS`.

    Returns:
        The converted value, or the zero value of ``target``. Never raises.

    Example:
        >>> coerce("42", int)
        42
        >>> coerce(3, float)
        3.0
        >>> coerce("not-a-number", int)
        0
        >>> from typing import Optional
        >>> coerce("7", Optional[int])
        7
        >>> coerce(None, Optional[int]) is None
        True
    """
    reg = registry if registry is not None else DEFAULT_CONVERTERS
    if _is_passthrough(target):
        return cast(T, value)
    inner = optional_inner(target)
    try:
        if inner is not None:
            if value is None:
                return cast(T, None)
            if isinstance(value, str) and not _is_instance(value, inner) and reg.has_parser(inner):
                return cast(T, reg.parse(value, inner))
            return cast(T, _convert_chain(value, inner, reg))
        return cast(T, _convert_chain(value, target, reg))
    except Exception:  # noqa: BLE001 - every failure maps to the zero value
        return cast(T, reg.zero(target))


def conform(value: Any, target: Any, registry: ConverterRegistry | None = None) -> Any:
    """Return ``value`` as a ``target``, raising instead of falling back.

    Same chain as :func:`coerce` for non-None values, without the zero
    value at the end.

    Raises:
        ConversionError: ``value`` cannot be represented as ``target``.

    Example:
        >>> conform(4, float)
        4.0
    """
    reg = registry if registry is not None else DEFAULT_CONVERTERS
    if _is_passthrough(target) or value is None:
        return value
    inner = optional_inner(target)
    try:
        return _convert_chain(value, inner if inner is not None else target, reg)
    except ConversionError:
        raise
    except Exception as exc:  # noqa: BLE001 - surfaced as a conversion failure
        raise ConversionError(f"Cannot convert {value!r} to {type_name(target)}: {exc}") from exc


def zero_value(target: type[T], registry: ConverterRegistry | None = None) -> T:
    """Return the default value of ``target``.

    Example:
        >>> zero_value(int), zero_value(str), zero_value(bool)
        (0, '', False)
        >>> zero_value(list) is None
        True
    """
    reg = registry if registry is not None else DEFAULT_CONVERTERS
    return cast(T, reg.zero(target))


__all__ = [
    "DEFAULT_CONVERTERS",
    "ConvertFn",
    "Converter",
    "ConverterRegistry",
    "ParseFn",
    "ZeroFn",
    "build_default_registry",
    "coerce",
    "conform",
    "optional_inner",
    "type_name",
    "zero_value",
]
