"""Typed parameter definitions settable from strings.

A service declares its parameters once, at startup, as :class:`ParameterDefn`
instances with a name, description, declared type, default, and optional
short command-line symbols. :class:`ServiceParameters` owns the ordered
definitions, assigns their defaults, accepts string values (typically from
command-line tokens), and hands values back with their declared type.

Contents:
    * :class:`ParameterDefn` - one typed, defaulted, string-settable parameter.
    * :class:`ServiceParameters` - the fixed-schema registry of definitions.

System Role:
    Domain layer. Implements the same retrieval capability as
    :class:`~paramblock.domain.store.ParamBlock`, so either can serve as the
    configuration source of :meth:`ParamBlock.merge`. Diagnostics go to the
    injected :class:`~paramblock.domain.interfaces.DiagnosticLogger`; nothing
    here raises for bad input except :meth:`ServiceParameters.remove`.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from .coercion import (
    DEFAULT_CONVERTERS,
    ConverterRegistry,
    coerce,
    conform,
    optional_inner,
    type_name,
    zero_value,
)
from .errors import ConversionError, DuplicateParameterError, UnsupportedOperationError
from .interfaces import DiagnosticLogger

T = TypeVar("T")

_BOOL_WORDS = frozenset({"true", "false", "yes", "no", "on", "off", "1", "0"})


class ParameterDefn(Generic[T]):
    """A parameter of a declared type whose value can be set from a string.

    The declared type is fixed at construction. It defaults to the type of
    ``default``; pass ``value_type`` when the default is None or when a
    wider type is intended (``value_type=float`` with an ``int`` default).
    An explicit ``value_type`` converts the default once, here, so the
    value always has the declared type. ``Optional[X]`` declarations are
    parsed and converted as ``X``.

    Args:
        name: Parameter name, matched case-insensitively.
        desc: Short human-readable description.
        default: Value assigned by :meth:`assign_default`.
        *symbols: Extra command-line forms of the parameter, e.g. ``"-c"``.
        value_type: Declared type; inferred from ``default`` when omitted.

    Raises:
        TypeError: ``default`` is None and no ``value_type`` was given, or
            ``default`` cannot be converted to ``value_type``.

    Example:
        >>> defn = ParameterDefn("Count", "Number of workers", 4, "-c")
        >>> defn.value_type
        <class 'int'>
        >>> defn.set_value("12")
        True
        >>> defn.value
        12
        >>> defn.get_value()
        '12'
    """

    def __init__(
        self,
        name: str,
        desc: str,
        default: T,
        *symbols: str,
        value_type: type[T] | None = None,
    ) -> None:
        if value_type is None:
            if default is None:
                raise TypeError(f"Parameter {name!r}: value_type is required when the default is None")
            value_type = type(default)
        else:
            try:
                default = conform(default, value_type)
            except ConversionError as exc:
                raise TypeError(f"Parameter {name!r}: default {default!r} is not a {type_name(value_type)}") from exc
        self.name = name
        self.desc = desc
        self.symbols: tuple[str, ...] = tuple(symbols)
        self.logger: DiagnosticLogger = logging.getLogger(__name__)
        self.converters: ConverterRegistry = DEFAULT_CONVERTERS
        self._value_type: type[T] = value_type
        self._default = default
        self._value: T = copy.copy(default)
        self._log_header = f"[ParameterDefn:{name}]"

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    @property
    def default(self) -> T:
        return self._default

    @property
    def value(self) -> T:
        return self._value

    def assign_default(self) -> None:
        """Set the current value back to the default."""
        self._value = copy.copy(self._default)

    def get_value(self) -> str:
        """Return the current value as a string (empty for None)."""
        if self._value is None:
            return ""
        return coerce(self._value, str, self.converters)

    def get_object_value(self) -> Any:
        return self._value

    def set_value(self, raw: str) -> bool:
        """Parse ``raw`` into the declared type and store it.

        The type's registered parser is preferred; types without one go
        through the registry's generic conversion. Any failure is logged
        with the offending string and leaves the current value unchanged.

        Returns:
            True when a new value was stored.
        """
        inner = optional_inner(self._value_type)
        target = inner if inner is not None else self._value_type
        try:
            if self.converters.has_parser(target):
                self._value = self.converters.parse(raw, target)
                return True
            self._value = self.converters.convert(raw, target)
        except Exception as exc:  # noqa: BLE001 - reported, previous value kept
            self.logger.error("%s Failed parsing parameter value '%s': '%s'", self._log_header, raw, exc)
            return False
        self.logger.debug("%s SetValue. Converter. %s = %s", self._log_header, self.name, self._value)
        return True

    def matches(self, name: str) -> bool:
        """Return True when ``name`` equals this parameter's name in any casing."""
        return self.name.lower() == name.lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {type_name(self._value_type)}, value={self._value!r})"


class ServiceParameters:
    """Fixed, ordered set of typed parameters for a service.

    Definitions are taken from ``definitions`` or, when omitted, from
    :meth:`declare`, which subclasses override to publish their schema.
    Every definition receives the registry's logger and its default value
    at construction. The registry is meant to be filled during
    single-threaded startup and read afterwards; it does no locking.

    Args:
        definitions: The parameter definitions, in declaration order.
        logger: Diagnostic sink for lookup and conversion failures.
        converters: Converter registry handed to every definition.

    Raises:
        DuplicateParameterError: Two definitions share a name in any casing.

    Example:
        >>> params = ServiceParameters([
        ...     ParameterDefn("Count", "Number of workers", 4, "-c"),
        ...     ParameterDefn("Verbose", "Chatty output", False, "-v"),
        ... ])
        >>> params.get_typed("count", int)
        4
        >>> params.assign_from_string("COUNT", "8")
        True
        >>> params.get_typed("Count", int)
        8
        >>> params.assign_from_arguments(["-v", "input.txt"])
        ['input.txt']
        >>> params.get_typed("verbose", bool)
        True
    """

    def __init__(
        self,
        definitions: Iterable[ParameterDefn[Any]] | None = None,
        *,
        logger: DiagnosticLogger | None = None,
        converters: ConverterRegistry | None = None,
    ) -> None:
        self._logger: DiagnosticLogger = logger if logger is not None else logging.getLogger(__name__)
        self._converters = converters if converters is not None else DEFAULT_CONVERTERS
        self._log_header = f"[{type(self).__name__}]"
        declared = tuple(definitions) if definitions is not None else tuple(self.declare())
        seen: dict[str, str] = {}
        for defn in declared:
            key = defn.name.lower()
            if key in seen:
                raise DuplicateParameterError(f"Parameter {defn.name!r} is declared twice (first as {seen[key]!r})")
            seen[key] = defn.name
        self._definitions: tuple[ParameterDefn[Any], ...] = declared
        self.set_parameter_default_values()

    def declare(self) -> Sequence[ParameterDefn[Any]]:
        """Return the definitions of this service; override in subclasses."""
        return ()

    @property
    def definitions(self) -> tuple[ParameterDefn[Any], ...]:
        return self._definitions

    def set_parameter_default_values(self) -> None:
        """Wire the logger and converters into each definition and assign its default."""
        for defn in self._definitions:
            defn.logger = self._logger
            defn.converters = self._converters
            defn.assign_default()

    def try_get_parameter(self, name: str) -> ParameterDefn[Any] | None:
        """Return the definition named ``name`` (any casing), or None."""
        for defn in self._definitions:
            if defn.matches(name):
                return defn
        return None

    def find_by_symbol(self, symbol: str) -> ParameterDefn[Any] | None:
        """Return the definition carrying command-line ``symbol``, or None.

        A bare ``"c"`` matches any declared form of that symbol; a dashed
        form must match exactly, so ``"--c"`` does not find ``"-c"``. A
        declared symbol without dashes is taken as its single-dash form.
        Symbols are case-sensitive.
        """
        dashed = symbol.startswith("-")
        for defn in self._definitions:
            for candidate in defn.symbols:
                declared = candidate if candidate.startswith("-") else f"-{candidate}"
                matched = declared == symbol if dashed else declared.lstrip("-") == symbol
                if matched:
                    return defn
        return None

    def has(self, name: str) -> bool:
        return self.try_get_parameter(name) is not None

    def get_typed(self, name: str, target: type[T]) -> T:
        """Return the value of ``name`` when it is declared as ``target``.

        Asking for an unknown name or for a type other than the declared one
        is a caller error: it is logged and the zero value of ``target`` is
        returned.
        """
        defn = self.try_get_parameter(name)
        if defn is None:
            self._logger.error("%s Fetched unknown parameter. Param=%s", self._log_header, name)
            return zero_value(target, self._converters)
        if target is not object and target is not Any and defn.value_type != target:
            self._logger.error(
                "%s Fetched parameter of wrong type. Param=%s, declared=%s, requested=%s",
                self._log_header,
                name,
                type_name(defn.value_type),
                type_name(target),
            )
            return zero_value(target, self._converters)
        return defn.value

    def get_object(self, name: str) -> Any | None:
        defn = self.try_get_parameter(name)
        return defn.get_object_value() if defn is not None else None

    def remove(self, name: str) -> None:
        """Always raises; a registry's schema is fixed at declaration."""
        raise UnsupportedOperationError(f"{type(self).__name__} does not support remove (parameter {name!r})")

    def assign_from_string(self, name: str, raw: str) -> bool:
        """Set parameter ``name`` from its string form.

        Returns:
            True when the value was stored; False when the name is unknown or
            the string could not be converted (both are logged).
        """
        defn = self.try_get_parameter(name)
        if defn is None:
            self._logger.error("%s Assignment to unknown parameter. Param=%s, value='%s'", self._log_header, name, raw)
            return False
        return defn.set_value(raw)

    def assign_from_arguments(self, args: Sequence[str]) -> list[str]:
        """Consume parameter assignments from command-line tokens.

        Recognized forms are ``--name value``, ``--name=value``, and any
        declared symbol followed by a value (``-c 4``). A ``bool`` parameter
        given without a boolean word after it is set to true. Everything
        else, including tokens after a bare ``--``, is returned unconsumed in
        its original order.

        Args:
            args: Command-line tokens, without the program name.

        Returns:
            The tokens that were not parameter assignments.
        """
        remaining: list[str] = []
        index = 0
        while index < len(args):
            token = args[index]
            index += 1
            if token == "--":
                remaining.extend(args[index - 1 :])
                break
            defn = self._find_argument(token)
            if defn is None:
                remaining.append(token)
                continue
            _, has_inline, inline = token.partition("=")
            if has_inline:
                raw = inline
            elif defn.value_type is bool:
                following = args[index] if index < len(args) else None
                if following is not None and following.strip().lower() in _BOOL_WORDS:
                    raw = following
                    index += 1
                else:
                    raw = "true"
            elif index < len(args):
                raw = args[index]
                index += 1
            else:
                self._logger.error("%s Missing value for parameter. Param=%s", self._log_header, defn.name)
                continue
            defn.set_value(raw)
        return remaining

    def _find_argument(self, token: str) -> ParameterDefn[Any] | None:
        if not token.startswith("-") or token == "-":
            return None
        flag = token.partition("=")[0]
        if flag.startswith("--"):
            by_name = self.try_get_parameter(flag[2:])
            if by_name is not None:
                return by_name
        return self.find_by_symbol(flag)

    def as_dict(self) -> dict[str, Any]:
        """Return ``name -> current value`` in declaration order."""
        return {defn.name: defn.value for defn in self._definitions}

    def __iter__(self) -> Iterator[ParameterDefn[Any]]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)


__all__ = [
    "ParameterDefn",
    "ServiceParameters",
]
