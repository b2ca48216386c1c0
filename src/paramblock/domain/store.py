"""Case-insensitive parameter store with a three-source priority merge.

Contents:
    * :class:`ParamBlock` - mutable, thread-safe name/value container.

System Role:
    The central container of the domain layer. Adapters build ParamBlocks
    from configuration files and command lines; :meth:`ParamBlock.merge`
    combines them against the required/default schema of a caller.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

from .coercion import ConverterRegistry, coerce, zero_value
from .errors import DuplicateParameterError
from .interfaces import Parameters

T = TypeVar("T")


def _normalize(name: str) -> str:
    return name.lower()


class ParamBlock:
    """A collection of name/value pairs looked up without regard to case.

    Values live under the lowercased name; a side table keeps the casing the
    name was first supplied with so enumeration and display stay readable.
    Both tables are only changed together while holding the store's lock.
    Reads are not synchronized against writers.

    Args:
        preload: Optional mapping of initial entries, inserted with :meth:`add`.
        converters: Converter registry used by :meth:`get_typed`.

    Raises:
        DuplicateParameterError: ``preload`` contains the same name twice in
            different casings.

    Example:
        >>> block = ParamBlock({"Port": 8080})
        >>> block.has("PORT")
        True
        >>> block.get_typed("port", str)
        '8080'
        >>> list(block)
        ['Port']
    """

    def __init__(
        self,
        preload: Mapping[str, Any] | None = None,
        *,
        converters: ConverterRegistry | None = None,
    ) -> None:
        self._values: dict[str, Any] = {}
        self._names: dict[str, str] = {}
        self._lock = threading.Lock()
        self._converters = converters
        if preload:
            for name, value in preload.items():
                self.add(name, value)

    @classmethod
    def merge(
        cls,
        config: Parameters | None,
        passed: Parameters | None,
        required: ParamBlock,
    ) -> ParamBlock:
        """Merge configuration, passed, and required parameters into a new store.

        Only the names in ``required`` are considered; ``required`` is the
        complete schema of the result. For each of them the value comes from
        ``passed`` if present there, otherwise from ``config``, otherwise the
        default held by ``required``. Names are compared in lowercase and the
        result keeps ``required``'s casing. The sources are only read.

        Args:
            config: Values from configuration files (any :class:`Parameters`).
            passed: Values passed by the caller; highest priority.
            required: Names the caller expects, each with its default value.

        Returns:
            A new ParamBlock holding exactly the names in ``required``.

        Example:
            >>> required = ParamBlock({"a": 1, "b": 2})
            >>> merged = ParamBlock.merge(ParamBlock({"a": 10}), ParamBlock({"a": 100, "c": 999}), required)
            >>> merged.as_dict()
            {'a': 100, 'b': 2}
        """
        merged = cls(converters=required._converters)
        for name, default in required.items():
            key = _normalize(name)
            if passed is not None and passed.has(key):
                value = passed.get_object(key)
            elif config is not None and config.has(key):
                value = config.get_object(key)
            else:
                value = default
            merged.add(name, value)
        return merged

    def has(self, name: str) -> bool:
        """Return True when ``name`` exists in any casing."""
        return _normalize(name) in self._values

    def get_object(self, name: str) -> Any | None:
        """Return the raw stored value, or None when ``name`` is absent."""
        return self._values.get(_normalize(name))

    def get_typed(self, name: str, target: type[T]) -> T:
        """Return the value converted to ``target``.

        Missing names and failed conversions both produce the zero value of
        ``target``; use :meth:`has` to tell them apart.

        Example:
            >>> block = ParamBlock({"retries": "3"})
            >>> block.get_typed("Retries", int)
            3
            >>> block.get_typed("missing", int)
            0
        """
        key = _normalize(name)
        if key not in self._values:
            return zero_value(target, self._converters)
        return coerce(self._values[key], target, self._converters)

    def add(self, name: str, value: Any) -> ParamBlock:
        """Insert a new entry.

        Raises:
            DuplicateParameterError: ``name`` already exists in any casing.
        """
        key = _normalize(name)
        with self._lock:
            if key in self._values:
                raise DuplicateParameterError(f"Parameter {name!r} already exists as {self._names[key]!r}")
            self._values[key] = value
            self._names[key] = name
        return self

    def set(self, name: str, value: Any) -> ParamBlock:
        """Insert or update an entry, keeping the casing already on file."""
        key = _normalize(name)
        with self._lock:
            self._names.setdefault(key, name)
            self._values[key] = value
        return self

    def remove(self, name: str) -> None:
        """Delete ``name`` if present."""
        key = _normalize(name)
        with self._lock:
            self._values.pop(key, None)
            self._names.pop(key, None)

    def names(self) -> list[str]:
        """Return the canonical names in insertion order."""
        return list(self._names.values())

    def items(self) -> list[tuple[str, Any]]:
        """Return ``(canonical name, value)`` pairs in insertion order."""
        with self._lock:
            return [(self._names[key], value) for key, value in self._values.items()]

    def as_dict(self) -> dict[str, Any]:
        """Return a snapshot keyed by canonical name."""
        return dict(self.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamBlock):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_dict()!r})"


__all__ = ["ParamBlock"]
