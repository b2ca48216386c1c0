"""Structural contracts shared by the parameter store and the typed registry.

Contents:
    * :class:`Parameters` - the uniform "fetch by name, request type" capability.
    * :class:`DiagnosticLogger` - the narrow logging capability the core consumes.

System Role:
    Lives in the domain layer so that :mod:`.store` and :mod:`.registry` can
    depend on each other's capability without importing each other.
    ``logging.Logger`` satisfies :class:`DiagnosticLogger` as-is.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Parameters(Protocol):
    """A bag of named values readable by name with a requested type.

    Implemented by :class:`~paramblock.domain.store.ParamBlock` and
    :class:`~paramblock.domain.registry.ServiceParameters`. Names are
    compared case-insensitively by every implementation.
    """

    def has(self, name: str) -> bool: ...

    def get_typed(self, name: str, target: type[T]) -> T: ...

    def get_object(self, name: str) -> Any | None: ...

    def remove(self, name: str) -> None: ...


@runtime_checkable
class DiagnosticLogger(Protocol):
    """Report diagnostic messages with %-style arguments."""

    def error(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


__all__ = [
    "DiagnosticLogger",
    "Parameters",
]
