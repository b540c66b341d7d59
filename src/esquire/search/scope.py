"""Search scope — the ordered index and type names a request targets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from esquire.exceptions import InvalidInputError


@runtime_checkable
class HasName(Protocol):
    """Anything that can name an index or a type (``Index``, ``Type``).

    The check is structural: any object with a string ``name`` qualifies, so
    ``pathlib.Path("x/y")`` resolves to the name ``"y"``.
    """

    @property
    def name(self) -> str: ...


def resolve_name(value: Any, kind: str) -> str:
    """Reduce a string or name-capable object to a plain name.

    Args:
        value: A name or an object with a ``name``.
        kind: ``"index"`` or ``"type"``, used in the error message.

    Raises:
        InvalidInputError: If ``value`` is neither, or the name is empty.
    """
    if isinstance(value, str):
        name = value
    elif isinstance(value, HasName):
        name = value.name
    else:
        raise InvalidInputError(f"Invalid {kind}: expected a name or an object with a name, got {type(value).__name__}")

    if not isinstance(name, str) or not name:
        raise InvalidInputError(f"Invalid {kind} name: {name!r}")
    return name


class Scope:
    """Accumulates index and type names in insertion order.

    Names are only ever appended; duplicates are kept as given.
    """

    def __init__(self) -> None:
        self._indices: list[str] = []
        self._types: list[str] = []

    def add_index(self, index: str | HasName) -> Scope:
        self._indices.append(resolve_name(index, "index"))
        return self

    def add_indices(self, indices: Iterable[str | HasName]) -> Scope:
        for index in indices:
            self.add_index(index)
        return self

    def add_type(self, type_: str | HasName) -> Scope:
        self._types.append(resolve_name(type_, "type"))
        return self

    def add_types(self, types: Iterable[str | HasName]) -> Scope:
        for type_ in types:
            self.add_type(type_)
        return self

    @property
    def indices(self) -> list[str]:
        return list(self._indices)

    @property
    def types(self) -> list[str]:
        return list(self._types)

    def has_indices(self) -> bool:
        return bool(self._indices)

    def has_types(self) -> bool:
        return bool(self._types)
