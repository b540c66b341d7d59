"""Parameter containers shared by the query DSL."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from esquire.exceptions import InvalidInputError


def serialize(value: Any) -> Any:
    """Recursively turn parameter containers into plain JSON-compatible data."""
    if isinstance(value, Param):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value


class Param:
    """A named bag of parameters that serializes to ``{name: params}``.

    Subclasses set ``param_name``; when it is empty the parameters are
    serialized without an enclosing key.
    """

    param_name: str = ""

    def __init__(self) -> None:
        self._params: dict[str, Any] = {}

    def set_param(self, key: str, value: Any) -> Param:
        self._params[key] = value
        return self

    def add_param(self, key: str, value: Any) -> Param:
        """Append ``value`` to the list stored under ``key``."""
        self._params.setdefault(key, []).append(value)
        return self

    def set_params(self, params: Mapping[str, Any]) -> Param:
        self._params = dict(params)
        return self

    def has_param(self, key: str) -> bool:
        return key in self._params

    def get_param(self, key: str) -> Any:
        """Return a stored parameter.

        Raises:
            InvalidInputError: If the parameter was never set.
        """
        if key not in self._params:
            raise InvalidInputError(f"Param '{key}' does not exist")
        return self._params[key]

    def get_params(self) -> dict[str, Any]:
        return dict(self._params)

    def to_dict(self) -> dict[str, Any]:
        params = serialize(self._params)
        if self.param_name:
            return {self.param_name: params}
        return params

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"


class AbstractQuery(Param):
    """Base class for the leaf queries that go under a body's ``query`` key."""
