"""Value sources: where a setting reads its live value from."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Protocol

__all__ = ["ValueSource", "StaticValue", "CallbackValue", "MappingValue"]


class ValueSource(Protocol):
    """Read-only accessor for the current value of a setting."""

    def current_value(self) -> str: ...


class StaticValue:
    """A fixed value, mostly useful in tests and one-off renders."""

    def __init__(self, value: str) -> None:
        self.value = value

    def current_value(self) -> str:
        return self.value


class CallbackValue:
    """Delegates to a user-supplied zero-argument callback."""

    def __init__(self, callback: Callable[[], str]) -> None:
        self._callback = callback

    def current_value(self) -> str:
        return self._callback()


class MappingValue:
    """Reads ``store[key]``, falling back to ``default`` when unset.

    The store is not copied; later writes to it are seen by the next read.
    """

    def __init__(self, store: Mapping[str, Any], key: str, default: str = "") -> None:
        self._store = store
        self.key = key
        self.default = default

    def current_value(self) -> str:
        return self._store.get(self.key, self.default)
