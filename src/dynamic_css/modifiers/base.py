"""Modifier protocol and adapters.

A modifier transforms the raw setting value before it is written into a CSS
declaration.  Descriptors may carry an object implementing :class:`Modifier`,
a plain callable, or (through misconfiguration) some inert value.
:func:`as_modifier` folds all three into the protocol so the render path makes
a single ``modify`` call.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

__all__ = [
    "Modifier",
    "FunctionModifier",
    "IdentityModifier",
    "as_modifier",
    "apply_modifier",
]


@runtime_checkable
class Modifier(Protocol):
    """A pure transform applied to a setting value."""

    def modify(self, value: str) -> str: ...


class FunctionModifier:
    """Adapts a bare callable to the :class:`Modifier` protocol."""

    def __init__(self, func: Callable[[str], str]) -> None:
        self._func = func

    def modify(self, value: str) -> str:
        return self._func(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionModifier({name})"


class IdentityModifier:
    """Returns the value unchanged."""

    def modify(self, value: str) -> str:
        return value

    def __repr__(self) -> str:
        return "IdentityModifier()"


def as_modifier(modifier: Any) -> Modifier:
    """Return *modifier* as an object implementing :class:`Modifier`.

    Objects with a ``modify`` method win over plain callables; anything else,
    including ``None``, becomes an :class:`IdentityModifier`.
    """
    if isinstance(modifier, Modifier):
        return modifier
    if callable(modifier):
        return FunctionModifier(modifier)
    return IdentityModifier()


def apply_modifier(value: str, modifier: Any) -> str:
    """Apply *modifier* to *value*; unsupported modifier kinds are a no-op."""
    return as_modifier(modifier).modify(value)
