"""Named modifier factories used when settings are loaded from JSON."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from dynamic_css.errors import DescriptorError
from dynamic_css.modifiers.base import Modifier
from dynamic_css.modifiers.color import Darken, Lighten, LinearGradient

__all__ = ["MODIFIERS", "build_modifier", "register_modifier"]

ModifierFactory = Callable[..., Modifier]


def _linear_gradient(modifier: Any = None, orientation: str = "to bottom") -> Modifier:
    inner = build_modifier(modifier) if modifier is not None else Darken()
    return LinearGradient(modifier=inner, orientation=orientation)


MODIFIERS: dict[str, ModifierFactory] = {
    "darken": Darken,
    "lighten": Lighten,
    "linear-gradient": _linear_gradient,
}


def register_modifier(name: str, factory: ModifierFactory) -> None:
    """Make *factory* available to :func:`build_modifier` under *name*."""
    MODIFIERS[name] = factory


def build_modifier(definition: str | Mapping[str, Any]) -> Modifier:
    """Build a modifier from ``"darken"`` or ``{"type": "darken", "amount": 10}``.

    Raises DescriptorError for unknown types or bad arguments.
    """
    if isinstance(definition, str):
        kind, params = definition, {}
    elif isinstance(definition, Mapping):
        params = dict(definition)
        kind = params.pop("type", None)
        if not isinstance(kind, str):
            raise DescriptorError("Modifier object requires a string 'type'")
    else:
        raise DescriptorError(f"Invalid modifier definition: {definition!r}")

    factory = MODIFIERS.get(kind)
    if factory is None:
        raise DescriptorError(f"Unknown modifier type: {kind!r}")
    try:
        return factory(**params)
    except TypeError as exc:
        raise DescriptorError(f"Invalid arguments for modifier {kind!r}: {exc}") from exc
