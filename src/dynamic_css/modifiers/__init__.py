from dynamic_css.modifiers.base import (
    FunctionModifier,
    IdentityModifier,
    Modifier,
    apply_modifier,
    as_modifier,
)
from dynamic_css.modifiers.color import Darken, Lighten, LinearGradient
from dynamic_css.modifiers.registry import MODIFIERS, build_modifier, register_modifier

__all__ = [
    "Modifier",
    "FunctionModifier",
    "IdentityModifier",
    "as_modifier",
    "apply_modifier",
    "Darken",
    "Lighten",
    "LinearGradient",
    "MODIFIERS",
    "build_modifier",
    "register_modifier",
]
