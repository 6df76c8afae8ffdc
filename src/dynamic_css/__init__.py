"""Dynamic CSS: generate CSS rules from customizer setting values."""
from __future__ import annotations

__version__ = "0.1.0"

from dynamic_css.config import DEFAULT_CONFIG, RenderConfig, Transport
from dynamic_css.diagnostic import Diagnostic, Severity
from dynamic_css.errors import DescriptorError
from dynamic_css.loader import load_file, load_registry, parse_property
from dynamic_css.model import NOOP, CSSProperty
from dynamic_css.modifiers import (
    Darken,
    FunctionModifier,
    IdentityModifier,
    Lighten,
    LinearGradient,
    Modifier,
    apply_modifier,
    as_modifier,
    build_modifier,
    register_modifier,
)
from dynamic_css.registry import SettingRegistry
from dynamic_css.setting import UNSET, DynamicCSSSetting, modifiers_match
from dynamic_css.source import CallbackValue, MappingValue, StaticValue, ValueSource
from dynamic_css.validation import (
    ValidationError,
    require_valid,
    validate,
    validate_registry,
)

__all__ = [
    "__version__",
    # Model
    "CSSProperty",
    "NOOP",
    "Transport",
    "RenderConfig",
    "DEFAULT_CONFIG",
    # Generator
    "DynamicCSSSetting",
    "SettingRegistry",
    "UNSET",
    "modifiers_match",
    # Value sources
    "ValueSource",
    "StaticValue",
    "CallbackValue",
    "MappingValue",
    # Modifiers
    "Modifier",
    "FunctionModifier",
    "IdentityModifier",
    "as_modifier",
    "apply_modifier",
    "Darken",
    "Lighten",
    "LinearGradient",
    "build_modifier",
    "register_modifier",
    # Loading and validation
    "parse_property",
    "load_registry",
    "load_file",
    "validate",
    "validate_registry",
    "require_valid",
    "Diagnostic",
    "Severity",
    "DescriptorError",
    "ValidationError",
]
