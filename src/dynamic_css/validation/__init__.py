from dynamic_css.validation.validator import (
    ValidationError,
    require_valid,
    validate,
    validate_registry,
)

__all__ = [
    "validate",
    "validate_registry",
    "require_valid",
    "ValidationError",
]
