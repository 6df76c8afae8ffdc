"""Run the descriptor rules over a prop list or every setting in a registry."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from dynamic_css.diagnostic import Diagnostic
from dynamic_css.model import CSSProperty
from dynamic_css.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from dynamic_css.registry import SettingRegistry


class ValidationError(Exception):
    """Raised when a setting's CSS properties break an ERROR-level rule."""

    def __init__(self, diagnostics: list[Diagnostic], setting_id: str | None = None) -> None:
        self.diagnostics = diagnostics
        self.setting_id = setting_id
        owner = f"Setting {setting_id!r}" if setting_id is not None else "CSS properties"
        super().__init__(
            f"{owner} failed validation: " + "; ".join(str(d) for d in diagnostics)
        )


def validate(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    """Return every diagnostic the rules report for *props*, rule by rule."""
    diagnostics: list[Diagnostic] = []
    for rule in ALL_RULES:
        diagnostics.extend(rule(props))
    return diagnostics


def validate_registry(registry: SettingRegistry) -> dict[str, list[Diagnostic]]:
    """Diagnostics per setting id, in registration order."""
    return {setting.id: validate(setting.get_css_props()) for setting in registry}


def require_valid(
    props: Sequence[CSSProperty], setting_id: str | None = None
) -> list[CSSProperty]:
    """Return *props* as a list, or raise :class:`ValidationError` on errors.

    Warnings never block; a prop list with an empty selector group still
    renders, it just renders less.
    """
    errors = [d for d in validate(props) if d.is_error]
    if errors:
        raise ValidationError(errors, setting_id=setting_id)
    return list(props)

