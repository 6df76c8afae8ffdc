"""Validation rules for CSS property descriptors.

Each rule is a function taking the descriptor list and returning a list of
Diagnostic objects describing any issues found.  None of these conditions
stop rendering; they flag configurations that render something other than
what their author probably meant.
"""

from __future__ import annotations

from collections.abc import Sequence

from dynamic_css.diagnostic import Diagnostic, Severity
from dynamic_css.model import NOOP, CSSProperty
from dynamic_css.modifiers.base import Modifier


def check_name(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    """Every descriptor needs a non-empty property name."""
    diags: list[Diagnostic] = []
    for i, prop in enumerate(props):
        if not isinstance(prop.name, str) or not prop.name.strip():
            diags.append(Diagnostic(
                rule="name",
                severity=Severity.ERROR,
                message="CSS property has no name",
                index=i,
            ))
    return diags


def check_selectors(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    """Every descriptor needs at least one selector group."""
    diags: list[Diagnostic] = []
    for i, prop in enumerate(props):
        if not prop.selectors:
            diags.append(Diagnostic(
                rule="selectors",
                severity=Severity.ERROR,
                message=f"CSS property '{prop.name}' has no selectors",
                index=i,
            ))
    return diags


def check_empty_groups(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    for i, prop in enumerate(props):
        for key, selectors in prop.groups():
            if not selectors:
                diags.append(Diagnostic(
                    rule="empty_group",
                    severity=Severity.WARNING,
                    message=f"Selector group {key!r} of '{prop.name}' is empty and renders nothing",
                    index=i,
                    fix="Remove the group or add selectors to it",
                ))
    return diags


def check_media_keys(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    """Group keys other than ``noop`` are emitted verbatim as at-rule preludes."""
    diags: list[Diagnostic] = []
    for i, prop in enumerate(props):
        for key in prop.selectors:
            if key != NOOP and not key.lstrip().startswith("@"):
                diags.append(Diagnostic(
                    rule="media_key",
                    severity=Severity.WARNING,
                    message=f"Selector group key {key!r} of '{prop.name}' is not an at-rule",
                    index=i,
                    fix=f"Use '{NOOP}' for top-level rules or a full '@media (...)' prelude",
                ))
    return diags


def check_modifier_kind(props: Sequence[CSSProperty]) -> list[Diagnostic]:
    diags: list[Diagnostic] = []
    for i, prop in enumerate(props):
        modifier = prop.modifier
        if modifier is None:
            continue
        if not isinstance(modifier, Modifier) and not callable(modifier):
            diags.append(Diagnostic(
                rule="modifier_kind",
                severity=Severity.WARNING,
                message=(
                    f"Modifier {modifier!r} of '{prop.name}' is neither callable nor "
                    "a modifier object; the value is emitted unchanged"
                ),
                index=i,
            ))
    return diags


ALL_RULES = [
    check_name,
    check_selectors,
    check_empty_groups,
    check_media_keys,
    check_modifier_kind,
]
