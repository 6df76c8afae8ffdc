"""Tests for descriptor validation rules and the validator."""

import pytest

from dynamic_css.diagnostic import Diagnostic, Severity
from dynamic_css.model import CSSProperty
from dynamic_css.modifiers import Darken
from dynamic_css.registry import SettingRegistry
from dynamic_css.validation import ValidationError, require_valid, validate, validate_registry
from dynamic_css.validation.rules import (
    check_empty_groups,
    check_media_keys,
    check_modifier_kind,
    check_name,
    check_selectors,
)


def _valid_props() -> list[CSSProperty]:
    return [
        CSSProperty("color", {"noop": [".a"], "@media (min-width: 900px)": [".b"]}),
        CSSProperty("background-color", {"noop": [".c"]}, modifier=Darken(10)),
    ]


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestCheckName:
    def test_valid(self):
        assert check_name(_valid_props()) == []

    def test_empty_name(self):
        diags = check_name([CSSProperty("color", {"noop": [".a"]}), CSSProperty("  ", {"noop": [".b"]})])
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].index == 1


class TestCheckSelectors:
    def test_no_groups(self):
        diags = check_selectors([CSSProperty("color")])
        assert len(diags) == 1
        assert diags[0].is_error
        assert "no selectors" in diags[0].message


class TestCheckEmptyGroups:
    def test_empty_group_is_warning(self):
        diags = check_empty_groups([CSSProperty("color", {"noop": [], "@media print": [".p"]})])
        assert len(diags) == 1
        assert diags[0].is_warning
        assert diags[0].fix


class TestCheckMediaKeys:
    def test_noop_and_at_rules_pass(self):
        assert check_media_keys(_valid_props()) == []

    def test_plain_key_warns(self):
        diags = check_media_keys([CSSProperty("color", {"(min-width: 900px)": [".a"]})])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert "not an at-rule" in diags[0].message


class TestCheckModifierKind:
    def test_callable_and_object_pass(self):
        props = [
            CSSProperty("color", {"noop": [".a"]}, modifier=str.upper),
            CSSProperty("color", {"noop": [".b"]}, modifier=Darken(5)),
            CSSProperty("color", {"noop": [".c"]}),
        ]
        assert check_modifier_kind(props) == []

    def test_scalar_modifier_warns(self):
        diags = check_modifier_kind([CSSProperty("color", {"noop": [".a"]}, modifier="darken")])
        assert len(diags) == 1
        assert diags[0].is_warning
        assert "unchanged" in diags[0].message


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_valid_props_have_no_diagnostics(self):
        assert validate(_valid_props()) == []

    def test_diagnostics_follow_rule_order(self):
        diags = validate([CSSProperty("", {}), CSSProperty("color", {"noop": []})])
        assert [d.rule for d in diags] == ["name", "selectors", "empty_group"]


class TestRequireValid:
    def test_returns_props_when_only_warnings(self):
        props = (CSSProperty("color", {"noop": []}),)
        assert require_valid(props) == list(props)

    def test_raises_with_error_diagnostics(self):
        with pytest.raises(ValidationError) as info:
            require_valid([CSSProperty("", {})])
        assert [d.rule for d in info.value.diagnostics] == ["name", "selectors"]
        assert info.value.setting_id is None
        assert str(info.value).startswith("CSS properties failed validation")

    def test_error_names_the_setting(self):
        with pytest.raises(ValidationError) as info:
            require_valid([CSSProperty("color", {})], setting_id="primary_color")
        assert info.value.setting_id == "primary_color"
        assert "Setting 'primary_color'" in str(info.value)
        assert "has no selectors" in str(info.value)


class TestValidateRegistry:
    def test_diagnostics_per_setting(self):
        registry = SettingRegistry()
        registry.add_setting("ok", _valid_props())
        registry.add_setting("broken", [CSSProperty("color", {"noop": []})])
        report = validate_registry(registry)
        assert list(report) == ["ok", "broken"]
        assert report["ok"] == []
        assert [d.rule for d in report["broken"]] == ["empty_group"]

    def test_empty_registry(self):
        assert validate_registry(SettingRegistry()) == {}


class TestDiagnostic:
    def test_str_with_index(self):
        diag = Diagnostic(rule="name", severity=Severity.ERROR, message="bad", index=2)
        assert str(diag) == "ERROR [css_props[2]]: bad"

    def test_str_without_index(self):
        diag = Diagnostic(rule="x", severity=Severity.INFO, message="note")
        assert str(diag) == "INFO: note"
