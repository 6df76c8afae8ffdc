"""Tests for the setting registry and value sources."""

from __future__ import annotations

import pytest

from dynamic_css import (
    CSSProperty,
    CallbackValue,
    DescriptorError,
    Lighten,
    MappingValue,
    SettingRegistry,
    StaticValue,
    Transport,
)


def _registry() -> SettingRegistry:
    registry = SettingRegistry()
    registry.add_setting(
        "primary_color",
        [CSSProperty("color", {"noop": [".btn"]})],
        default="#336699",
    )
    registry.add_setting(
        "header_bg",
        [CSSProperty("background-color", {"@media (min-width: 992px)": [".header"]})],
        default="#000000",
        transport=Transport.REFRESH,
    )
    return registry


# ---------------------------------------------------------------------------
# Value sources
# ---------------------------------------------------------------------------


class TestValueSources:
    def test_static(self):
        assert StaticValue("red").current_value() == "red"

    def test_callback(self):
        assert CallbackValue(lambda: "blue").current_value() == "blue"

    def test_mapping_reads_live_store(self):
        store: dict[str, str] = {}
        source = MappingValue(store, "color", default="black")
        assert source.current_value() == "black"
        store["color"] = "white"
        assert source.current_value() == "white"


# ---------------------------------------------------------------------------
# SettingRegistry
# ---------------------------------------------------------------------------


class TestSettingRegistry:
    def test_defaults_are_rendered(self):
        assert _registry().render_all() == (
            ".btn { color: #336699; }\n"
            "@media (min-width: 992px) { .header { background-color: #000000; } }\n"
        )

    def test_set_value(self):
        registry = _registry()
        registry.set_value("primary_color", "red")
        assert registry.get("primary_color").render_css() == ".btn { color: red; }\n"

    def test_initial_values(self):
        registry = SettingRegistry({"accent": "#000000"})
        registry.add_setting(
            "accent", [CSSProperty("color", {"noop": [".a"]}, modifier=Lighten(20))]
        )
        assert registry.render_all() == ".a { color: #333333; }\n"

    def test_non_string_stored_value_renders_unchanged(self):
        registry = SettingRegistry({"c": 0})
        registry.add_setting(
            "c", [CSSProperty("opacity", {"noop": [".a"]}, modifier=Lighten(10))]
        )
        assert registry.render_all() == ".a { opacity: 0; }\n"

    def test_set_value_unknown_setting(self):
        with pytest.raises(KeyError):
            _registry().set_value("missing", "red")

    def test_duplicate_id(self):
        registry = _registry()
        with pytest.raises(DescriptorError, match="Duplicate setting id"):
            registry.add_setting("primary_color", [])

    def test_container_protocol(self):
        registry = _registry()
        assert len(registry) == 2
        assert "header_bg" in registry
        assert "missing" not in registry
        assert [s.id for s in registry] == ["primary_color", "header_bg"]
        assert registry.get("missing") is None

    def test_transport_passed_through(self):
        registry = _registry()
        assert registry.get("primary_color").transport is Transport.POST_MESSAGE
        assert registry.get("header_bg").transport is Transport.REFRESH

    def test_empty_registry(self):
        assert SettingRegistry().render_all() == ""
