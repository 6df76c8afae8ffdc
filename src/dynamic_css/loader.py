"""Build settings from JSON documents.

Document shape::

    {
      "settings": [
        {
          "id": "primary_color",
          "default": "#336699",
          "transport": "postMessage",
          "css_props": [
            {
              "name": "color",
              "selectors": {"noop": [".btn"], "@media (min-width: 992px)": [".nav a"]},
              "modifier": {"type": "darken", "amount": 10}
            }
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dynamic_css.config import Transport
from dynamic_css.errors import DescriptorError
from dynamic_css.model import CSSProperty
from dynamic_css.modifiers.registry import build_modifier
from dynamic_css.registry import SettingRegistry
from dynamic_css.validation import require_valid

__all__ = ["parse_property", "load_registry", "load_file"]

logger = logging.getLogger(__name__)


def _parse_selectors(raw: Any, index: int) -> dict[str, list[str]]:
    if not isinstance(raw, dict):
        raise DescriptorError("'selectors' must be an object", index=index)
    groups: dict[str, list[str]] = {}
    for key, selectors in raw.items():
        if not isinstance(selectors, list) or not all(isinstance(s, str) for s in selectors):
            raise DescriptorError(
                f"Selector group {key!r} must be a list of strings", index=index
            )
        groups[key] = list(selectors)
    return groups


def parse_property(data: Any, index: int = 0) -> CSSProperty:
    """Convert one JSON descriptor into a :class:`CSSProperty`."""
    if not isinstance(data, dict):
        raise DescriptorError("CSS property must be an object", index=index)
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise DescriptorError("CSS property requires a non-empty 'name'", index=index)
    if "selectors" not in data:
        raise DescriptorError("CSS property requires 'selectors'", index=index)
    selectors = _parse_selectors(data["selectors"], index)

    modifier = None
    if data.get("modifier") is not None:
        try:
            modifier = build_modifier(data["modifier"])
        except DescriptorError as exc:
            raise DescriptorError(str(exc), index=index) from exc
    return CSSProperty(name=name, selectors=selectors, modifier=modifier)


def _parse_default(raw: Any, setting_id: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise DescriptorError(
            f"'default' must be a string, got {raw!r}", setting_id=setting_id
        )
    return raw


def _parse_transport(raw: Any, setting_id: str) -> Transport | None:
    if raw is None:
        return None
    try:
        return Transport(raw)
    except ValueError:
        raise DescriptorError(
            f"Unknown transport {raw!r}", setting_id=setting_id
        ) from None


def load_registry(
    data: Any, values: dict[str, Any] | None = None, strict: bool = False
) -> SettingRegistry:
    """Build a :class:`SettingRegistry` from a decoded JSON document.

    With *strict*, a setting whose props break an ERROR-level validation rule
    raises :class:`ValidationError` instead of being registered.
    """
    if not isinstance(data, dict) or not isinstance(data.get("settings"), list):
        raise DescriptorError("Document must be an object with a 'settings' list")

    registry = SettingRegistry(values)
    for entry in data["settings"]:
        if not isinstance(entry, dict) or not isinstance(entry.get("id"), str):
            raise DescriptorError("Each setting requires a string 'id'")
        setting_id = entry["id"]
        raw_props = entry.get("css_props", [])
        if not isinstance(raw_props, list):
            raise DescriptorError("'css_props' must be a list", setting_id=setting_id)

        props = []
        for index, raw in enumerate(raw_props):
            try:
                props.append(parse_property(raw, index))
            except DescriptorError as exc:
                exc.setting_id = setting_id
                raise

        if strict:
            require_valid(props, setting_id=setting_id)
        registry.add_setting(
            setting_id,
            props,
            default=_parse_default(entry.get("default"), setting_id),
            transport=_parse_transport(entry.get("transport"), setting_id),
        )
        logger.debug("Loaded setting %s with %d css prop(s)", setting_id, len(props))
    return registry


def load_file(
    path: str | Path, values: dict[str, Any] | None = None, strict: bool = False
) -> SettingRegistry:
    """Read and load a JSON settings file."""
    source = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise DescriptorError(
            f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc
    return load_registry(data, values, strict=strict)
