"""Setting registry: many dynamic CSS settings sharing one value store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dynamic_css.config import Transport
from dynamic_css.errors import DescriptorError
from dynamic_css.model import CSSProperty
from dynamic_css.setting import DynamicCSSSetting
from dynamic_css.source import MappingValue

__all__ = ["SettingRegistry"]


class SettingRegistry:
    """Keeps settings in registration order and renders them together.

    Values live in a single mapping keyed by setting id, the way a theme
    stores its customizer options; settings fall back to their defaults for
    ids missing from it.
    """

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = values if values is not None else {}
        self._settings: dict[str, DynamicCSSSetting] = {}

    def add_setting(
        self,
        setting_id: str,
        css_props: Iterable[CSSProperty],
        default: str = "",
        transport: Transport | None = None,
    ) -> DynamicCSSSetting:
        if setting_id in self._settings:
            raise DescriptorError("Duplicate setting id", setting_id=setting_id)
        setting = DynamicCSSSetting(
            setting_id,
            css_props,
            MappingValue(self.values, setting_id, default),
            transport=transport,
        )
        self._settings[setting_id] = setting
        return setting

    def get(self, setting_id: str) -> DynamicCSSSetting | None:
        return self._settings.get(setting_id)

    def set_value(self, setting_id: str, value: str) -> None:
        if setting_id not in self._settings:
            raise KeyError(setting_id)
        self.values[setting_id] = value

    def render_all(self) -> str:
        """Concatenate the CSS of every setting in registration order."""
        return "".join(setting.render_css() for setting in self._settings.values())

    def __iter__(self) -> Iterator[DynamicCSSSetting]:
        return iter(self._settings.values())

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, setting_id: object) -> bool:
        return setting_id in self._settings
