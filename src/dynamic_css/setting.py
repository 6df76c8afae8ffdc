"""Dynamic CSS setting: renders CSS rules from property descriptors.

Most settings in a theme customizer are colours that feed a handful of CSS
rules.  Instead of writing those rules by hand, a :class:`DynamicCSSSetting`
holds a list of :class:`CSSProperty` descriptors and generates the CSS from
the setting's current value on demand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from dynamic_css.config import DEFAULT_CONFIG, RenderConfig, Transport
from dynamic_css.model import CSSProperty
from dynamic_css.modifiers.base import Modifier, as_modifier
from dynamic_css.source import ValueSource

__all__ = ["DynamicCSSSetting", "UNSET", "modifiers_match"]

logger = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Marks "no modifier filter" in filter_by_name; None and False are real filters.
UNSET: Any = _Unset()

_ABSENT = (None, False)


def modifiers_match(stored: Any, wanted: Any) -> bool:
    """Loose modifier comparison used by :meth:`DynamicCSSSetting.filter_by_name`.

    ``None`` and ``False`` both mean "no modifier" and are equal to each
    other; everything else compares with ``==``.
    """
    if any(stored is a for a in _ABSENT) and any(wanted is a for a in _ABSENT):
        return True
    return stored == wanted


class DynamicCSSSetting:
    """A setting capable of generating CSS for the properties it controls.

    Args:
        setting_id: Identifier of the setting in the host framework.
        css_props: Descriptors in emission order.
        value_source: Supplies the live value of the setting.
        transport: Hint for the host; ``postMessage`` means value changes can
            be previewed without a full page reload.
    """

    def __init__(
        self,
        setting_id: str,
        css_props: Iterable[CSSProperty],
        value_source: ValueSource,
        transport: Transport | None = None,
        config: RenderConfig = DEFAULT_CONFIG,
    ) -> None:
        self.id = setting_id
        self._css_props = list(css_props)
        self._source = value_source
        self._config = config
        self.transport = transport if transport is not None else config.default_transport
        self._modifiers: list[Modifier | None] = [
            as_modifier(prop.modifier) if prop.has_modifier else None
            for prop in self._css_props
        ]

    @property
    def supports_live_preview(self) -> bool:
        return self.transport is Transport.POST_MESSAGE

    def get_css_props(self) -> list[CSSProperty]:
        """Return every descriptor, unfiltered, in insertion order."""
        return list(self._css_props)

    def filter_by_name(self, name: str, modifier: Any = UNSET) -> list[CSSProperty]:
        """Return the descriptors for CSS property *name*.

        When *modifier* is given the result is further restricted to
        descriptors whose modifier matches it (see :func:`modifiers_match`).
        """
        if modifier is UNSET:
            return [p for p in self._css_props if p.name == name]
        return [
            p
            for p in self._css_props
            if p.name == name and modifiers_match(p.modifier, modifier)
        ]

    def value(self) -> str:
        return self._source.current_value()

    def render_css(self) -> str:
        """Render CSS for all descriptors against the current value."""
        base_value = self.value()
        rules: list[str] = []
        for prop, modifier in zip(self._css_props, self._modifiers):
            for key, selectors in prop.groups():
                if not selectors:
                    logger.debug(
                        "Skipping empty selector group %r for %s in setting %s",
                        key, prop.name, self.id,
                    )
                    continue
                css_selectors = self._config.selector_separator.join(selectors)
                value = modifier.modify(base_value) if modifier is not None else base_value
                rules.append(self._format_rule(key, css_selectors, prop.name, value))

        logger.debug("Rendered %d rule(s) for setting %s", len(rules), self.id)
        return "".join(rules)

    def _format_rule(self, key: str, selectors: str, name: str, value: str) -> str:
        if key == self._config.noop_key:
            return f"{selectors} {{ {name}: {value}; }}\n"
        return f"{key} {{ {selectors} {{ {name}: {value}; }} }}\n"

    def __repr__(self) -> str:
        return (
            f"DynamicCSSSetting(id={self.id!r}, css_props={len(self._css_props)}, "
            f"transport={self.transport.value!r})"
        )
