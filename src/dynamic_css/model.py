"""CSS property descriptor model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from dynamic_css.config import DEFAULT_CONFIG, Transport

NOOP = DEFAULT_CONFIG.noop_key

__all__ = ["CSSProperty", "NOOP", "Transport"]


@dataclass(frozen=True)
class CSSProperty:
    """One CSS property driven by a dynamic setting.

    ``selectors`` maps a media-query key to the selectors that share it.  The
    ``"noop"`` key means the rule is emitted at top level; any other key is
    used verbatim as the at-rule prelude, e.g. ``"@media (min-width: 900px)"``::

        CSSProperty(
            name="color",
            selectors={
                "noop": [".selector1", ".selector2"],
                "@media (min-width: 900px)": [".selector3"],
            },
            modifier=Darken(10),
        )

    ``modifier`` is either ``None``, a callable, or an object with a
    ``modify`` method.
    """

    name: str
    selectors: dict[str, list[str]] = field(default_factory=dict)
    modifier: Any = None

    @property
    def has_modifier(self) -> bool:
        return self.modifier is not None

    def groups(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(media_query_key, selectors)`` pairs in insertion order."""
        yield from self.selectors.items()

