"""Colour modifiers for hex colour settings."""

from __future__ import annotations

import colorsys
import logging
import re
from dataclasses import dataclass, field

from dynamic_css.modifiers.base import Modifier

__all__ = ["Darken", "Lighten", "LinearGradient", "parse_hex", "format_hex", "adjust_lightness"]

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` or ``#rrggbb`` into an RGB triple.

    Raises ValueError for anything else (named colours, ``rgba()``, ...).
    """
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Not a hex colour: {value!r}")
    digits = match.group("digits")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def format_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def adjust_lightness(value: str, amount: float) -> str:
    """Shift the HSL lightness of a hex colour by *amount* percentage points.

    The result is clamped to the valid range and returned as lowercase
    ``#rrggbb``.
    """
    r, g, b = parse_hex(value)
    h, light, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    light = min(1.0, max(0.0, light + amount / 100))
    r2, g2, b2 = colorsys.hls_to_rgb(h, light, s)
    return format_hex((round(r2 * 255), round(g2 * 255), round(b2 * 255)))


def _check_amount(amount: object, kind: str) -> None:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise TypeError(f"{kind} amount must be a number, got {amount!r}")


def _shift(value: str, amount: float, kind: str) -> str:
    if not isinstance(value, str):
        logger.warning("%s: leaving non-string value %r unchanged", kind, value)
        return value
    try:
        return adjust_lightness(value, amount)
    except ValueError:
        logger.warning("%s: leaving non-hex value %r unchanged", kind, value)
        return value


@dataclass(frozen=True)
class Darken:
    """Darken a hex colour by ``amount`` percent of lightness."""

    amount: float = 10

    def __post_init__(self) -> None:
        _check_amount(self.amount, "darken")

    def modify(self, value: str) -> str:
        return _shift(value, -self.amount, "darken")


@dataclass(frozen=True)
class Lighten:
    """Lighten a hex colour by ``amount`` percent of lightness."""

    amount: float = 10

    def __post_init__(self) -> None:
        _check_amount(self.amount, "lighten")

    def modify(self, value: str) -> str:
        return _shift(value, self.amount, "lighten")


@dataclass(frozen=True)
class LinearGradient:
    """Gradient from the raw value to a modified variant of it.

    ``LinearGradient(Darken(20)).modify("#ffffff")`` gives
    ``linear-gradient(to bottom, #ffffff 0%, #cccccc 100%)``.
    """

    modifier: Modifier = field(default_factory=Darken)
    orientation: str = "to bottom"

    def modify(self, value: str) -> str:
        end = self.modifier.modify(value)
        return f"linear-gradient({self.orientation}, {value} 0%, {end} 100%)"
