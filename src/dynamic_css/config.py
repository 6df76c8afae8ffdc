"""Rendering defaults shared by settings and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Transport(Enum):
    """How the hosting framework should propagate value changes."""

    POST_MESSAGE = "postMessage"
    REFRESH = "refresh"


@dataclass(frozen=True)
class RenderConfig:
    noop_key: str = "noop"  # selector group emitted without an at-rule wrapper
    selector_separator: str = ", "
    default_transport: Transport = Transport.POST_MESSAGE


DEFAULT_CONFIG = RenderConfig()
