"""Diagnostic model: structured findings about CSS property descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        index: Position of the offending descriptor in ``css_props``.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    index: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [css_props[{self.index}]]" if self.index is not None else ""
        return f"{self.severity.value}{location}: {self.message}"
