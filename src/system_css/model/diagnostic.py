"""Diagnostic model: structured messages produced during generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a generation run.

    Attributes:
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        prop: The style prop involved, if applicable.
    """

    severity: Severity
    message: str
    prop: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [prop={self.prop}]" if self.prop else ""
        return f"{self.severity.value}{location}: {self.message}"
