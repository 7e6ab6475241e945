"""Diagnostic model: non-fatal messages produced while reading a chart."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a chart that was repaired or worth noting.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        row: The 1-based chart row involved, if applicable.
        fix: What the reader did about it, if anything.
    """

    rule: str
    severity: Severity
    message: str
    row: int | None = None
    fix: str | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [row={self.row}]" if self.row is not None else ""
        return f"{self.severity.value}{location}: {self.message}"
