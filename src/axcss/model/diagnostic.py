"""Diagnostic model: structured findings produced by the static analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about an axcss source file.

    Attributes:
        rule: Identifier for the analyzer rule that produced this diagnostic.
        severity: How serious the issue is. Errors block compilation.
        message: Human-readable description of the problem.
        line: 1-based line of the offending character.
        column: 1-based column of the offending character.
        suggestion: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    line: int = 1
    column: int = 1
    suggestion: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        return f"{self.line}:{self.column}"

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message} ({self.location})"


def sort_key(diagnostic: Diagnostic) -> tuple[int, int, int]:
    """Order errors first, then by line, then by column."""
    return (0 if diagnostic.is_error else 1, diagnostic.line, diagnostic.column)
