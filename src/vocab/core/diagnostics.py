# src/vocab/core/diagnostics.py
"""
Problems found while reading a dictionary.

Warnings describe input that was repaired or dropped while the record kept
going; errors describe records that were abandoned.
"""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class DiagnosticKind(str, Enum):
    BLANK_CONTENT = "blank_content"
    UNKNOWN_TITLE = "unknown_title"
    MALFORMED_BRACKETS = "malformed_brackets"
    REVERSED_BRACKETS = "reversed_brackets"
    TRUNCATED_CONTENT = "truncated_content"
    SKIPPED_RECORD = "skipped_record"


@dataclass
class Diagnostic:
    severity: Severity
    kind: DiagnosticKind
    message: str
    position: int | None = None  # character offset in the input
    key: str = ""

    def __str__(self) -> str:
        where = f" at position {self.position}" if self.position is not None else ""
        word = f" [{self.key}]" if self.key else ""
        return f"{self.severity.value}{where}{word}: {self.message}"


def errors(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    return [d for d in diagnostics if d.severity is Severity.ERROR]
