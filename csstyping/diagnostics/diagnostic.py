"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from csstyping.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Lexer or parser finding anchored to a range of the grammar string."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def __str__(self) -> str:
        start, end = self.range.as_tuple()
        text = f"{self.severity} {self.code} [{start}, {end}): {self.message}"
        if self.hint:
            text += f" ({self.hint})"
        return text
