"""Value syntax parse result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from csstyping.diagnostics import Diagnostic, has_errors
from csstyping.syntax.entities import Entity


@dataclass(frozen=True, slots=True)
class ValueSyntaxParseResult:
    """Entities recovered from one grammar string plus everything reported on the way."""

    source_text: str
    entities: tuple[Entity, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
