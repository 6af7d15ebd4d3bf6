"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from csstyping.diagnostics.codes import DiagnosticSpec
from csstyping.diagnostics.diagnostic import Diagnostic
from csstyping.text import TextRange


def make_diagnostic(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message or spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
