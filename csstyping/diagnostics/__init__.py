"""Diagnostics."""

from csstyping.diagnostics.codes import (
    SYNTAX_DANGLING_COMBINATOR,
    SYNTAX_DANGLING_MULTIPLIER,
    SYNTAX_DUPLICATE_MULTIPLIER,
    SYNTAX_UNCLOSED_GROUP,
    SYNTAX_UNEXPECTED_CLOSING_BRACKET,
    SYNTAX_UNEXPECTED_TOKEN,
    SYNTAX_UNTERMINATED_DATA_TYPE,
    SYNTAX_UNTERMINATED_FUNCTION,
    SYNTAX_UNTERMINATED_QUOTED,
    DiagnosticSpec,
)
from csstyping.diagnostics.diagnostic import Diagnostic, Severity
from csstyping.diagnostics.report import collect_diagnostics, has_errors, make_diagnostic

__all__ = [
    "SYNTAX_DANGLING_COMBINATOR",
    "SYNTAX_DANGLING_MULTIPLIER",
    "SYNTAX_DUPLICATE_MULTIPLIER",
    "SYNTAX_UNCLOSED_GROUP",
    "SYNTAX_UNEXPECTED_CLOSING_BRACKET",
    "SYNTAX_UNEXPECTED_TOKEN",
    "SYNTAX_UNTERMINATED_DATA_TYPE",
    "SYNTAX_UNTERMINATED_FUNCTION",
    "SYNTAX_UNTERMINATED_QUOTED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "make_diagnostic",
]
