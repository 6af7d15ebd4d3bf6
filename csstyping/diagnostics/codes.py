"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SYNTAX_UNTERMINATED_DATA_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNTERMINATED_DATA_TYPE",
    message="Unterminated data type reference.",
    hint="Close the reference with `>`, e.g. `<length>`.",
    severity="error",
    category="lexer",
)

SYNTAX_UNTERMINATED_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNTERMINATED_FUNCTION",
    message="Unterminated function notation.",
    hint="Balance the parentheses of the function, e.g. `fit-content( <length> )`.",
    severity="error",
    category="lexer",
)

SYNTAX_UNTERMINATED_QUOTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNTERMINATED_QUOTED",
    message="Unterminated quoted literal.",
    hint="Close the literal with a single quote, e.g. `'['`.",
    severity="error",
    category="lexer",
)

SYNTAX_UNCLOSED_GROUP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNCLOSED_GROUP",
    message="Group is missing its closing `]`.",
    severity="error",
    category="parser",
)

SYNTAX_UNEXPECTED_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNEXPECTED_CLOSING_BRACKET",
    message="Unexpected `]` without a matching `[`.",
    severity="error",
    category="parser",
)

SYNTAX_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

SYNTAX_DANGLING_MULTIPLIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_DANGLING_MULTIPLIER",
    message="Multiplier does not follow a component.",
    hint="Multipliers attach directly to the preceding keyword, reference or group.",
    severity="error",
    category="parser",
)

SYNTAX_DUPLICATE_MULTIPLIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_DUPLICATE_MULTIPLIER",
    message="Ignoring additional multiplier on an already multiplied component",
    severity="warning",
    category="parser",
)

SYNTAX_DANGLING_COMBINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_DANGLING_COMBINATOR",
    message="Combinator is missing an operand.",
    severity="warning",
    category="parser",
)
