"""Lexer."""

from csstyping.diagnostics import (
    SYNTAX_UNTERMINATED_DATA_TYPE,
    SYNTAX_UNTERMINATED_FUNCTION,
    SYNTAX_UNTERMINATED_QUOTED,
    Diagnostic,
    DiagnosticSpec,
    make_diagnostic,
)
from csstyping.syntax.tokens import Token, TokenFlags, TokenKind
from csstyping.text import TextRange, slice_text_range

# Token kinds after which a `+` starts a signed number instead of a multiplier.
_TERM_START_KINDS = frozenset(
    {
        TokenKind.WHITESPACE,
        TokenKind.LBRACKET,
        TokenKind.BAR,
        TokenKind.DOUBLE_BAR,
        TokenKind.DOUBLE_AMP,
    }
)

_SINGLE_CHAR_KINDS = {
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "*": TokenKind.STAR,
    "?": TokenKind.QUESTION,
    "#": TokenKind.HASH,
    "!": TokenKind.BANG,
    ",": TokenKind.COMMA,
    "/": TokenKind.SLASH,
}


class Lexer:
    """Lossless lexer for value definition syntax strings."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0
        self._current_flags = TokenFlags.NONE
        self._previous_kind: TokenKind | None = None
        self._after_whitespace = False
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, self._position)

    def next_token(self) -> Token:
        self._current_start = self._position
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._position), self._current_flags)

        kind = self._lex_token()
        if self._after_whitespace:
            self._current_flags |= TokenFlags.PRECEDING_WHITESPACE
        self._after_whitespace = kind == TokenKind.WHITESPACE
        self._previous_kind = kind
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch.isspace():
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "<":
            return self._lex_delimited(">", TokenKind.DATA_TYPE, SYNTAX_UNTERMINATED_DATA_TYPE)

        if ch == "'":
            return self._lex_delimited("'", TokenKind.QUOTED, SYNTAX_UNTERMINATED_QUOTED)

        if ch == "{":
            return self._lex_delimited("}", TokenKind.RANGE, None)

        # Two-character combinators
        if ch == "|" and self._peek_char() == "|":
            self._advance(2)
            return TokenKind.DOUBLE_BAR
        if ch == "&" and self._peek_char() == "&":
            self._advance(2)
            return TokenKind.DOUBLE_AMP
        if ch == "|":
            self._advance(1)
            return TokenKind.BAR

        if ch == "+":
            if self._at_term_start() and (self._peek_char().isdigit() or self._peek_char() == "."):
                return self._lex_keyword()
            self._advance(1)
            return TokenKind.PLUS

        if _is_keyword_char(ch):
            return self._lex_keyword()

        single = _SINGLE_CHAR_KINDS.get(ch)
        if single is not None:
            self._advance(1)
            return single

        # Fallback: preserve the character as SKIPPED for the parser to report.
        self._advance(1)
        return TokenKind.SKIPPED

    def _lex_keyword(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and _is_keyword_char(self._current_char()):
            self._advance(1)
        if self._current_char() == "(":
            return self._lex_function()
        return TokenKind.KEYWORD

    def _lex_function(self) -> TokenKind:
        depth = 0
        while not self.is_eof:
            ch = self._current_char()
            self._advance(1)
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1
                if depth == 0:
                    return TokenKind.FUNCTION
        self._report_unterminated(SYNTAX_UNTERMINATED_FUNCTION)
        return TokenKind.FUNCTION

    def _lex_delimited(self, closing: str, kind: TokenKind, spec: DiagnosticSpec | None) -> TokenKind:
        # Consume the opening delimiter
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            self._advance(1)
            if ch == closing:
                return kind
        if spec is None:
            self._current_flags |= TokenFlags.UNTERMINATED
        else:
            self._report_unterminated(spec)
        return kind

    def _report_unterminated(self, spec: DiagnosticSpec) -> None:
        self._current_flags |= TokenFlags.UNTERMINATED
        self._diagnostics.append(make_diagnostic(spec, self.current_range))

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _at_term_start(self) -> bool:
        return self._previous_kind is None or self._previous_kind in _TERM_START_KINDS

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _is_keyword_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_.%∞"


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
