"""Parser for the CSS value definition syntax.

The output is flat per bracket level: combinators appear between their operands
in source order and no precedence tree is built. Adjacent components without an
explicit combinator are joined by an implicit juxtaposition combinator.
"""

from __future__ import annotations

from functools import lru_cache
import re

from csstyping.diagnostics import (
    SYNTAX_DANGLING_COMBINATOR,
    SYNTAX_DANGLING_MULTIPLIER,
    SYNTAX_DUPLICATE_MULTIPLIER,
    SYNTAX_UNCLOSED_GROUP,
    SYNTAX_UNEXPECTED_CLOSING_BRACKET,
    SYNTAX_UNEXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSpec,
    collect_diagnostics,
    make_diagnostic,
)
from csstyping.syntax.entities import (
    Combinator,
    CombinatorKind,
    DataTypeReference,
    Entity,
    Function,
    Group,
    Keyword,
    Multiplier,
)
from csstyping.syntax.lexer import Lexer, token_text
from csstyping.syntax.result import ValueSyntaxParseResult
from csstyping.syntax.tokens import Token, TokenKind
from csstyping.text import TextRange

_PROPERTY_REFERENCE = re.compile(r"^'(?P<name>[^']+)'$")
# `<integer [1,∞]>` carries a numeric range annotation after the name.
_DATA_TYPE_NAME = re.compile(r"^(?P<name>[^\s\[]+)\s*(?:\[[^\]]*\])?$")
_RANGE = re.compile(r"^\{\s*(?P<min>\d+)\s*(?:(?P<comma>,)\s*(?P<max>\d+)?\s*)?\}$")

_COMBINATOR_KINDS = {
    TokenKind.BAR: CombinatorKind.EXACTLY_ONE,
    TokenKind.DOUBLE_BAR: CombinatorKind.ONE_OR_MORE_ANY_ORDER,
    TokenKind.DOUBLE_AMP: CombinatorKind.ALL_ANY_ORDER,
}

_SIGN_MULTIPLIERS = {
    TokenKind.STAR: Multiplier.zero_or_more,
    TokenKind.PLUS: Multiplier.one_or_more,
    TokenKind.QUESTION: Multiplier.optional,
    TokenKind.HASH: Multiplier.comma_repeated,
    TokenKind.BANG: Multiplier.required,
}


class ValueSyntaxParser:
    """Recursive-descent parser over the token stream of one grammar string."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._lexer = Lexer(source)
        self._tokens = [token for token in self._lexer.lex() if not token.kind.is_trivia]
        self._index = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def current(self) -> Token:
        return self._tokens[self._index]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def bump(self) -> Token:
        token = self.current
        if token.kind != TokenKind.EOF:
            self._index += 1
        return token

    def parse(self) -> ValueSyntaxParseResult:
        entities = self._parse_sequence(in_group=False)
        return ValueSyntaxParseResult(
            source_text=self._source,
            entities=entities,
            diagnostics=tuple(collect_diagnostics(self._lexer.diagnostics, self._diagnostics)),
        )

    def _parse_sequence(self, *, in_group: bool) -> tuple[Entity, ...]:
        entities: list[Entity] = []
        while not self.at(TokenKind.EOF):
            token = self.current
            if token.kind == TokenKind.RBRACKET:
                if in_group:
                    break
                self._report(SYNTAX_UNEXPECTED_CLOSING_BRACKET, token.range)
                self.bump()
                continue

            if token.kind.is_term or token.kind in (TokenKind.LBRACKET, TokenKind.FUNCTION):
                if entities and not isinstance(entities[-1], Combinator):
                    entities.append(Combinator(CombinatorKind.JUXTAPOSITION))
                entities.append(self._parse_component())
                continue

            if token.kind.is_combinator:
                self.bump()
                if not entities or isinstance(entities[-1], Combinator):
                    self._report(SYNTAX_DANGLING_COMBINATOR, token.range)
                    continue
                entities.append(Combinator(_COMBINATOR_KINDS[token.kind]))
                continue

            if token.kind.is_multiplier:
                self._report(SYNTAX_DANGLING_MULTIPLIER, token.range)
                self.bump()
                continue

            self._report(
                SYNTAX_UNEXPECTED_TOKEN,
                token.range,
                message=f"Unexpected token {token_text(self._source, token)!r}",
            )
            self.bump()

        if entities and isinstance(entities[-1], Combinator):
            self._report(SYNTAX_DANGLING_COMBINATOR, self.current.range)
            entities.pop()
        return tuple(entities)

    def _parse_component(self) -> Entity:
        token = self.bump()
        text = token_text(self._source, token)
        match token.kind:
            case TokenKind.LBRACKET:
                inner = self._parse_sequence(in_group=True)
                if self.at(TokenKind.RBRACKET):
                    self.bump()
                else:
                    self._report(SYNTAX_UNCLOSED_GROUP, token.range.cover(self.current.range))
                return Group(inner, self._parse_multiplier())
            case TokenKind.FUNCTION:
                name, _, arguments = text.partition("(")
                if arguments.endswith(")"):
                    arguments = arguments[:-1]
                return Function(name, arguments.strip())
            case TokenKind.DATA_TYPE:
                return _data_type_reference(text, self._parse_multiplier())
            case TokenKind.QUOTED:
                return Keyword(text.strip("'"), self._parse_multiplier())
            case _:
                return Keyword(text, self._parse_multiplier())

    def _parse_multiplier(self) -> Multiplier | None:
        multiplier = self._parse_one_multiplier()
        if multiplier is None:
            return None
        while self._at_attached_multiplier():
            start = self.current.range
            extra = self._parse_one_multiplier()
            if extra is not None:
                self._report(SYNTAX_DUPLICATE_MULTIPLIER, start)
        return multiplier

    def _parse_one_multiplier(self) -> Multiplier | None:
        if not self._at_attached_multiplier():
            return None
        token = self.bump()
        if token.kind == TokenKind.RANGE:
            bounds = self._range_bounds(token)
            return None if bounds is None else Multiplier.range(*bounds)
        if token.kind == TokenKind.HASH and self._at_attached_multiplier() and self.at(TokenKind.RANGE):
            bounds = self._range_bounds(self.bump())
            if bounds is not None:
                return Multiplier.comma_repeated(*bounds)
        return _SIGN_MULTIPLIERS[token.kind]()

    def _at_attached_multiplier(self) -> bool:
        token = self.current
        return token.kind.is_multiplier and not token.has_preceding_whitespace()

    def _range_bounds(self, token: Token) -> tuple[int, int | None] | None:
        match = _RANGE.match(token_text(self._source, token))
        if match is None:
            self._report(
                SYNTAX_UNEXPECTED_TOKEN,
                token.range,
                message=f"Invalid range multiplier {token_text(self._source, token)!r}",
            )
            return None
        minimum = int(match.group("min"))
        if match.group("comma") is None:
            return minimum, minimum
        maximum = match.group("max")
        return minimum, int(maximum) if maximum is not None else None

    def _report(self, spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> None:
        self._diagnostics.append(make_diagnostic(spec, range, message=message))


def _data_type_reference(text: str, multiplier: Multiplier | None) -> DataTypeReference:
    inner = text[1:-1] if text.endswith(">") else text[1:]
    inner = inner.strip()
    property_match = _PROPERTY_REFERENCE.match(inner)
    if property_match is not None:
        return DataTypeReference(property_match.group("name"), multiplier, property_reference=True)
    name_match = _DATA_TYPE_NAME.match(inner)
    name = name_match.group("name") if name_match is not None else inner
    return DataTypeReference(name, multiplier)


def parse_value_syntax_result(text: str) -> ValueSyntaxParseResult:
    """Parse one grammar string, keeping diagnostics."""
    return ValueSyntaxParser(text).parse()


def parse_value_syntax(text: str) -> tuple[Entity, ...]:
    return parse_value_syntax_result(text).entities


@lru_cache(maxsize=4096)
def parse_value_syntax_cached(text: str) -> ValueSyntaxParseResult:
    """Memoized `parse_value_syntax_result`; results are immutable."""
    return parse_value_syntax_result(text)
