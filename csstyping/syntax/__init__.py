"""CSS value definition syntax: lexer, entity tree and parser."""

from csstyping.syntax.entities import (
    Combinator,
    CombinatorKind,
    Component,
    DataTypeReference,
    Entity,
    Function,
    Group,
    Keyword,
    Multiplier,
    MultiplierKind,
    format_entities,
    is_component,
    is_expansive_entity,
    is_optional_entity,
)
from csstyping.syntax.lexer import Lexer, dump_tokens, token_text
from csstyping.syntax.parser import (
    ValueSyntaxParser,
    parse_value_syntax,
    parse_value_syntax_cached,
    parse_value_syntax_result,
)
from csstyping.syntax.result import ValueSyntaxParseResult
from csstyping.syntax.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Combinator",
    "CombinatorKind",
    "Component",
    "DataTypeReference",
    "Entity",
    "Function",
    "Group",
    "Keyword",
    "Lexer",
    "Multiplier",
    "MultiplierKind",
    "Token",
    "TokenFlags",
    "TokenKind",
    "ValueSyntaxParseResult",
    "ValueSyntaxParser",
    "dump_tokens",
    "format_entities",
    "is_component",
    "is_expansive_entity",
    "is_optional_entity",
    "parse_value_syntax",
    "parse_value_syntax_cached",
    "parse_value_syntax_result",
    "token_text",
]
