"""Lexer tokens for the CSS value definition syntax."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from csstyping.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia
    # -------------------------
    WHITESPACE = 10
    SKIPPED = 11  # unrecognized character, reported by the parser

    # -------------------------
    # Component terms
    # -------------------------
    KEYWORD = 20  # auto, -webkit-box, 0, +0
    QUOTED = 21  # '[' literal
    DATA_TYPE = 22  # <length>, <'margin-left'>, <integer [1,∞]>
    FUNCTION = 23  # name( ... ) including the balanced arguments
    COMMA = 24  # ,
    SLASH = 25  # /

    # -------------------------
    # Combinators
    # -------------------------
    BAR = 30  # |
    DOUBLE_BAR = 31  # ||
    DOUBLE_AMP = 32  # &&

    # -------------------------
    # Multipliers
    # -------------------------
    STAR = 40  # *
    PLUS = 41  # +
    QUESTION = 42  # ?
    HASH = 43  # #
    BANG = 44  # !
    RANGE = 45  # {1,4}

    # -------------------------
    # Grouping
    # -------------------------
    LBRACKET = 50  # [
    RBRACKET = 51  # ]

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE,)

    @property
    def is_term(self) -> bool:
        return self in TERM_KINDS

    @property
    def is_combinator(self) -> bool:
        return self in COMBINATOR_KINDS

    @property
    def is_multiplier(self) -> bool:
        return self in MULTIPLIER_KINDS


TERM_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.KEYWORD,
        TokenKind.QUOTED,
        TokenKind.DATA_TYPE,
        TokenKind.COMMA,
        TokenKind.SLASH,
    }
)

COMBINATOR_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.BAR,
        TokenKind.DOUBLE_BAR,
        TokenKind.DOUBLE_AMP,
    }
)

MULTIPLIER_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.STAR,
        TokenKind.PLUS,
        TokenKind.QUESTION,
        TokenKind.HASH,
        TokenKind.BANG,
        TokenKind.RANGE,
    }
)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_WHITESPACE = 1 << 0
    UNTERMINATED = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_whitespace(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_WHITESPACE)

    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)
