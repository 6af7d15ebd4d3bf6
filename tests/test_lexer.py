from csstyping.diagnostics import SYNTAX_UNTERMINATED_DATA_TYPE, SYNTAX_UNTERMINATED_FUNCTION, SYNTAX_UNTERMINATED_QUOTED
from csstyping.syntax import Lexer, Token, TokenKind, token_text
from tests._debug import debug_dump_tokens


def lex(text: str) -> list[Token]:
    tokens = Lexer(text).lex()
    debug_dump_tokens("lex", text, tokens)
    return tokens


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in lex(text)]


def significant(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token_text(text, token)) for token in lex(text) if not token.kind.is_trivia]


def test_alternation_of_data_type_and_keyword() -> None:
    assert kinds("<length> | auto") == [
        TokenKind.DATA_TYPE,
        TokenKind.WHITESPACE,
        TokenKind.BAR,
        TokenKind.WHITESPACE,
        TokenKind.KEYWORD,
        TokenKind.EOF,
    ]


def test_group_with_trailing_plus_is_a_multiplier() -> None:
    assert kinds("[ a b ]+") == [
        TokenKind.LBRACKET,
        TokenKind.WHITESPACE,
        TokenKind.KEYWORD,
        TokenKind.WHITESPACE,
        TokenKind.KEYWORD,
        TokenKind.WHITESPACE,
        TokenKind.RBRACKET,
        TokenKind.PLUS,
        TokenKind.EOF,
    ]


def test_signed_number_at_term_start_is_a_keyword() -> None:
    assert significant("+0") == [(TokenKind.KEYWORD, "+0"), (TokenKind.EOF, "")]
    assert significant("auto | +1.5") == [
        (TokenKind.KEYWORD, "auto"),
        (TokenKind.BAR, "|"),
        (TokenKind.KEYWORD, "+1.5"),
        (TokenKind.EOF, ""),
    ]
    assert significant("<integer>+") == [
        (TokenKind.DATA_TYPE, "<integer>"),
        (TokenKind.PLUS, "+"),
        (TokenKind.EOF, ""),
    ]


def test_combinators_are_split_by_length() -> None:
    assert [kind for kind, _ in significant("a || b && c | d")] == [
        TokenKind.KEYWORD,
        TokenKind.DOUBLE_BAR,
        TokenKind.KEYWORD,
        TokenKind.DOUBLE_AMP,
        TokenKind.KEYWORD,
        TokenKind.BAR,
        TokenKind.KEYWORD,
        TokenKind.EOF,
    ]


def test_data_type_keeps_property_quotes_and_range_annotation() -> None:
    assert significant("<'margin-left'> <integer [1,∞]>") == [
        (TokenKind.DATA_TYPE, "<'margin-left'>"),
        (TokenKind.DATA_TYPE, "<integer [1,∞]>"),
        (TokenKind.EOF, ""),
    ]


def test_function_consumes_balanced_arguments() -> None:
    source = "fit-content(<length-percentage>) | calc( ( 1 + 2 ) )"
    assert significant(source) == [
        (TokenKind.FUNCTION, "fit-content(<length-percentage>)"),
        (TokenKind.BAR, "|"),
        (TokenKind.FUNCTION, "calc( ( 1 + 2 ) )"),
        (TokenKind.EOF, ""),
    ]


def test_range_and_comma_repeat_multipliers() -> None:
    assert significant("<length>#{1,4} <x>{2,}") == [
        (TokenKind.DATA_TYPE, "<length>"),
        (TokenKind.HASH, "#"),
        (TokenKind.RANGE, "{1,4}"),
        (TokenKind.DATA_TYPE, "<x>"),
        (TokenKind.RANGE, "{2,}"),
        (TokenKind.EOF, ""),
    ]


def test_quoted_literal_and_punctuation_terms() -> None:
    assert significant("'[' <custom-ident>* ']' , /") == [
        (TokenKind.QUOTED, "'['"),
        (TokenKind.DATA_TYPE, "<custom-ident>"),
        (TokenKind.STAR, "*"),
        (TokenKind.QUOTED, "']'"),
        (TokenKind.COMMA, ","),
        (TokenKind.SLASH, "/"),
        (TokenKind.EOF, ""),
    ]


def test_preceding_whitespace_flag() -> None:
    tokens = [token for token in lex("a ?b?") if not token.kind.is_trivia]
    assert tokens[0].kind == TokenKind.KEYWORD
    assert not tokens[0].has_preceding_whitespace()
    assert tokens[1].kind == TokenKind.QUESTION
    assert tokens[1].has_preceding_whitespace()
    assert tokens[2].kind == TokenKind.KEYWORD
    assert not tokens[2].has_preceding_whitespace()
    assert tokens[3].kind == TokenKind.QUESTION
    assert not tokens[3].has_preceding_whitespace()


def test_unknown_character_is_skipped() -> None:
    assert kinds("a & b") == [
        TokenKind.KEYWORD,
        TokenKind.WHITESPACE,
        TokenKind.SKIPPED,
        TokenKind.WHITESPACE,
        TokenKind.KEYWORD,
        TokenKind.EOF,
    ]


def test_unterminated_tokens_report_diagnostics() -> None:
    cases = {
        "<length": SYNTAX_UNTERMINATED_DATA_TYPE.code,
        "'[": SYNTAX_UNTERMINATED_QUOTED.code,
        "calc(1 + (2)": SYNTAX_UNTERMINATED_FUNCTION.code,
    }
    for source, code in cases.items():
        lexer = Lexer(source)
        tokens = lexer.lex()
        assert tokens[0].is_unterminated()
        assert [diagnostic.code for diagnostic in lexer.diagnostics] == [code]
        assert lexer.diagnostics[0].range.as_tuple() == (0, len(source))


def test_unterminated_range_is_flagged_without_diagnostic() -> None:
    lexer = Lexer("a{1,")
    tokens = lexer.lex()
    assert tokens[1].kind == TokenKind.RANGE
    assert tokens[1].is_unterminated()
    assert lexer.diagnostics == []


def test_token_ranges_cover_source_losslessly() -> None:
    source = "[ <length> | auto ]{1,4} && inset?"
    tokens = lex(source)
    assert "".join(token_text(source, token) for token in tokens) == source
