import pytest

from simplelang import LexError, Token, TokenKind, TokenizerConfig, tokenize

def kinds(text, config=None):
    return [t.kind for t in tokenize(text, config)]

def test_let_statement():
    assert tokenize("let x = 3.14") == [
        Token(TokenKind.LET, "let"),
        Token(TokenKind.IDENTIFIER, "x"),
        Token(TokenKind.ASSIGN, "="),
        Token(TokenKind.NUMBER, "3.14"),
        Token(TokenKind.END_OF_INPUT, ""),
    ]

def test_empty_and_blank_input_only_has_end_token():
    assert kinds("") == [TokenKind.END_OF_INPUT]
    assert kinds("   \t ") == [TokenKind.END_OF_INPUT]

def test_keywords_are_case_insensitive_identifiers_keep_case():
    toks = tokenize("LET Count = Input()")
    assert toks[0] == Token(TokenKind.LET, "LET")
    assert toks[1] == Token(TokenKind.IDENTIFIER, "Count")
    assert toks[3].kind == TokenKind.INPUT
    assert kinds("If Else OUTPUT")[:3] == [TokenKind.IF, TokenKind.ELSE, TokenKind.OUTPUT]

def test_identifier_may_contain_digits_after_first_letter():
    toks = tokenize("x1y2 letter")
    assert toks[0] == Token(TokenKind.IDENTIFIER, "x1y2")
    # keyword prefix does not split an identifier
    assert toks[1] == Token(TokenKind.IDENTIFIER, "letter")

def test_number_forms():
    assert tokenize("12")[0] == Token(TokenKind.NUMBER, "12")
    assert tokenize("5.")[0] == Token(TokenKind.NUMBER, "5.")
    assert tokenize("0.25")[0] == Token(TokenKind.NUMBER, "0.25")

def test_number_with_two_points_is_an_error():
    with pytest.raises(LexError):
        tokenize("1.2.3")

def test_single_character_tokens():
    assert kinds("+ - * / % ^ ( ) , { }") == [
        TokenKind.PLUS, TokenKind.MINUS, TokenKind.MULTIPLY, TokenKind.DIVIDE,
        TokenKind.REMAINDER, TokenKind.POWER, TokenKind.LPAREN, TokenKind.RPAREN,
        TokenKind.COMMA, TokenKind.LBRACE, TokenKind.RBRACE, TokenKind.END_OF_INPUT,
    ]

def test_two_character_operators_win_over_prefixes():
    assert kinds(">= <= == != > < =") == [
        TokenKind.GREATER_EQUAL, TokenKind.LESS_EQUAL, TokenKind.EQUAL_EQUAL,
        TokenKind.NOT_EQUAL, TokenKind.GREATER, TokenKind.LESS, TokenKind.ASSIGN,
        TokenKind.END_OF_INPUT,
    ]
    assert kinds("a>=b") == [
        TokenKind.IDENTIFIER, TokenKind.GREATER_EQUAL, TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT,
    ]

def test_bare_bang_is_an_error():
    with pytest.raises(LexError, match="'!'"):
        tokenize("x ! 3")

def test_unknown_character_names_character_and_chunk():
    with pytest.raises(LexError) as excinfo:
        tokenize("let x = 2 @ 3")
    msg = str(excinfo.value)
    assert "'@'" in msg
    assert "column 11" in msg
    assert "let x = 2 @ 3" in msg

def test_underscore_is_not_part_of_identifiers():
    with pytest.raises(LexError):
        tokenize("my_var = 1")

def test_exactly_one_end_token():
    toks = tokenize("output(1)")
    assert [t.kind for t in toks].count(TokenKind.END_OF_INPUT) == 1
    assert toks[-1].kind == TokenKind.END_OF_INPUT

def test_custom_config_adds_keyword_alias():
    config = TokenizerConfig.default()
    config.keywords["print"] = TokenKind.OUTPUT
    assert kinds("print(1)", config)[0] == TokenKind.OUTPUT
    assert kinds("print(1)")[0] == TokenKind.IDENTIFIER
