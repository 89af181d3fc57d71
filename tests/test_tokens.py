import pytest

from dklang.tokens import KEYWORDS, Token, TokenType, keyword_type


@pytest.mark.parametrize(
    "word, expected",
    [
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("for", TokenType.FOR),
        ("return", TokenType.RETURN),
        ("i32", TokenType.INT),
        ("f32", TokenType.FLOAT),
        ("f64", TokenType.DOUBLE),
        ("char", TokenType.CHAR),
        ("str", TokenType.STR),
        ("bool", TokenType.BOOL),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("struct", TokenType.STRUCT),
        ("enum", TokenType.ENUM),
        ("import", TokenType.IMPORT),
        ("mod", TokenType.MODULE),
        ("use", TokenType.USE),
        ("@", TokenType.TYPE_REFERENCE),
    ],
)
def test_keyword_type_known(word, expected):
    assert keyword_type(word) is expected


@pytest.mark.parametrize("word", ["", "If", "i64", "while", "module", "x"])
def test_keyword_type_unknown(word):
    assert keyword_type(word) is None


def test_keyword_table_size():
    recognised = [word for word in KEYWORDS if keyword_type(word) is not None]
    assert len(recognised) == 18


def test_none_is_negative_and_identifier_first():
    assert TokenType(-1) is TokenType.NONE
    assert TokenType(0) is TokenType.IDENTIFIER


def test_token_types_are_consecutive():
    assert TokenType(22) is TokenType.DATA_TYPE
    assert TokenType(23) is TokenType.IF
    assert TokenType(40) is TokenType.TYPE_REFERENCE
    assert keyword_type("@") == 40
    with pytest.raises(ValueError):
        TokenType(41)


def test_keyword_types_follow_data_type():
    assert all(keyword_type(word) > TokenType.DATA_TYPE for word in KEYWORDS)


def test_token_text_round_trip():
    token = Token(TokenType.IDENTIFIER, "counter".encode("utf-8"))
    assert token.text() == "counter"
    assert token.size == len("counter")


def test_token_non_ascii_text():
    word = "ñame"
    token = Token(TokenType.STRING, word.encode("utf-8"))
    assert token.text() == word
    assert token.size == len(word.encode("utf-8"))


def test_token_is_immutable():
    token = Token(TokenType.NUMBER, b"1")
    with pytest.raises(AttributeError):
        token.type = TokenType.STRING  # type: ignore[misc]
    assert token.type is TokenType.NUMBER
    assert token.text() == "1"


def test_token_equality():
    assert Token(TokenType.DOT, b".") == Token(TokenType.DOT, b".")
    assert Token(TokenType.DOT, b".") != Token(TokenType.COMMA, b".")