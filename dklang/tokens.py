"""Token kinds and keyword table of the dk language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    """Kinds of token the lexer produces."""

    NONE = -1
    IDENTIFIER = 0
    NUMBER = 1
    STRING = 2
    OPERATOR = 3
    KEYWORD = 4
    END_OF_FILE = 5
    ERROR = 6
    COMMENT = 7
    WHITESPACE = 8
    END_OF_LINE = 9
    END_OF_STATEMENT = 10
    COLON = 11
    DOT = 12
    COMMA = 13
    SEMICOLON = 14
    QUESTION = 15
    EXCLAMATION = 16
    AMPERSAND = 17
    OPEN_BRACE = 18
    CLOSE_BRACE = 19
    UNKNOWN = 20
    DELIMITER = 21
    DATA_TYPE = 22
    IF = 23
    ELSE = 24
    FOR = 25
    RETURN = 26
    INT = 27
    FLOAT = 28
    DOUBLE = 29
    CHAR = 30
    STR = 31
    BOOL = 32
    TRUE = 33
    FALSE = 34
    STRUCT = 35
    ENUM = 36
    IMPORT = 37
    MODULE = 38
    USE = 39
    TYPE_REFERENCE = 40


KEYWORDS: dict[str, TokenType] = {
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "return": TokenType.RETURN,
    "i32": TokenType.INT,
    "f32": TokenType.FLOAT,
    "f64": TokenType.DOUBLE,
    "char": TokenType.CHAR,
    "str": TokenType.STR,
    "bool": TokenType.BOOL,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "struct": TokenType.STRUCT,
    "enum": TokenType.ENUM,
    "import": TokenType.IMPORT,
    "mod": TokenType.MODULE,
    "use": TokenType.USE,
    "@": TokenType.TYPE_REFERENCE,
}


def keyword_type(text: str) -> Optional[TokenType]:
    """Return the token type of a keyword, or None if ``text`` is not one."""
    return KEYWORDS.get(text)


@dataclass(frozen=True)
class Token:
    """A token kind together with the bytes it was read from."""

    type: TokenType
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)

    def text(self) -> str:
        """Return the token's bytes decoded as UTF-8."""
        return self.data.decode("utf-8")