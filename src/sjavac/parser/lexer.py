# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line scanner for sJava source files.

Converts a single source line into a lazy stream of tokens. At each position
the token categories are tried in a fixed priority order and the first one
matching exactly at that position wins.
"""

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

from sjavac.errors import UnknownToken

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the sJava lexer."""

    # Symbols and operators
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    SEMICOLON = ";"
    AND = "&&"
    OR = "||"
    EQUALS = "="

    # Keywords
    FINAL = "final"
    INT = "int"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    CHAR = "char"
    STRING = "String"
    VOID = "void"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    WHILE = "while"
    RETURN = "return"

    # Literals
    INTEGER_LITERAL = "integer literal"
    DOUBLE_LITERAL = "double literal"
    STRING_LITERAL = "string literal"
    CHAR_LITERAL = "char literal"

    # Identifiers
    IDENTIFIER = "identifier"

    @property
    def captures_value(self) -> bool:
        """True if tokens of this type carry the matched source text."""
        return self in _VALUE_CAPTURING


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        value: The matched text for literal and identifier tokens, else None.
    """

    type: TokenType
    value: str | None = None

    def __str__(self) -> str:
        return self.value if self.value is not None else self.type.value


ILLEGAL_METHOD_PREFIX = "_"


def is_comment(line: str) -> bool:
    """Return True if the whole line is a ``//`` line comment."""
    return _COMMENT.match(line) is not None


def tokenize(line: str) -> Iterator[Token]:
    """Tokenize one sJava source line.

    Tokens are produced lazily; the returned iterator is consumed once.
    Comment lines and blank lines yield no tokens.

    Args:
        line: A single line of source text without its line terminator.

    Yields:
        Token objects in source order.

    Raises:
        UnknownToken: When no token category matches at a non-blank position.
    """
    if is_comment(line):
        return
    pos = _skip_whitespace(line, 0)
    while pos < len(line):
        token, pos = _scan_token(line, pos)
        yield token
        pos = _skip_whitespace(line, pos)


def is_valid_method_name(name: str) -> bool:
    """Return True if *name* may be used as a routine name."""
    return not name.startswith(ILLEGAL_METHOD_PREFIX)


# ################
# Implementation
# ################

_COMMENT = re.compile(r"//")

# Priority order matters: keywords precede the identifier rule, and the
# integer rule refuses to stop in front of a '.' so doubles are not split.
_TOKEN_RULES: list[tuple[TokenType, re.Pattern[str]]] = [
    (TokenType.LBRACE, re.compile(r"\{")),
    (TokenType.RBRACE, re.compile(r"\}")),
    (TokenType.LPAREN, re.compile(r"\(")),
    (TokenType.RPAREN, re.compile(r"\)")),
    (TokenType.COMMA, re.compile(r",")),
    (TokenType.SEMICOLON, re.compile(r";")),
    (TokenType.AND, re.compile(r"&&")),
    (TokenType.OR, re.compile(r"\|\|")),
    (TokenType.EQUALS, re.compile(r"=")),
    (TokenType.FINAL, re.compile(r"final(?!\w)")),
    (TokenType.INT, re.compile(r"int(?!\w)")),
    (TokenType.DOUBLE, re.compile(r"double(?!\w)")),
    (TokenType.BOOLEAN, re.compile(r"boolean(?!\w)")),
    (TokenType.CHAR, re.compile(r"char(?!\w)")),
    (TokenType.STRING, re.compile(r"String(?!\w)")),
    (TokenType.VOID, re.compile(r"void(?!\w)")),
    (TokenType.TRUE, re.compile(r"true(?!\w)")),
    (TokenType.FALSE, re.compile(r"false(?!\w)")),
    (TokenType.IF, re.compile(r"if(?=[\s(])")),
    (TokenType.WHILE, re.compile(r"while(?=[\s(])")),
    (TokenType.RETURN, re.compile(r"return(?!\w)")),
    (TokenType.INTEGER_LITERAL, re.compile(r"-?\d+(?![\d.])")),
    (TokenType.DOUBLE_LITERAL, re.compile(r"-?(?:\d+\.\d*|\.\d+)")),
    (TokenType.STRING_LITERAL, re.compile(r"\"[^\"\\',]*\"")),
    (TokenType.CHAR_LITERAL, re.compile(r"'[^'\\\",]'")),
    (TokenType.IDENTIFIER, re.compile(r"_\w+|[a-zA-Z]\w*")),
]

_VALUE_CAPTURING: frozenset[TokenType] = frozenset(
    {
        TokenType.INTEGER_LITERAL,
        TokenType.DOUBLE_LITERAL,
        TokenType.STRING_LITERAL,
        TokenType.CHAR_LITERAL,
        TokenType.IDENTIFIER,
    }
)


def _skip_whitespace(line: str, pos: int) -> int:
    """Return the first position at or after *pos* that is not whitespace."""
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def _scan_token(line: str, pos: int) -> tuple[Token, int]:
    """Match the first token category that applies at *pos*."""
    for token_type, pattern in _TOKEN_RULES:
        match = pattern.match(line, pos)
        if match is None:
            continue
        value = match.group() if token_type.captures_value else None
        return Token(token_type, value), match.end()
    raise UnknownToken(line[pos:], pos + 1)
