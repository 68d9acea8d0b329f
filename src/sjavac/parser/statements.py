# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Statement kinds and the classifier choosing the grammar for a line."""

import enum

from sjavac.errors import UnknownStatement
from sjavac.parser.lexer import Token, TokenType

# ###############
# Public Interface
# ###############


class StatementKind(enum.Enum):
    """The statements of the sJava language, one per grammar rule."""

    VARIABLE_DECLARATION = "variable declaration"
    RETURN = "return statement"
    CONDITIONAL = "conditional"
    METHOD_DECLARATION = "method declaration"
    ASSIGNMENT = "assignment"
    METHOD_CALL = "method call"
    CLOSE_SCOPE = "closing brace"


def classify(first: Token, second: Token | None) -> StatementKind:
    """Decide which statement grammar applies to a line.

    Only the first token decides, except for a leading identifier, where the
    second token tells an assignment (``=``) from a method call (``(``).

    Raises:
        UnknownStatement: If the leading tokens start no known statement.
    """
    kind = _LEADING_KINDS.get(first.type)
    if kind is not None:
        return kind
    if first.type == TokenType.IDENTIFIER and second is not None:
        if second.type == TokenType.EQUALS:
            return StatementKind.ASSIGNMENT
        if second.type == TokenType.LPAREN:
            return StatementKind.METHOD_CALL
    raise UnknownStatement(str(first) if second is None else f"{first} {second}")


# ################
# Implementation
# ################

_LEADING_KINDS: dict[TokenType, StatementKind] = {
    TokenType.FINAL: StatementKind.VARIABLE_DECLARATION,
    TokenType.INT: StatementKind.VARIABLE_DECLARATION,
    TokenType.DOUBLE: StatementKind.VARIABLE_DECLARATION,
    TokenType.BOOLEAN: StatementKind.VARIABLE_DECLARATION,
    TokenType.CHAR: StatementKind.VARIABLE_DECLARATION,
    TokenType.STRING: StatementKind.VARIABLE_DECLARATION,
    TokenType.RETURN: StatementKind.RETURN,
    TokenType.IF: StatementKind.CONDITIONAL,
    TokenType.WHILE: StatementKind.CONDITIONAL,
    TokenType.VOID: StatementKind.METHOD_DECLARATION,
    TokenType.RBRACE: StatementKind.CLOSE_SCOPE,
}
