# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic rules of the sJava language.

Holds the fixed rule tables (which literal kinds may be assigned to each
type, which declared types are covariant with each type, which statements
are legal at global scope and inside a method body) and the scope-aware
checks built on them: is a name declared, initialized, final, and of a
compatible type.
"""

from __future__ import annotations

from sjavac.errors import (
    CannotAssignFinal,
    ContravariantType,
    InvalidAssignmentToken,
    UndeclaredRoutine,
    UndeclaredVariable,
    UninitializedVariable,
    UnexpectedStatementAtScope,
)
from sjavac.model.scope import Scope
from sjavac.model.symbol_table import NoSuchSymbolError
from sjavac.model.symbols import MethodSymbol, VariableSymbol, VariableType
from sjavac.parser.lexer import TokenType
from sjavac.parser.statements import StatementKind

# ###############
# Public Interface
# ###############

# Token types that may appear where a value is expected.
VALUE_TOKENS: frozenset[TokenType] = frozenset(
    {
        TokenType.INTEGER_LITERAL,
        TokenType.DOUBLE_LITERAL,
        TokenType.STRING_LITERAL,
        TokenType.CHAR_LITERAL,
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.IDENTIFIER,
    }
)

# Lexical kinds assignable to a variable of each type. Identifiers are always
# allowed here and resolved against the scope at check time.
ASSIGNABLE_TOKENS: dict[VariableType, frozenset[TokenType]] = {
    VariableType.INT: frozenset({TokenType.INTEGER_LITERAL, TokenType.IDENTIFIER}),
    VariableType.DOUBLE: frozenset({TokenType.INTEGER_LITERAL, TokenType.DOUBLE_LITERAL, TokenType.IDENTIFIER}),
    VariableType.BOOLEAN: frozenset(
        {
            TokenType.INTEGER_LITERAL,
            TokenType.DOUBLE_LITERAL,
            TokenType.TRUE,
            TokenType.FALSE,
            TokenType.IDENTIFIER,
        }
    ),
    VariableType.CHAR: frozenset({TokenType.CHAR_LITERAL, TokenType.IDENTIFIER}),
    VariableType.STRING: frozenset({TokenType.STRING_LITERAL, TokenType.IDENTIFIER}),
}

# Declared types an identifier may have when used as a value of each type:
# int < double < boolean, with char and String isolated.
COVARIANT_TYPES: dict[VariableType, frozenset[VariableType]] = {
    VariableType.INT: frozenset({VariableType.INT}),
    VariableType.DOUBLE: frozenset({VariableType.INT, VariableType.DOUBLE}),
    VariableType.BOOLEAN: frozenset({VariableType.INT, VariableType.DOUBLE, VariableType.BOOLEAN}),
    VariableType.CHAR: frozenset({VariableType.CHAR}),
    VariableType.STRING: frozenset({VariableType.STRING}),
}

GLOBAL_STATEMENTS: frozenset[StatementKind] = frozenset(
    {
        StatementKind.METHOD_DECLARATION,
        StatementKind.VARIABLE_DECLARATION,
        StatementKind.ASSIGNMENT,
    }
)

METHOD_STATEMENTS: frozenset[StatementKind] = frozenset(
    {
        StatementKind.VARIABLE_DECLARATION,
        StatementKind.CONDITIONAL,
        StatementKind.ASSIGNMENT,
        StatementKind.RETURN,
        StatementKind.METHOD_CALL,
        StatementKind.CLOSE_SCOPE,
    }
)


def verify_global_statement(statement: StatementKind) -> None:
    """Raise UnexpectedStatementAtScope unless *statement* is legal at global scope."""
    if statement not in GLOBAL_STATEMENTS:
        raise UnexpectedStatementAtScope(statement, "the global scope")


def verify_method_statement(statement: StatementKind) -> None:
    """Raise UnexpectedStatementAtScope unless *statement* is legal inside a method body."""
    if statement not in METHOD_STATEMENTS:
        raise UnexpectedStatementAtScope(statement, "a method body")


def verify_assignable_token(target: VariableType, token_type: TokenType) -> None:
    """Check that a value token of *token_type* may be assigned to *target*.

    Raises:
        InvalidAssignmentToken: If the lexical kind is not assignable.
    """
    if token_type not in ASSIGNABLE_TOKENS[target]:
        raise InvalidAssignmentToken(token_type, target)


def is_covariant(target: VariableType, source: VariableType) -> bool:
    """Return True if a variable of type *source* may flow into *target*."""
    return source in COVARIANT_TYPES.get(target, frozenset())


class SemanticAnalyzer:
    """Scope-aware semantic checks for one parser invocation."""

    def __init__(self, scope: Scope) -> None:
        self._scope = scope

    def require_declared(self, name: str) -> VariableSymbol:
        """Return the visible variable *name*.

        Raises:
            UndeclaredVariable: If *name* is not declared in any enclosing scope.
        """
        try:
            return self._scope.lookup_variable(name)
        except NoSuchSymbolError:
            raise UndeclaredVariable(name) from None

    def require_method(self, name: str) -> MethodSymbol:
        """Return the visible routine *name*.

        Raises:
            UndeclaredRoutine: If no routine *name* is declared.
        """
        try:
            return self._scope.lookup_method(name)
        except NoSuchSymbolError:
            raise UndeclaredRoutine(name) from None

    def verify_variable_usage(self, target: VariableType, name: str) -> None:
        """Check that variable *name* may be used as a value of type *target*.

        Raises:
            UndeclaredVariable: If *name* is not declared.
            UninitializedVariable: If *name* was never initialized.
            ContravariantType: If the declared type of *name* does not flow into *target*.
        """
        symbol = self.require_declared(name)
        if not symbol.is_initialized:
            raise UninitializedVariable(name)
        if not is_covariant(target, symbol.type):
            raise ContravariantType(target, symbol.type)

    @staticmethod
    def require_non_final(name: str, symbol: VariableSymbol) -> None:
        """Raise CannotAssignFinal if *symbol* is final."""
        if symbol.is_final:
            raise CannotAssignFinal(name)
