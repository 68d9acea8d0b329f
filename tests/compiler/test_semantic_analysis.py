# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the sJava semantic rules."""

import pytest

from sjavac.compiler.semantic_analysis import (
    ASSIGNABLE_TOKENS,
    COVARIANT_TYPES,
    GLOBAL_STATEMENTS,
    METHOD_STATEMENTS,
    SemanticAnalyzer,
    is_covariant,
    verify_assignable_token,
    verify_global_statement,
    verify_method_statement,
)
from sjavac.errors import (
    CannotAssignFinal,
    ContravariantType,
    InvalidAssignmentToken,
    UndeclaredRoutine,
    UndeclaredVariable,
    UnexpectedStatementAtScope,
    UninitializedVariable,
)
from sjavac.model.scope import Scope
from sjavac.model.symbols import VARIABLE_TYPES, MethodSymbol, VariableSymbol, VariableType
from sjavac.parser.lexer import TokenType
from sjavac.parser.statements import StatementKind

# ###############
# Test Helpers
# ###############


def _analyzer() -> SemanticAnalyzer:
    """An analyzer over a scope holding one initialized and one uninitialized variable per type."""
    scope = Scope()
    for var_type in VARIABLE_TYPES:
        scope.add_variable(f"{var_type.value}_set", VariableSymbol.initialized(var_type))
        scope.add_variable(f"{var_type.value}_unset", VariableSymbol.declared(var_type))
    scope.add_method("foo", MethodSymbol())
    return SemanticAnalyzer(scope)


_ALL_PAIRS = [(target, source) for target in VARIABLE_TYPES for source in VARIABLE_TYPES]


# ###############
# Rule Tables
# ###############


class TestRuleTables:
    def test_every_concrete_type_has_rules(self) -> None:
        assert set(ASSIGNABLE_TOKENS) == set(VARIABLE_TYPES)
        assert set(COVARIANT_TYPES) == set(VARIABLE_TYPES)

    def test_identifier_is_always_assignable(self) -> None:
        for tokens in ASSIGNABLE_TOKENS.values():
            assert TokenType.IDENTIFIER in tokens

    def test_widening_order(self) -> None:
        assert COVARIANT_TYPES[VariableType.INT] == {VariableType.INT}
        assert COVARIANT_TYPES[VariableType.DOUBLE] == {VariableType.INT, VariableType.DOUBLE}
        assert COVARIANT_TYPES[VariableType.BOOLEAN] == {
            VariableType.INT,
            VariableType.DOUBLE,
            VariableType.BOOLEAN,
        }
        assert COVARIANT_TYPES[VariableType.STRING] == {VariableType.STRING}
        assert COVARIANT_TYPES[VariableType.CHAR] == {VariableType.CHAR}

    def test_void_is_covariant_with_nothing(self) -> None:
        assert not is_covariant(VariableType.VOID, VariableType.INT)


class TestAssignableTokens:
    @pytest.mark.parametrize(
        ("target", "token_type"),
        [
            (VariableType.INT, TokenType.INTEGER_LITERAL),
            (VariableType.DOUBLE, TokenType.INTEGER_LITERAL),
            (VariableType.DOUBLE, TokenType.DOUBLE_LITERAL),
            (VariableType.BOOLEAN, TokenType.TRUE),
            (VariableType.BOOLEAN, TokenType.FALSE),
            (VariableType.BOOLEAN, TokenType.INTEGER_LITERAL),
            (VariableType.BOOLEAN, TokenType.DOUBLE_LITERAL),
            (VariableType.CHAR, TokenType.CHAR_LITERAL),
            (VariableType.STRING, TokenType.STRING_LITERAL),
        ],
    )
    def test_assignable(self, target: VariableType, token_type: TokenType) -> None:
        verify_assignable_token(target, token_type)

    @pytest.mark.parametrize(
        ("target", "token_type"),
        [
            (VariableType.INT, TokenType.DOUBLE_LITERAL),
            (VariableType.INT, TokenType.TRUE),
            (VariableType.DOUBLE, TokenType.STRING_LITERAL),
            (VariableType.BOOLEAN, TokenType.CHAR_LITERAL),
            (VariableType.CHAR, TokenType.INTEGER_LITERAL),
            (VariableType.STRING, TokenType.CHAR_LITERAL),
        ],
    )
    def test_not_assignable(self, target: VariableType, token_type: TokenType) -> None:
        with pytest.raises(InvalidAssignmentToken) as exc_info:
            verify_assignable_token(target, token_type)
        assert exc_info.value.token_type == token_type
        assert exc_info.value.target == target


# ###############
# Statement Legality
# ###############


class TestStatementLegality:
    def test_global_statements(self) -> None:
        assert GLOBAL_STATEMENTS == {
            StatementKind.METHOD_DECLARATION,
            StatementKind.VARIABLE_DECLARATION,
            StatementKind.ASSIGNMENT,
        }

    @pytest.mark.parametrize("statement", sorted(set(StatementKind) - GLOBAL_STATEMENTS, key=lambda s: s.value))
    def test_illegal_global_statement(self, statement: StatementKind) -> None:
        with pytest.raises(UnexpectedStatementAtScope) as exc_info:
            verify_global_statement(statement)
        assert exc_info.value.statement == statement

    @pytest.mark.parametrize("statement", sorted(METHOD_STATEMENTS, key=lambda s: s.value))
    def test_legal_method_statement(self, statement: StatementKind) -> None:
        verify_method_statement(statement)

    def test_method_declaration_is_illegal_in_method(self) -> None:
        with pytest.raises(UnexpectedStatementAtScope):
            verify_method_statement(StatementKind.METHOD_DECLARATION)


# ###############
# Scope-Aware Checks
# ###############


class TestVariableUsage:
    @pytest.mark.parametrize(("target", "source"), _ALL_PAIRS)
    def test_covariance(self, target: VariableType, source: VariableType) -> None:
        analyzer = _analyzer()
        if source in COVARIANT_TYPES[target]:
            analyzer.verify_variable_usage(target, f"{source.value}_set")
        else:
            with pytest.raises(ContravariantType):
                analyzer.verify_variable_usage(target, f"{source.value}_set")

    def test_uninitialized_usage(self) -> None:
        with pytest.raises(UninitializedVariable) as exc_info:
            _analyzer().verify_variable_usage(VariableType.INT, "int_unset")
        assert exc_info.value.name == "int_unset"

    def test_uninitialized_is_reported_before_type_mismatch(self) -> None:
        with pytest.raises(UninitializedVariable):
            _analyzer().verify_variable_usage(VariableType.INT, "String_unset")

    def test_undeclared_usage(self) -> None:
        with pytest.raises(UndeclaredVariable):
            _analyzer().verify_variable_usage(VariableType.INT, "missing")

    def test_require_declared_returns_symbol(self) -> None:
        symbol = _analyzer().require_declared("char_set")
        assert symbol == VariableSymbol.initialized(VariableType.CHAR)


class TestFinalAndMethods:
    def test_final_cannot_be_assigned(self) -> None:
        with pytest.raises(CannotAssignFinal):
            SemanticAnalyzer.require_non_final("x", VariableSymbol.initialized(VariableType.INT, final=True))

    def test_non_final_can_be_assigned(self) -> None:
        SemanticAnalyzer.require_non_final("x", VariableSymbol.declared(VariableType.INT))

    def test_require_method(self) -> None:
        assert _analyzer().require_method("foo") == MethodSymbol()

    def test_undeclared_method_is_undeclared_variable_class(self) -> None:
        with pytest.raises(UndeclaredRoutine) as exc_info:
            _analyzer().require_method("bar")
        assert isinstance(exc_info.value, UndeclaredVariable)
