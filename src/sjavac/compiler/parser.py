# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single-line predictive parser for sJava statements.

A parser is bound to one scope and validates one line per call: it picks the
statement grammar from the leading tokens, consumes the line token by token,
runs the semantic checks, and declares variables and methods in its scope as
a side effect.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from sjavac.compiler.semantic_analysis import (
    VALUE_TOKENS,
    SemanticAnalyzer,
    verify_assignable_token,
)
from sjavac.errors import (
    InvalidParameterDefinition,
    MethodAlreadyDeclared,
    UnexpectedToken,
    VariableAlreadyDeclared,
)
from sjavac.model.scope import Scope
from sjavac.model.symbol_table import SymbolAlreadyExistsError
from sjavac.model.symbols import MethodSymbol, VariableSymbol, VariableType
from sjavac.parser.lexer import Token, TokenType, is_valid_method_name, tokenize
from sjavac.parser.statements import StatementKind, classify

# ###############
# Public Interface
# ###############


class Parser:
    """Parses and validates single sJava lines against a scope."""

    def __init__(self, scope: Scope) -> None:
        self._scope = scope
        self._analyzer = SemanticAnalyzer(scope)
        self._tokens: Iterator[Token] = iter(())
        self._current: Token | None = None
        self._next: Token | None = None

    def parse(self, line: str) -> StatementKind | None:
        """Parse one line and apply its declarations to the bound scope.

        Args:
            line: A single line of source text.

        Returns:
            The statement kind of the line, or None if the line holds no
            statement (blank or comment line, or a method declaration with
            an illegal name).

        Raises:
            SJavacError: On the first lexical, grammatical or semantic error.
        """
        self._tokens = tokenize(line)
        self._current = None
        self._next = self._pull()
        if self._next is None:
            return None
        self._advance()
        assert self._current is not None
        statement = classify(self._current, self._next)
        if statement == StatementKind.METHOD_DECLARATION and not self._names_valid_method():
            return None
        _RULES[statement](self)
        return statement

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _pull(self) -> Token | None:
        """Return the next token from the line, or None at end of line."""
        return next(self._tokens, None)

    def _advance(self) -> Token:
        """Shift the lookahead token into the current position."""
        assert self._next is not None
        self._current = self._next
        self._next = self._pull()
        return self._current

    def _check(self, *types: TokenType) -> bool:
        """Return True if the lookahead token matches any of the given types."""
        return self._next is not None and self._next.type in types

    def _accept(self, token_type: TokenType) -> bool:
        """Consume the lookahead token if it has the given type."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _expect(self, token_type: TokenType) -> Token:
        """Consume the lookahead token, which must have the given type.

        Raises UnexpectedToken if it does not.
        """
        if not self._check(token_type):
            raise UnexpectedToken(token_type, self._next)
        return self._advance()

    def _expect_type(self) -> VariableType:
        """Consume a variable type keyword and return the type it names."""
        if self._next is None or self._next.type not in _TYPE_KEYWORDS:
            raise UnexpectedToken(None, self._next, description="a variable type")
        return _TYPE_KEYWORDS[self._advance().type]

    def _end(self) -> None:
        """Assert that the statement is complete, i.e. no tokens remain."""
        if self._next is not None:
            raise UnexpectedToken(None, self._next)

    def _match_value(self, target: VariableType) -> Token:
        """Consume a value token and check it may be assigned to *target*.

        Literals must be of an assignable kind; identifiers must be declared,
        initialized and of a covariant type.
        """
        token = self._next
        if token is None or token.type not in VALUE_TOKENS:
            raise UnexpectedToken(None, token, description="a value")
        verify_assignable_token(target, token.type)
        self._advance()
        if token.type == TokenType.IDENTIFIER:
            assert token.value is not None
            self._analyzer.verify_variable_usage(target, token.value)
        return token

    def _names_valid_method(self) -> bool:
        """Return True unless the method being declared has an illegal name."""
        return not (
            self._next is not None
            and self._next.type == TokenType.IDENTIFIER
            and self._next.value is not None
            and not is_valid_method_name(self._next.value)
        )

    # ------------------------------------------------------------------
    # Method declarations
    # ------------------------------------------------------------------

    def _parse_method_declaration(self) -> None:
        """Parse: void <name> ( [[final] <type> <name> [, ...]] ) {"""
        name_tok = self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.LPAREN)
        parameters: dict[str, VariableSymbol] = {}
        if not self._accept(TokenType.RPAREN):
            self._parse_parameter(parameters)
            while self._accept(TokenType.COMMA):
                self._parse_parameter(parameters)
            self._expect(TokenType.RPAREN)
        self._expect(TokenType.LBRACE)
        self._end()

        assert name_tok.value is not None
        method = MethodSymbol(parameters=tuple(parameters.items()))
        try:
            self._scope.add_method(name_tok.value, method)
        except SymbolAlreadyExistsError:
            raise MethodAlreadyDeclared(name_tok.value) from None

    def _parse_parameter(self, parameters: dict[str, VariableSymbol]) -> None:
        """Parse one parameter: [final] <type> <name>"""
        final = self._accept(TokenType.FINAL)
        if not self._check(*_TYPE_KEYWORDS):
            raise InvalidParameterDefinition(f"Expected a parameter type, got {self._describe_next()}")
        param_type = self._expect_type()
        name = self._expect(TokenType.IDENTIFIER).value
        assert name is not None
        if name in parameters:
            raise InvalidParameterDefinition(f"Duplicate parameter name '{name}'")
        parameters[name] = VariableSymbol.initialized(param_type, final=final)

    # ------------------------------------------------------------------
    # Variable declarations and assignments
    # ------------------------------------------------------------------

    def _parse_variable_declaration(self) -> None:
        """Parse: [final] <type> <name> [= <value>] [, <name> [= <value>]]* ;

        A final declaration requires every entry to be initialized.
        """
        assert self._current is not None
        final = self._current.type == TokenType.FINAL
        var_type = self._expect_type() if final else _TYPE_KEYWORDS[self._current.type]
        self._parse_declarator(var_type, final)
        while self._accept(TokenType.COMMA):
            self._parse_declarator(var_type, final)
        self._expect(TokenType.SEMICOLON)
        self._end()

    def _parse_declarator(self, var_type: VariableType, final: bool) -> None:
        """Parse one ``<name> [= <value>]`` entry and declare it."""
        name = self._expect(TokenType.IDENTIFIER).value
        assert name is not None
        if final:
            self._expect(TokenType.EQUALS)
            initialized = True
        else:
            initialized = self._accept(TokenType.EQUALS)

        if initialized:
            self._match_value(var_type)
            symbol = VariableSymbol.initialized(var_type, final=final)
        else:
            symbol = VariableSymbol.declared(var_type)

        try:
            self._scope.add_variable(name, symbol)
        except SymbolAlreadyExistsError:
            raise VariableAlreadyDeclared(name) from None

    def _parse_assignment(self) -> None:
        """Parse: <name> = <value> ;"""
        assert self._current is not None and self._current.value is not None
        name = self._current.value
        symbol = self._analyzer.require_declared(name)
        self._expect(TokenType.EQUALS)
        self._analyzer.require_non_final(name, symbol)
        self._match_value(symbol.type)
        self._expect(TokenType.SEMICOLON)
        self._end()
        self._scope.mark_initialized(name)

    # ------------------------------------------------------------------
    # Control flow
    # ------------------------------------------------------------------

    def _parse_conditional(self) -> None:
        """Parse: (if|while) ( <condition> [(&&|||) <condition>]* ) {

        Every condition is checked; evaluation is never short-circuited.
        """
        self._expect(TokenType.LPAREN)
        self._match_value(VariableType.BOOLEAN)
        while self._accept(TokenType.AND) or self._accept(TokenType.OR):
            self._match_value(VariableType.BOOLEAN)
        self._expect(TokenType.RPAREN)
        self._expect(TokenType.LBRACE)
        self._end()

    def _parse_return(self) -> None:
        """Parse: return ;"""
        self._expect(TokenType.SEMICOLON)
        self._end()

    def _parse_method_call(self) -> None:
        """Parse: <name> ( [<value> [, <value>]*] ) ;

        Arguments are checked positionally against the declared parameters.
        """
        assert self._current is not None and self._current.value is not None
        method = self._analyzer.require_method(self._current.value)
        self._expect(TokenType.LPAREN)
        for index, (_, parameter) in enumerate(method.parameters):
            if index > 0:
                self._expect(TokenType.COMMA)
            self._match_value(parameter.type)
        self._expect(TokenType.RPAREN)
        self._expect(TokenType.SEMICOLON)
        self._end()

    def _parse_close_scope(self) -> None:
        """Parse: }"""
        self._end()

    def _describe_next(self) -> str:
        return repr(str(self._next)) if self._next is not None else "end of line"


def parse_line(line: str, scope: Scope) -> StatementKind | None:
    """Parse a single line against *scope* with a fresh :class:`Parser`."""
    return Parser(scope).parse(line)


# ################
# Implementation
# ################

_TYPE_KEYWORDS: dict[TokenType, VariableType] = {
    TokenType.INT: VariableType.INT,
    TokenType.DOUBLE: VariableType.DOUBLE,
    TokenType.BOOLEAN: VariableType.BOOLEAN,
    TokenType.CHAR: VariableType.CHAR,
    TokenType.STRING: VariableType.STRING,
}

# One grammar rule per statement kind.
_RULES: dict[StatementKind, Callable[[Parser], None]] = {
    StatementKind.METHOD_DECLARATION: Parser._parse_method_declaration,
    StatementKind.VARIABLE_DECLARATION: Parser._parse_variable_declaration,
    StatementKind.ASSIGNMENT: Parser._parse_assignment,
    StatementKind.CONDITIONAL: Parser._parse_conditional,
    StatementKind.RETURN: Parser._parse_return,
    StatementKind.METHOD_CALL: Parser._parse_method_call,
    StatementKind.CLOSE_SCOPE: Parser._parse_close_scope,
}
