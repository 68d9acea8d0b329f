# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for sJava validation.

Every lexical, grammatical and semantic violation is an :class:`SJavacError`
subclass. Validation is fail-fast: the first error raised aborts the run and
is reported by the interpreter together with the line it was detected on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sjavac.model.symbols import VariableType
    from sjavac.parser.lexer import Token, TokenType
    from sjavac.parser.statements import StatementKind

# ###############
# Public Interface
# ###############


class SJavacError(Exception):
    """Base class for all sJava validation errors."""


class UnknownToken(SJavacError):
    """Raised when no token category matches at the current line position.

    Attributes:
        column: 1-based column where scanning failed.
    """

    def __init__(self, text: str, column: int) -> None:
        super().__init__(f"Unknown token at column {column}: {text!r}")
        self.column = column


class UnknownStatement(SJavacError):
    """Raised when the leading tokens of a line match no statement kind."""

    def __init__(self, leading: str) -> None:
        super().__init__(f"Unknown statement starting with {leading!r}")


class MismatchedBraces(SJavacError):
    """Raised when scopes are closed more often than opened, or left open."""

    def __init__(self, message: str = "Closing brace without a matching opening brace") -> None:
        super().__init__(message)


class UnexpectedToken(SJavacError):
    """Raised when a grammar rule requires a token category that is not present.

    Attributes:
        expected: The required token type, or None when the statement should
            have ended but further tokens remained, or when any of several
            token types would do (see *description*).
        found: The token found instead, or None at end of line.
    """

    def __init__(self, expected: TokenType | None, found: Token | None, *, description: str | None = None) -> None:
        if description is None:
            description = repr(expected.value) if expected is not None else "end of statement"
        got = repr(str(found)) if found is not None else "end of line"
        super().__init__(f"Expected {description}, got {got}")
        self.expected = expected
        self.found = found


class VariableAlreadyDeclared(SJavacError):
    """Raised when a variable name is declared twice in the same block."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable '{name}' is already declared in this scope")
        self.name = name


class MethodAlreadyDeclared(SJavacError):
    """Raised when a routine name is declared twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Method '{name}' is already declared")
        self.name = name


class InvalidParameterDefinition(SJavacError):
    """Raised on a malformed or duplicate routine parameter."""


class UndeclaredVariable(SJavacError):
    """Raised when a name is not found anywhere in the scope chain."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Variable '{name}' is not declared")
        self.name = name


class UndeclaredRoutine(UndeclaredVariable):
    """Raised when a called routine is not declared."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Method '{name}' is not declared")


class UninitializedVariable(SJavacError):
    """Raised when a declared but never initialized variable is used as a value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable '{name}' is used before being initialized")
        self.name = name


class ContravariantType(SJavacError):
    """Raised when an identifier value has a type not covariant with the target.

    Attributes:
        expected: The target variable type.
        actual: The declared type of the identifier used as value.
    """

    def __init__(self, expected: VariableType, actual: VariableType) -> None:
        super().__init__(f"Cannot use a value of type '{actual.value}' where '{expected.value}' is expected")
        self.expected = expected
        self.actual = actual


class InvalidAssignmentToken(SJavacError):
    """Raised when a literal value has a lexical kind not assignable to the target.

    Attributes:
        token_type: The offending literal token type.
        target: The target variable type.
    """

    def __init__(self, token_type: TokenType, target: VariableType) -> None:
        super().__init__(f"Cannot assign {token_type.value} to a variable of type '{target.value}'")
        self.token_type = token_type
        self.target = target


class CannotAssignFinal(SJavacError):
    """Raised when a final variable is assigned after its declaration."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot assign to final variable '{name}'")
        self.name = name


class UnexpectedStatementAtScope(SJavacError):
    """Raised when a statement kind is illegal for the scope it appears in.

    Attributes:
        statement: The offending statement kind.
    """

    def __init__(self, statement: StatementKind, scope_label: str) -> None:
        super().__init__(f"{statement.value.capitalize()} is not allowed in {scope_label}")
        self.statement = statement


class FailedMethodScopeInitialization(SJavacError):
    """Raised when a routine's parameters cannot be copied into its new scope."""


class MissingReturnStatement(SJavacError):
    """Raised when a routine body does not end with ``return;`` followed by ``}``."""

    def __init__(self) -> None:
        super().__init__("Method body must end with a return statement followed by '}'")


class InterpreterError(Exception):
    """The single diagnostic produced by a failed validation run.

    Attributes:
        line: 1-based line number at which the error was detected.
        error: The underlying validation error.
    """

    def __init__(self, line: int, error: SJavacError) -> None:
        super().__init__(f"Line {line}: {error}")
        self.line = line
        self.error = error


class SourceError(Exception):
    """Raised when a source file cannot be read."""
