# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Two-pass validation driver for sJava source files.

Pass 1 walks the global scope only: global variables and method signatures
are declared, and the line of every method declaration is recorded. Pass 2
revisits each method in declaration order, seeds a fresh scope with a copy
of the global variables and the method's parameters, and validates the body
line by line. The first error of either pass ends the run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sjavac.compiler.parser import Parser
from sjavac.compiler.scope_tracker import ScopeTracker, TrackerMode
from sjavac.compiler.semantic_analysis import verify_global_statement, verify_method_statement
from sjavac.compiler.source import SourceFile
from sjavac.errors import (
    FailedMethodScopeInitialization,
    InterpreterError,
    MismatchedBraces,
    MissingReturnStatement,
    SJavacError,
)
from sjavac.model.scope import Scope
from sjavac.model.symbol_table import NoSuchSymbolError, SymbolAlreadyExistsError
from sjavac.parser.statements import StatementKind

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Interpreter:
    """Validates one sJava source without executing it."""

    def __init__(self, source: SourceFile) -> None:
        self._source = source
        self._global = Scope()
        self._method_lines: list[int] = []

    @property
    def global_scope(self) -> Scope:
        """The global scope built by the first pass."""
        return self._global

    @property
    def method_lines(self) -> list[int]:
        """Line numbers of the method declarations, in file order."""
        return list(self._method_lines)

    def interpret(self) -> None:
        """Run both validation passes.

        Raises:
            InterpreterError: On the first error, carrying its line number.
        """
        logger.debug("Pass 1 over '%s' (%d lines)", self._source.name, self._source.count())
        self._first_pass()
        logger.debug("Pass 2 over %d method(s)", len(self._method_lines))
        for ordinal, line_number in enumerate(self._method_lines):
            self._validate_method(ordinal, line_number)

    # ------------------------------------------------------------------
    # Pass 1: global scope
    # ------------------------------------------------------------------

    def _first_pass(self) -> None:
        tracker = ScopeTracker(self._global, TrackerMode.COUNT_ONLY)
        parser = Parser(self._global)
        line_number = 0
        for line_number, line in self._source.lines():
            try:
                if tracker.is_global:
                    statement = parser.parse(line)
                    if statement is not None:
                        self._verify_global_statement(statement, line_number)
                tracker.accept(line)
            except SJavacError as exc:
                raise InterpreterError(line_number, exc) from exc
        if not tracker.is_global:
            raise InterpreterError(line_number, MismatchedBraces("Unclosed block at end of file"))

    def _verify_global_statement(self, statement: StatementKind, line_number: int) -> None:
        if statement == StatementKind.CLOSE_SCOPE:
            raise MismatchedBraces()
        verify_global_statement(statement)
        if statement == StatementKind.METHOD_DECLARATION:
            logger.debug("Method declared at line %d", line_number)
            self._method_lines.append(line_number)

    # ------------------------------------------------------------------
    # Pass 2: method bodies
    # ------------------------------------------------------------------

    def _validate_method(self, ordinal: int, declaration_line: int) -> None:
        tracker = ScopeTracker(self._global.duplicate(), TrackerMode.COUNT_AND_SWITCH)
        line_number = declaration_line
        try:
            # The declaration line opens the method scope.
            tracker.accept(self._source.line(declaration_line))
            self._init_method_scope(tracker.scope, ordinal)
            last: StatementKind | None = None
            before_last: StatementKind | None = None
            for line_number, line in self._source.lines(declaration_line + 1):
                tracker.accept(line)
                statement = Parser(tracker.scope).parse(line)
                if statement is not None:
                    verify_method_statement(statement)
                    before_last, last = last, statement
                if tracker.is_global:
                    break
            if not (before_last == StatementKind.RETURN and last == StatementKind.CLOSE_SCOPE):
                raise MissingReturnStatement()
        except SJavacError as exc:
            raise InterpreterError(line_number, exc) from exc

    def _init_method_scope(self, scope: Scope, ordinal: int) -> None:
        """Declare the parameters of the *ordinal*-th method in *scope*."""
        try:
            method = self._global.method_at(ordinal)
            for name, symbol in method.parameters:
                scope.add_variable(name, symbol)
        except (NoSuchSymbolError, SymbolAlreadyExistsError) as exc:
            raise FailedMethodScopeInitialization(f"Cannot initialize the scope of method #{ordinal + 1}") from exc


def interpret(source: SourceFile) -> None:
    """Validate *source*.

    Raises:
        InterpreterError: On the first lexical, grammatical or semantic error.
    """
    Interpreter(source).interpret()


def interpret_file(path: Path, encoding: str = "utf-8") -> None:
    """Read and validate the sJava file at *path*.

    Raises:
        SourceError: If the file cannot be read.
        InterpreterError: On the first validation error.
    """
    interpret(SourceFile.from_path(path, encoding))
