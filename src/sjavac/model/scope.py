# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Chained lexical scopes for sJava blocks.

A scope owns one variable table and one method table and refers to its
enclosing scope for lookup only. Lookups start at the innermost scope and
walk outward; the first table containing the name wins, so inner
declarations shadow outer ones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sjavac.model.symbol_table import NoSuchSymbolError, SymbolTable
from sjavac.model.symbols import MethodSymbol, VariableSymbol

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Scope:
    """A block's declared variables and routines, chained to its parent."""

    def __init__(self, parent: Scope | None = None) -> None:
        self._variables: SymbolTable[VariableSymbol] = SymbolTable()
        self._methods: SymbolTable[MethodSymbol] = SymbolTable()
        self._parent = parent

    @property
    def parent(self) -> Scope | None:
        return self._parent

    @property
    def is_global(self) -> bool:
        return self._parent is None

    def add_variable(self, name: str, symbol: VariableSymbol) -> None:
        """Declare a variable in this scope.

        Raises:
            SymbolAlreadyExistsError: If *name* is already declared in this scope.
        """
        self._variables.add(name, symbol)
        logger.debug("Insert variable %s: %s", name, symbol)

    def add_method(self, name: str, symbol: MethodSymbol) -> None:
        """Declare a routine in this scope.

        Raises:
            SymbolAlreadyExistsError: If *name* is already declared in this scope.
        """
        self._methods.add(name, symbol)
        logger.debug("Insert method %s(%s)", name, ", ".join(symbol.parameter_names))

    def lookup_variable(self, name: str) -> VariableSymbol:
        """Return the innermost visible variable named *name*.

        Raises:
            NoSuchSymbolError: If no enclosing scope declares *name*.
        """
        return self._owner_of_variable(name)._variables.get(name)

    def lookup_method(self, name: str) -> MethodSymbol:
        """Return the innermost visible routine named *name*.

        Raises:
            NoSuchSymbolError: If no enclosing scope declares *name*.
        """
        for scope in self._chain():
            if name in scope._methods:
                return scope._methods.get(name)
        raise NoSuchSymbolError(name)

    def method_at(self, ordinal: int) -> MethodSymbol:
        """Return the routine declared *ordinal*-th in this scope (0-based).

        Raises:
            NoSuchSymbolError: If fewer routines were declared.
        """
        for index, (_, symbol) in enumerate(self._methods):
            if index == ordinal:
                return symbol
        raise NoSuchSymbolError(f"#{ordinal}")

    def mark_initialized(self, name: str) -> VariableSymbol:
        """Mark the innermost visible variable named *name* as initialized.

        Returns:
            The updated symbol.

        Raises:
            NoSuchSymbolError: If no enclosing scope declares *name*.
        """
        owner = self._owner_of_variable(name)
        symbol = owner._variables.get(name).as_initialized()
        owner._variables.replace(name, symbol)
        return symbol

    def variables(self) -> Iterator[tuple[str, VariableSymbol]]:
        """Iterate over the variables declared directly in this scope."""
        return iter(self._variables)

    def methods(self) -> Iterator[tuple[str, MethodSymbol]]:
        """Iterate over the routines declared directly in this scope, in declaration order."""
        return iter(self._methods)

    def duplicate(self) -> Scope:
        """Return a detached copy of this scope.

        The copy owns fresh variable bindings, so initializing a variable in
        the copy never affects this scope. The method table is shared;
        routines are never modified once declared.
        """
        scope = Scope()
        for name, symbol in self._variables:
            scope._variables.add(name, symbol)
        scope._methods = self._methods
        return scope

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _chain(self) -> Iterator[Scope]:
        scope: Scope | None = self
        while scope is not None:
            yield scope
            scope = scope._parent

    def _owner_of_variable(self, name: str) -> Scope:
        for scope in self._chain():
            if name in scope._variables:
                return scope
        raise NoSuchSymbolError(name)
