# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol model for sJava (symbols, symbol tables and scopes)."""

from sjavac.model.scope import Scope
from sjavac.model.symbol_table import NoSuchSymbolError, SymbolAlreadyExistsError, SymbolTable
from sjavac.model.symbols import VARIABLE_TYPES, MethodSymbol, VariableSymbol, VariableType

__all__ = [
    # Symbols
    "VariableType",
    "VARIABLE_TYPES",
    "VariableSymbol",
    "MethodSymbol",
    # Tables
    "SymbolTable",
    "SymbolAlreadyExistsError",
    "NoSuchSymbolError",
    "Scope",
]
