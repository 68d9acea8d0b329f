# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name-to-symbol mapping for a single block."""

from collections.abc import Iterator
from typing import Generic, TypeVar

# ###############
# Public Interface
# ###############

S = TypeVar("S")


class SymbolAlreadyExistsError(Exception):
    """Raised when a name is inserted twice into the same table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Symbol '{name}' already exists")
        self.name = name


class NoSuchSymbolError(Exception):
    """Raised when a name is not present in a table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No symbol named '{name}'")
        self.name = name


class SymbolTable(Generic[S]):
    """An ordered mapping from names to symbols.

    Iteration yields ``(name, symbol)`` pairs in insertion order, which is the
    declaration order of the source program.
    """

    def __init__(self) -> None:
        self._symbols: dict[str, S] = {}

    def add(self, name: str, symbol: S) -> None:
        """Insert a new symbol.

        Raises:
            SymbolAlreadyExistsError: If *name* is already in this table.
        """
        if name in self._symbols:
            raise SymbolAlreadyExistsError(name)
        self._symbols[name] = symbol

    def get(self, name: str) -> S:
        """Return the symbol bound to *name*.

        Raises:
            NoSuchSymbolError: If *name* is not in this table.
        """
        try:
            return self._symbols[name]
        except KeyError:
            raise NoSuchSymbolError(name) from None

    def replace(self, name: str, symbol: S) -> None:
        """Rebind an existing name to a new symbol, keeping its position."""
        if name not in self._symbols:
            raise NoSuchSymbolError(name)
        self._symbols[name] = symbol

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __iter__(self) -> Iterator[tuple[str, S]]:
        return iter(list(self._symbols.items()))

    def __len__(self) -> int:
        return len(self._symbols)
