# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Symbol representations stored in sJava scopes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class VariableType(Enum):
    """Variable types of the sJava type system.

    ``VOID`` is a placeholder used only as the return marker of routines.
    """

    INT = "int"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    CHAR = "char"
    STRING = "String"
    VOID = "void"


# The concrete types a variable or parameter may be declared with.
VARIABLE_TYPES: tuple[VariableType, ...] = (
    VariableType.INT,
    VariableType.DOUBLE,
    VariableType.BOOLEAN,
    VariableType.CHAR,
    VariableType.STRING,
)


class VariableSymbol(BaseModel):
    """A declared variable or routine parameter.

    Symbols are immutable values; initializing a variable replaces its symbol
    with an initialized copy (see :meth:`as_initialized`).
    """

    model_config = ConfigDict(frozen=True)

    type: VariableType
    is_final: bool = False
    is_initialized: bool = False

    @classmethod
    def declared(cls, type: VariableType) -> VariableSymbol:
        """A variable declared without an initializer."""
        return cls(type=type)

    @classmethod
    def initialized(cls, type: VariableType, *, final: bool = False) -> VariableSymbol:
        """A variable declared with an initializer."""
        return cls(type=type, is_final=final, is_initialized=True)

    def as_initialized(self) -> VariableSymbol:
        """Return a copy of this symbol marked as initialized."""
        if self.is_initialized:
            return self
        return self.model_copy(update={"is_initialized": True})


class MethodSymbol(BaseModel):
    """A declared routine with its ordered parameter list."""

    model_config = ConfigDict(frozen=True)

    return_type: VariableType = VariableType.VOID
    parameters: tuple[tuple[str, VariableSymbol], ...] = _Field(default_factory=tuple)

    @property
    def parameter_names(self) -> list[str]:
        return [name for name, _ in self.parameters]

    @property
    def arity(self) -> int:
        return len(self.parameters)
