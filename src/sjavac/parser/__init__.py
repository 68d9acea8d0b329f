# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and statement classifier for sJava lines."""

from sjavac.parser.lexer import Token, TokenType, is_comment, tokenize
from sjavac.parser.statements import StatementKind, classify

__all__ = [
    "tokenize",
    "is_comment",
    "Token",
    "TokenType",
    "classify",
    "StatementKind",
]
