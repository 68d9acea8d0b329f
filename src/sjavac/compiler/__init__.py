# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation pipeline for sJava files: line parsing, semantic checks, and the two-pass driver."""

from sjavac.compiler.interpreter import Interpreter, interpret, interpret_file
from sjavac.compiler.parser import Parser, parse_line
from sjavac.compiler.scope_tracker import ScopeTracker, TrackerMode
from sjavac.compiler.semantic_analysis import SemanticAnalyzer
from sjavac.compiler.source import SourceFile

__all__ = [
    "Interpreter",
    "interpret",
    "interpret_file",
    "Parser",
    "parse_line",
    "ScopeTracker",
    "TrackerMode",
    "SemanticAnalyzer",
    "SourceFile",
]
