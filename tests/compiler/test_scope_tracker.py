# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for brace-depth tracking."""

import pytest

from sjavac.compiler.scope_tracker import ScopeTracker, TrackerMode, closes_scope, opens_scope
from sjavac.errors import MismatchedBraces
from sjavac.model.scope import Scope
from sjavac.model.symbols import VariableSymbol, VariableType

# ###############
# Line Classification
# ###############


class TestLineClassification:
    @pytest.mark.parametrize("line", ["void foo() {", "if (a) {", "{", "while (b){   ", "  {"])
    def test_opening_lines(self, line: str) -> None:
        assert opens_scope(line)
        assert not closes_scope(line)

    @pytest.mark.parametrize("line", ["}", "   }", "}  ", "\t}\t"])
    def test_closing_lines(self, line: str) -> None:
        assert closes_scope(line)
        assert not opens_scope(line)

    @pytest.mark.parametrize("line", ["", "int a;", "{ int a;", "} else {x", "return;"])
    def test_neutral_lines(self, line: str) -> None:
        assert not opens_scope(line)
        assert not closes_scope(line)

    def test_comment_lines_are_neutral(self) -> None:
        assert not opens_scope("// void foo() {")
        assert not closes_scope("//}")


# ###############
# Counting
# ###############


class TestCountOnly:
    def test_depth_follows_braces(self) -> None:
        tracker = ScopeTracker(Scope())
        depths = []
        for line in ["void foo() {", "if (a) {", "int x;", "}", "}"]:
            tracker.accept(line)
            depths.append(tracker.depth)
        assert depths == [1, 2, 2, 1, 0]
        assert tracker.is_global

    def test_scope_is_never_switched(self) -> None:
        root = Scope()
        tracker = ScopeTracker(root, TrackerMode.COUNT_ONLY)
        tracker.accept("void foo() {")
        assert tracker.scope is root

    def test_closing_at_global_depth(self) -> None:
        tracker = ScopeTracker(Scope())
        with pytest.raises(MismatchedBraces):
            tracker.accept("}")
        assert tracker.depth == 0


class TestCountAndSwitch:
    def test_opening_pushes_child_scope(self) -> None:
        root = Scope()
        tracker = ScopeTracker(root, TrackerMode.COUNT_AND_SWITCH)
        tracker.accept("void foo() {")
        assert tracker.scope is not root
        assert tracker.scope.parent is root

    def test_closing_returns_to_parent(self) -> None:
        root = Scope()
        tracker = ScopeTracker(root, TrackerMode.COUNT_AND_SWITCH)
        tracker.accept("void foo() {")
        tracker.accept("if (a) {")
        inner = tracker.scope
        inner.add_variable("x", VariableSymbol.declared(VariableType.INT))
        tracker.accept("}")
        assert tracker.scope is inner.parent
        tracker.accept("}")
        assert tracker.scope is root
        assert tracker.is_global

    def test_closed_scope_bindings_are_gone(self) -> None:
        tracker = ScopeTracker(Scope(), TrackerMode.COUNT_AND_SWITCH)
        tracker.accept("if (a) {")
        tracker.scope.add_variable("x", VariableSymbol.declared(VariableType.INT))
        tracker.accept("}")
        tracker.accept("while (a) {")
        tracker.scope.add_variable("x", VariableSymbol.declared(VariableType.CHAR))
        assert tracker.scope.lookup_variable("x").type == VariableType.CHAR

    def test_closing_at_global_depth(self) -> None:
        tracker = ScopeTracker(Scope(), TrackerMode.COUNT_AND_SWITCH)
        with pytest.raises(MismatchedBraces):
            tracker.accept("}")
