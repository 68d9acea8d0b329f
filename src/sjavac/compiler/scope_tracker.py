# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""Brace-depth tracking across source lines.

A line opens a block when it ends with ``{`` and closes one when it holds a
lone ``}``. The tracker either only counts the nesting depth, or also opens
and closes :class:`~sjavac.model.scope.Scope` objects in lockstep.
"""

from __future__ import annotations

import enum
import logging
import re

from sjavac.errors import MismatchedBraces
from sjavac.model.scope import Scope
from sjavac.parser.lexer import is_comment

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TrackerMode(enum.Enum):
    """How a :class:`ScopeTracker` reacts to depth changes."""

    COUNT_ONLY = "count-only"
    COUNT_AND_SWITCH = "count-and-switch"


def opens_scope(line: str) -> bool:
    """Return True if *line* opens a block."""
    return not is_comment(line) and _OPENING.fullmatch(line) is not None


def closes_scope(line: str) -> bool:
    """Return True if *line* closes a block."""
    return not is_comment(line) and _CLOSING.fullmatch(line) is not None


class ScopeTracker:
    """Maintains block nesting depth, optionally switching scopes.

    Attributes:
        depth: Current nesting depth; 0 is the global scope.
    """

    def __init__(self, root: Scope, mode: TrackerMode = TrackerMode.COUNT_ONLY) -> None:
        self._scope = root
        self._mode = mode
        self.depth = 0

    @property
    def scope(self) -> Scope:
        """The innermost scope (always the root in count-only mode)."""
        return self._scope

    @property
    def is_global(self) -> bool:
        return self.depth == 0

    def accept(self, line: str) -> None:
        """Update the depth (and scope) according to *line*.

        Raises:
            MismatchedBraces: If *line* closes a block at depth 0.
        """
        if opens_scope(line):
            self.depth += 1
            if self._mode == TrackerMode.COUNT_AND_SWITCH:
                self._scope = Scope(self._scope)
                logger.debug("ENTER scope at depth %d", self.depth)
        elif closes_scope(line):
            if self.depth == 0:
                raise MismatchedBraces()
            self.depth -= 1
            if self._mode == TrackerMode.COUNT_AND_SWITCH:
                assert self._scope.parent is not None
                self._scope = self._scope.parent
                logger.debug("LEAVE scope to depth %d", self.depth)


# ################
# Implementation
# ################

_OPENING = re.compile(r".*?\{\s*")
_CLOSING = re.compile(r"\s*\}\s*")
