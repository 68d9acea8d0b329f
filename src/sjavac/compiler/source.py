# Copyright 2026 SJavac Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory, line-indexed source buffer."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from sjavac.errors import SourceError

# ###############
# Public Interface
# ###############


class SourceFile:
    """The lines of one source file, addressed by 1-based line number.

    The file is read once; both validation passes walk the buffer instead
    of re-reading the file.
    """

    def __init__(self, lines: list[str], name: str = "<string>") -> None:
        self._lines = lines
        self.name = name

    @classmethod
    def from_text(cls, text: str, name: str = "<string>") -> SourceFile:
        """Split *text* into lines (any line ending)."""
        return cls(text.splitlines(), name)

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> SourceFile:
        """Read a source file from disk.

        Raises:
            SourceError: If the file cannot be read or decoded.
        """
        try:
            text = path.read_text(encoding=encoding)
        except FileNotFoundError:
            raise SourceError(f"Source file not found: {path}") from None
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            raise SourceError(f"Cannot read source file '{path}': {exc}") from exc
        return cls.from_text(text, str(path))

    def line(self, number: int) -> str:
        """Return the text of line *number* (1-based).

        Raises:
            IndexError: If *number* is outside the file.
        """
        if not 1 <= number <= len(self._lines):
            raise IndexError(f"Line {number} is outside '{self.name}' (1..{len(self._lines)})")
        return self._lines[number - 1]

    def count(self) -> int:
        """Return the number of lines."""
        return len(self._lines)

    def lines(self, start: int = 1) -> Iterator[tuple[int, str]]:
        """Iterate over ``(number, text)`` pairs from line *start* onward."""
        for index in range(max(start, 1) - 1, len(self._lines)):
            yield index + 1, self._lines[index]
