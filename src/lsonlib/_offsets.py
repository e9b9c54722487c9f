"""Offset to line/column mapping used when reporting parse errors."""

from __future__ import annotations

from bisect import bisect_right
from typing import Final


class OffsetIndex:
    """Maps character offsets in a fixed text to 1-based line and column.

    Line starts are computed once, so the index suits many lookups into
    one document. ``\\n``, ``\\r\\n`` and a lone ``\\r`` all end a line.
    """

    def __init__(self, text: str) -> None:
        """Precompute line start offsets.

        Args:
            text: The text lookups will be performed on
        """
        self.text: Final = text
        self.line_starts: list[int] = [0]

        length = len(text)
        for i, char in enumerate(text):
            if char == "\n" or (
                char == "\r" and (i == length - 1 or text[i + 1] != "\n")
            ):
                self.line_starts.append(i + 1)

    def _line_index(self, offset: int) -> int:
        return bisect_right(self.line_starts, offset) - 1

    def line_of(self, offset: int) -> int:
        """Returns the 1-based line containing the character at ``offset``."""
        return self._line_index(offset) + 1

    def column_of(self, offset: int) -> int:
        """Returns the 1-based column of the character at ``offset``."""
        return offset - self.line_starts[self._line_index(offset)] + 1

    def line_and_column(self, offset: int) -> tuple[int, int]:
        """Returns ``(line, column)`` for ``offset``, both 1-based."""
        index = self._line_index(offset)
        return index + 1, offset - self.line_starts[index] + 1
