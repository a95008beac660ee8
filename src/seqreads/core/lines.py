"""Immutable line buffer scanned by the read parsers.

The parsers never share a cursor: every step receives the buffer and the
index of the line to read, and hands back the index of the next unread line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LineBuffer:
    """Lines of a text file split on ``\\n``."""

    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Split raw file text into a buffer."""
        return cls(tuple(text.split("\n")))

    def __len__(self) -> int:
        return len(self.lines)

    def get(self, index: int) -> Optional[str]:
        """Return the line at ``index``, or None past the end of input."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def is_blank(self, index: int) -> bool:
        """True when the line is absent or empty.

        A line holding only ``\\r`` is not blank: CRLF separator lines are
        absorbed into the surrounding sequence body instead.
        """
        line = self.get(index)
        return line is None or line == ""
