# prettydiag/position.py
"""
Source spans.

A :class:`Position` covers the half-open column range ``[begin_col, end_col)``
from ``begin_line`` to ``end_line``; all coordinates are 1-based.  Positions
sort by ``(begin_line, begin_col, end_line, end_col)``, the file name only
breaking ties between otherwise identical spans.
"""

from __future__ import annotations

from dataclasses import dataclass

from prettydiag.errors import InvalidPositionError

NO_FILE = "<no-file>"


@dataclass(frozen=True, order=True)
class Position:
    begin_line: int
    begin_col: int
    end_line: int
    end_col: int
    file: str

    def __post_init__(self) -> None:
        begin = (self.begin_line, self.begin_col)
        end = (self.end_line, self.end_col)
        if min(begin + end) < 1:
            raise InvalidPositionError("coordinates must be >= 1", begin, end, self.file)
        if begin > end:
            raise InvalidPositionError("span ends before it begins", begin, end, self.file)

    @classmethod
    def default(cls) -> Position:
        """``<no-file>@1:1-1:1``, used when a report has no primary marker."""
        return cls(1, 1, 1, 1, NO_FILE)

    @property
    def is_inline(self) -> bool:
        return self.begin_line == self.end_line

    def covers(self, line: int, column: int) -> bool:
        """Whether the character at *line*/*column* falls inside this span."""
        if self.is_inline:
            return line == self.begin_line and self.begin_col <= column < self.end_col
        if line == self.begin_line:
            return column >= self.begin_col
        if line == self.end_line:
            return column < self.end_col
        return self.begin_line < line < self.end_line

    def __str__(self) -> str:
        return (
            f"{self.file}@{self.begin_line}:{self.begin_col}"
            f"-{self.end_line}:{self.end_col}"
        )


__all__ = ["NO_FILE", "Position"]
