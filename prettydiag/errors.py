# prettydiag/errors.py
"""
Exception hierarchy for prettydiag.

    PrettyDiagError (base)
    ├── InvalidPositionError  - malformed source span (also a ValueError)
    └── ReportLoadError       - malformed JSON diagnostic description

The layout engine itself never raises: a missing file or line degrades to a
``<no line>`` placeholder.  Errors are only raised where a caller hands in
ill-formed data.
"""

from __future__ import annotations

from typing import Optional, Tuple


class PrettyDiagError(Exception):
    """Base exception for all prettydiag errors."""


class InvalidPositionError(PrettyDiagError, ValueError):
    """A position whose coordinates are below 1 or whose end precedes its begin."""

    def __init__(
        self,
        message: str,
        begin: Tuple[int, int],
        end: Tuple[int, int],
        file: str = "",
    ) -> None:
        super().__init__(message)
        self.begin = begin
        self.end = end
        self.file = file

    def __str__(self) -> str:
        b_line, b_col = self.begin
        e_line, e_col = self.end
        where = f"{self.file}@{b_line}:{b_col}-{e_line}:{e_col}"
        return f"{self.args[0]} ({where})"


class ReportLoadError(PrettyDiagError):
    """
    Raised while turning a JSON description into reports.

    ``path`` is the JSON path of the offending element, e.g.
    ``reports[0].markers[2].begin``.
    """

    def __init__(self, message: str, path: str = "", source: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        self.source = source

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(self.source)
        if self.path:
            parts.append(self.path)
        prefix = ": ".join(parts)
        return f"{prefix}: {self.args[0]}" if prefix else self.args[0]


__all__ = [
    "PrettyDiagError",
    "InvalidPositionError",
    "ReportLoadError",
]
