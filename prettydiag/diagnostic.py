"""
prettydiag/diagnostic.py
════════════════════════

Collects reports and the source files they point into, then prints them.

Usage
─────
    from prettydiag import Diagnostic, Marker, Position, Report

    diag = (Diagnostic()
        .with_file("test.zc", "let id<a>(x : a) : a := x + 1")
        .with_report(Report.error("Error with one marker", {
            Position(1, 25, 1, 30, "test.zc"): Marker.primary("Required here"),
        })))
    diag.print(sys.stderr, unicode=True, colors=True)

Reports are rendered one after the other, in the order they were added; each
is terminated by a newline and followed by a blank line.
"""

from __future__ import annotations

import logging
import sys
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, TextIO, Tuple

from prettydiag.config import OutputOptions
from prettydiag.doc import Document, line
from prettydiag.report import Report

_log = logging.getLogger(__name__)


class Diagnostic:
    """An ordered list of reports plus a registry of source files."""

    def __init__(self) -> None:
        self._reports: List[Report] = []
        self._files: Dict[str, List[str]] = {}

    # ── building ─────────────────────────────────────────────────────

    def with_report(self, report: Report) -> Diagnostic:
        self._reports.append(report)
        _log.debug("added %s report (%d total)", report.severity.label, len(self._reports))
        return self

    def with_file(self, path: str, content: str) -> Diagnostic:
        """
        Register the content of *path*, lines separated by ``"\\n"``.

        *path* is only an identifier: it is matched against
        :attr:`Position.file` and never opened.
        """
        return self.with_lines(path, content.split("\n"))

    def with_lines(self, path: str, lines: Sequence[str]) -> Diagnostic:
        self._files[path] = list(lines)
        _log.debug("registered %s (%d line(s))", path, len(self._files[path]))
        return self

    def clear(self) -> None:
        self._files.clear()
        self._reports.clear()

    # ── inspection ───────────────────────────────────────────────────

    @property
    def reports(self) -> Tuple[Report, ...]:
        return tuple(self._reports)

    @property
    def files(self) -> Mapping[str, Sequence[str]]:
        return MappingProxyType(self._files)

    def has_errors(self) -> bool:
        return any(r.is_error for r in self._reports)

    # ── output ───────────────────────────────────────────────────────

    def pretty(self, unicode: bool = True) -> Document:
        parts = []
        for report in self._reports:
            parts.extend(report.pretty(self._files, unicode))
            parts.extend((line(), line()))
        return Document(tuple(parts))

    def render(self, unicode: bool = True, colors: bool = False) -> str:
        return self.pretty(unicode).render(colors)

    def print(
        self,
        stream: Optional[TextIO] = None,
        unicode: Optional[bool] = None,
        colors: Optional[bool] = None,
    ) -> None:
        """
        Print every report onto *stream* (``sys.stderr`` by default).

        ``None`` for *unicode*/*colors* means "detect from the stream and
        the environment", see :class:`~prettydiag.config.OutputOptions`.
        """
        if stream is None:
            stream = sys.stderr
        options = OutputOptions.detect(stream, unicode, colors)
        _log.debug("printing %d report(s)", len(self._reports))
        self.pretty(options.unicode).print(stream, options.colors)
        stream.flush()


__all__ = ["Diagnostic"]
