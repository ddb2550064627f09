"""
prettydiag/report.py
════════════════════

Error and warning reports.

A :class:`Report` is an immutable value: a severity, a message, markers keyed
by position and an ordered list of hints.  Build one directly::

    Report(Severity.ERROR, "Could not deduce constraint 'Num(a)'", {
        Position(1, 25, 1, 30, "test.zc"): Marker.primary("While applying function '+'"),
        Position(1, 11, 1, 16, "test.zc"): Marker.context("'x' is supposed to have type 'a'"),
    }, hints=["Adding 'Num(a)' to the list of constraints may solve this problem."])

or through the chaining builder::

    (Report.builder(Severity.ERROR, "Could not deduce constraint 'Num(a)'")
        .primary(Position(1, 25, 1, 30, "test.zc"), "While applying function '+'")
        .context(Position(1, 11, 1, 16, "test.zc"), "'x' is supposed to have type 'a'")
        .hint("Adding 'Num(a)' to the list of constraints may solve this problem.")
        .build())

Markers sharing a position overwrite each other: the last one wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from prettydiag.doc import Document, StyledText, as_document
from prettydiag.layout import FileTable, render
from prettydiag.marker import Marker, MarkerRole, Severity
from prettydiag.position import Position

MarkerInput = Union[Mapping[Position, Marker], Iterable[Tuple[Position, Marker]]]


@dataclass(frozen=True)
class Report:
    severity: Severity
    message: Document
    markers: Mapping[Position, Marker]
    hints: Tuple[Document, ...] = ()

    def __init__(
        self,
        severity: Severity,
        message: StyledText,
        markers: Optional[MarkerInput] = None,
        hints: Iterable[StyledText] = (),
    ) -> None:
        object.__setattr__(self, "severity", severity)
        object.__setattr__(self, "message", as_document(message))
        object.__setattr__(self, "markers", MappingProxyType(dict(markers or {})))
        object.__setattr__(self, "hints", tuple(as_document(h) for h in hints))

    @classmethod
    def error(cls, message: StyledText, markers: Optional[MarkerInput] = None,
              hints: Iterable[StyledText] = ()) -> Report:
        return cls(Severity.ERROR, message, markers, hints)

    @classmethod
    def warning(cls, message: StyledText, markers: Optional[MarkerInput] = None,
                hints: Iterable[StyledText] = ()) -> Report:
        return cls(Severity.WARNING, message, markers, hints)

    @classmethod
    def builder(cls, severity: Severity, message: StyledText) -> ReportBuilder:
        return ReportBuilder(severity, message)

    @property
    def is_error(self) -> bool:
        return self.severity.is_error

    def pretty(self, files: FileTable, unicode: bool = True) -> Document:
        """Render this report against *files* (file id → source lines)."""
        return render(self, files, unicode)

    def __hash__(self) -> int:
        return hash((self.severity, self.message, tuple(self.markers.items()), self.hints))


class ReportBuilder:
    """
    Incrementally collects markers and hints, then yields a :class:`Report`.

    All builder methods return ``self`` for chaining.  :meth:`build` can be
    called several times; each call snapshots the current state.
    """

    def __init__(self, severity: Severity, message: StyledText) -> None:
        self.severity = severity
        self.message = as_document(message)
        self._markers: Dict[Position, Marker] = {}
        self._hints: List[Document] = []

    def marker(self, position: Position, marker: Marker) -> ReportBuilder:
        self._markers[position] = marker
        return self

    def primary(self, position: Position, message: Any) -> ReportBuilder:
        return self.marker(position, Marker(MarkerRole.PRIMARY, message))

    def context(self, position: Position, message: Any) -> ReportBuilder:
        return self.marker(position, Marker(MarkerRole.CONTEXT, message))

    def suggestion(self, position: Position, message: Any) -> ReportBuilder:
        return self.marker(position, Marker(MarkerRole.SUGGESTION, message))

    def hint(self, message: StyledText) -> ReportBuilder:
        self._hints.append(as_document(message))
        return self

    def build(self) -> Report:
        return Report(self.severity, self.message, self._markers, self._hints)


__all__ = ["MarkerInput", "Report", "ReportBuilder"]
