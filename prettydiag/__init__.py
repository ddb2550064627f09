"""
prettydiag — pretty compiler-style diagnostics for the terminal
================================================================

Renders errors and warnings as annotated source excerpts: a gutter with line
numbers, coloured underlines, stacked labels for several markers on one line,
brackets for markers spanning several lines, and trailing hints.

Core modules
------------
doc
    Styled document IR (``Doc`` fragments, ``Document`` sequences) with
    column-aware re-indentation and colour/no-colour output.
position
    ``Position``: a half-open source span, totally ordered.
marker
    ``Severity``, ``MarkerRole`` and ``Marker`` with the role → colour mapping.
layout
    The report layout engine: ``render(report, files, unicode)``.
report
    ``Report`` values and the chaining ``ReportBuilder``.
diagnostic
    ``Diagnostic``: source files plus an ordered list of reports to print.

Support modules
---------------
glyphs, config, errors, loader, main

Quick start
-----------
>>> from prettydiag import Diagnostic, Marker, Position, Report
>>> diag = (Diagnostic()
...     .with_file("test.zc", "let id<a>(x : a) : a := x + 1")
...     .with_report(Report.error("Error with one marker and no hints", {
...         Position(1, 25, 1, 30, "test.zc"): Marker.primary("Required here"),
...     })))
>>> print(diag.render(unicode=False, colors=False))
[error]: Error with one marker and no hints
     +-> test.zc@1:25-1:30
     |
   1 | let id<a>(x : a) : a := x + 1
     :                         ^----
     :                         `- Required here
-----+
<BLANKLINE>
<BLANKLINE>
"""

from __future__ import annotations

__version__ = "0.1.0"

from prettydiag.diagnostic import Diagnostic
from prettydiag.doc import Doc, Document, Pretty, StyledText, as_document
from prettydiag.errors import InvalidPositionError, PrettyDiagError, ReportLoadError
from prettydiag.glyphs import ASCII, UNICODE, GlyphSet
from prettydiag.layout import render
from prettydiag.marker import Marker, MarkerRole, Severity, color_for
from prettydiag.position import Position
from prettydiag.report import Report, ReportBuilder

__all__ = [
    "ASCII",
    "Diagnostic",
    "Doc",
    "Document",
    "GlyphSet",
    "InvalidPositionError",
    "Marker",
    "MarkerRole",
    "Position",
    "Pretty",
    "PrettyDiagError",
    "Report",
    "ReportBuilder",
    "ReportLoadError",
    "Severity",
    "StyledText",
    "UNICODE",
    "as_document",
    "color_for",
    "render",
]
