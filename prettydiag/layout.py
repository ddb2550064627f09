"""
prettydiag/layout.py
════════════════════

Report layout engine: turns a :class:`~prettydiag.report.Report` into a
styled :class:`~prettydiag.doc.Document`.

Layout
──────
A report has the following shape (gutter width 3, Unicode glyphs)::

    [error]: <message>
         ╭─▶ <file>@<line>:<col>-<line>:<col>
         │
       1 │ <source line>
         • <carets and underlines>
         • <marker messages>
         •
         • Hint: <hint>
    ─────╯

Lines covered by a multiline marker get an extra three columns between the
gutter and the source, holding the span bracket; the messages of multiline
markers are listed once all lines have been shown.

The engine is a pure function of its inputs: it reads the report and the
file table and never mutates either.
"""

from __future__ import annotations

import itertools
import logging
from typing import (
    TYPE_CHECKING,
    Dict,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)

from prettydiag.doc import Doc, Document, colon, line, space
from prettydiag.glyphs import GlyphSet, glyphs_for
from prettydiag.marker import Marker, MarkerRole
from prettydiag.position import Position

if TYPE_CHECKING:
    from prettydiag.report import Report

_log = logging.getLogger(__name__)

MarkerEntry = Tuple[Position, Marker]
FileTable = Mapping[str, Sequence[str]]

MIN_GUTTER_WIDTH = 3
NO_LINE = "<no line>"

_FRAME_COLOR = "dark_grey"
_FILE_COLOR = "green"
_HINT_COLOR = "cyan"
_NO_LINE_COLOR = "magenta"
_BOLD = ("bold",)


def render(report: Report, files: FileTable, unicode: bool = True) -> Document:
    """Lay out *report* against the source lines in *files*."""
    return _ReportLayout(report, files, glyphs_for(unicode)).build()


def gutter_width(positions: Sequence[Position]) -> int:
    """Width of the line-number column: at least 3, wider for large line numbers."""
    if not positions:
        return MIN_GUTTER_WIDTH
    highest = max(p.end_line for p in positions)
    return max(MIN_GUTTER_WIDTH, len(str(highest)))


def header_position(markers: Sequence[MarkerEntry]) -> Position:
    """Position of the first primary marker, or the default position."""
    for pos, marker in markers:
        if marker.role is MarkerRole.PRIMARY:
            return pos
    return Position.default()


class _LineContext(NamedTuple):
    number: int
    inline: List[MarkerEntry]
    bounding: List[MarkerEntry]    # multiline markers starting or ending here
    spanning: List[MarkerEntry]    # multiline markers strictly around this line
    span_color: Optional[str]      # colour of the first multiline marker active here
    in_span: bool


class _ReportLayout:
    """Single-use renderer for one report."""

    def __init__(self, report: Report, files: FileTable, glyphs: GlyphSet) -> None:
        self._report = report
        self._files = files
        self._g = glyphs
        self._severity = report.severity

        self._markers: List[MarkerEntry] = sorted(report.markers.items(), key=lambda e: e[0])
        self._inline: Dict[int, List[MarkerEntry]] = {}
        self._multiline: List[MarkerEntry] = []
        for entry in self._markers:
            pos = entry[0]
            if pos.is_inline:
                self._inline.setdefault(pos.begin_line, []).append(entry)
            else:
                self._multiline.append(entry)

        self._width = gutter_width([pos for pos, _ in self._markers])

    # ── public API ───────────────────────────────────────────────────

    def build(self) -> Document:
        g = self._g
        report = self._report
        numbers = self._line_numbers()
        _log.debug(
            "laying out %s report: %d marker(s), %d multiline, %d line(s), gutter %d",
            self._severity.label,
            len(self._markers),
            len(self._multiline),
            len(numbers),
            self._width,
        )

        out: List[Doc] = [
            Doc(f"[{self._severity.label}]", self._severity.color, None, _BOLD),
            colon(),
            space(),
        ]
        out.extend(report.message.aligned())
        out.append(line())

        # ── file pointer ─────────────────────────────────────────────
        out.append(Doc(self._blank_gutter()))
        out.append(self._frame(g.file_arrow, bold=True))
        out.append(space())
        out.append(Doc(str(header_position(self._markers)), _FILE_COLOR, None, _BOLD))
        out.append(line())
        out.append(Doc(self._blank_gutter()))
        out.append(self._frame(g.bar, bold=True))

        # ── source lines ─────────────────────────────────────────────
        for number in numbers:
            ctx = self._context(number)
            out.extend(self._source_row(ctx))
            out.extend(self._underline_row(ctx))
            out.extend(self._label_rows(ctx))
        out.extend(self._multiline_trailer())
        out.append(line())

        # ── hints ────────────────────────────────────────────────────
        if report.hints and report.markers:
            out.extend(self._dot_gutter())
            out.extend(self._hint_rows())
            out.append(line())

        # ── footer ───────────────────────────────────────────────────
        out.append(self._frame(g.rule * (self._width + 2), bold=True))
        out.append(self._frame(g.corner, bold=True))
        return Document(tuple(out))

    # ── helpers ──────────────────────────────────────────────────────

    def _color(self, marker: Marker) -> str:
        return marker.color(self._severity)

    def _frame(self, glyph: str, bold: bool = False) -> Doc:
        return Doc(glyph, _FRAME_COLOR, None, _BOLD if bold else ())

    def _blank_gutter(self) -> str:
        # room for " <line number> "
        return " " * (self._width + 2)

    def _dot_gutter(self) -> List[Doc]:
        return [Doc(self._blank_gutter()), self._frame(self._g.dot, bold=True)]

    def _line_numbers(self) -> List[int]:
        numbers = set(self._inline)
        for pos, _ in self._multiline:
            numbers.update(range(pos.begin_line, pos.end_line + 1))
        return sorted(numbers)

    def _context(self, number: int) -> _LineContext:
        bounding = [
            e for e in self._multiline
            if number in (e[0].begin_line, e[0].end_line)
        ]
        spanning = [
            e for e in self._multiline
            if e[0].begin_line < number < e[0].end_line
        ]
        active = bounding + spanning
        return _LineContext(
            number=number,
            inline=self._inline.get(number, []),
            bounding=bounding,
            spanning=spanning,
            span_color=self._color(active[0][1]) if active else None,
            in_span=bool(active),
        )

    def _source_line(self, file: str, number: int) -> Optional[str]:
        lines = self._files.get(file)
        if lines is None or not 1 <= number <= len(lines):
            return None
        return lines[number - 1]

    # ── source row ───────────────────────────────────────────────────

    def _source_row(self, ctx: _LineContext) -> List[Doc]:
        out = [
            line(),
            self._frame(f" {str(ctx.number).rjust(self._width)} "),
            self._frame(self._g.bar),
            space(),
        ]
        out.extend(self._span_prefix(ctx))

        touching = sorted(ctx.inline + ctx.bounding + ctx.spanning, key=lambda e: e[0])
        code = self._source_line(touching[0][0].file, ctx.number) if touching else None
        if code is None:
            out.append(Doc(NO_LINE, _NO_LINE_COLOR))
            return out

        def color_at(column: int) -> Optional[str]:
            for pos, marker in touching:
                if pos.covers(ctx.number, column):
                    return self._color(marker)
            return None

        runs = itertools.groupby(enumerate(code, start=1), key=lambda ic: color_at(ic[0]))
        for color, chars in runs:
            chunk = "".join(ch for _, ch in chars)
            out.append(Doc(chunk, color, None, _BOLD if color else ()))
        return out

    def _span_prefix(self, ctx: _LineContext) -> List[Doc]:
        """The three columns holding the multiline bracket, if any span exists."""
        g = self._g
        if not self._multiline:
            return []
        if ctx.bounding:
            pos, marker = ctx.bounding[0]
            continuing = pos.end_line == ctx.number or self._multiline[0][0] != pos
            branch = g.span_branch if continuing else g.span_start
            return [
                Doc(branch, ctx.span_color),
                Doc(g.span_tee, self._color(marker)),
                space(),
            ]
        if ctx.spanning:
            return [Doc(g.bar, ctx.span_color), Doc("  ")]
        return [Doc("   ")]

    # ── inline markers ───────────────────────────────────────────────

    def _marker_row_start(self, ctx: _LineContext) -> List[Doc]:
        out = [line()]
        out.extend(self._dot_gutter())
        out.append(space())
        if ctx.in_span:
            out.extend([Doc(self._g.bar, ctx.span_color), Doc("  ")])
        elif self._multiline:
            out.append(Doc("   "))
        return out

    def _underline_row(self, ctx: _LineContext) -> List[Doc]:
        if not ctx.inline:
            return []
        g = self._g
        out = self._marker_row_start(ctx)
        last_column = max(pos.end_col for pos, _ in ctx.inline)
        for column in range(1, last_column):
            covering = [e for e in ctx.inline if e[0].covers(ctx.number, column)]
            if not covering:
                out.append(space())
                continue
            # the innermost (last sorted) marker wins the column
            pos, marker = covering[-1]
            glyph = g.caret if pos.begin_col == column else g.underline
            out.append(Doc(glyph, self._color(marker)))
        return out

    def _label_rows(self, ctx: _LineContext) -> List[Doc]:
        """
        One row per inline marker, rightmost first.

        Markers whose row is still to come are drawn as pipes at their
        starting column, so every label can be traced back to its caret.
        """
        g = self._g
        out: List[Doc] = []
        pending = list(reversed(ctx.inline))
        while pending:
            pos, marker = pending.pop(0)
            color = self._color(marker)

            pipes: Dict[int, MarkerEntry] = {}
            for entry in pending:
                if entry[0].begin_col != pos.begin_col:
                    pipes.setdefault(entry[0].begin_col, entry)
            shares_start = any(e[0].begin_col == pos.begin_col for e in pending)

            out.extend(self._marker_row_start(ctx))
            column = 1
            for start in sorted(c for c in pipes if c < pos.begin_col):
                out.append(Doc(" " * (start - column)))
                out.append(Doc(g.bar, self._color(pipes[start][1])))
                column = start + 1
            out.append(Doc(" " * (pos.begin_col - column)))
            out.append(Doc(g.label_branch if shares_start else g.label_last, color))
            out.append(Doc(g.label_point, color))
            out.append(space())
            out.extend(marker.message.colors(color).aligned())
        return out

    # ── multiline markers ────────────────────────────────────────────

    def _multiline_trailer(self) -> List[Doc]:
        if not self._multiline:
            return []
        g = self._g

        def row_start() -> List[Doc]:
            return [line(), *self._dot_gutter(), space()]

        out = row_start()
        out.append(Doc(g.bar, self._color(self._multiline[-1][1])))
        for _, marker in reversed(self._multiline[1:]):
            out.extend(row_start())
            out.append(Doc(g.trailer_branch, self._color(marker)))
            out.extend(marker.message.aligned())
        first = self._multiline[0][1]
        out.extend(row_start())
        out.append(Doc(g.trailer_last, self._color(first)))
        out.extend(first.message.aligned())
        return out

    # ── hints ────────────────────────────────────────────────────────

    def _hint_rows(self) -> List[Doc]:
        out: List[Doc] = []
        for hint in self._report.hints:
            out.append(line())
            out.append(Doc(self._blank_gutter()))
            out.append(self._frame(self._g.bar, bold=True))
            out.append(space())
            out.append(Doc("Hint:", _HINT_COLOR, None, _BOLD))
            out.append(space())
            out.extend(hint.colors(_HINT_COLOR).aligned())
        return out


__all__ = [
    "FileTable",
    "MIN_GUTTER_WIDTH",
    "NO_LINE",
    "gutter_width",
    "header_position",
    "render",
]
