# prettydiag/glyphs.py
"""
Box-drawing glyphs for the two output styles.

Every Unicode glyph has an ASCII counterpart of the same width, so switching
style never moves a character of the layout.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class GlyphSet:
    file_arrow: str       # points at the header position
    bar: str              # gutter bar, span continuation, pending label pipe
    dot: str              # gutter of rows without source code
    rule: str             # footer rule
    corner: str           # footer corner
    span_start: str       # first line of the first multiline span
    span_branch: str      # any other first/last line of a multiline span
    span_tee: str         # joins a span branch to the source text
    caret: str            # first column of an inline marker
    underline: str        # remaining columns of an inline marker
    label_branch: str     # label row, another label starts at the same column
    label_last: str       # label row, last label at this column
    label_point: str      # joins a label branch to its message
    trailer_branch: str   # multiline message, more to follow
    trailer_last: str     # multiline message, last one

    def widths(self) -> dict:
        return {f.name: len(getattr(self, f.name)) for f in fields(self)}


UNICODE = GlyphSet(
    file_arrow="╭─▶",
    bar="│",
    dot="•",
    rule="─",
    corner="╯",
    span_start="╭",
    span_branch="├",
    span_tee="┤",
    caret="┬",
    underline="─",
    label_branch="├",
    label_last="╰",
    label_point="╸",
    trailer_branch="├╸ ",
    trailer_last="╰╸ ",
)

ASCII = GlyphSet(
    file_arrow="+->",
    bar="|",
    dot=":",
    rule="-",
    corner="+",
    span_start="+",
    span_branch="|",
    span_tee=">",
    caret="^",
    underline="-",
    label_branch="|",
    label_last="`",
    label_point="-",
    trailer_branch="|- ",
    trailer_last="`- ",
)


def glyphs_for(unicode: bool) -> GlyphSet:
    return UNICODE if unicode else ASCII


__all__ = ["ASCII", "GlyphSet", "UNICODE", "glyphs_for"]
