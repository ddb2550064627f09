"""
prettydiag/doc.py
═════════════════

Styled document IR used by the report renderer.

A :class:`Document` is an ordered sequence of :class:`Doc` fragments.  Each
fragment carries its text together with optional ``termcolor`` styling:

  • fg     — termcolor colour name (``"red"``, ``"dark_grey"``, …)
  • bg     — termcolor highlight name (``"on_red"``, …)
  • attrs  — termcolor attributes (``"bold"``, ``"underline"``, …)
  • align  — re-indent embedded newlines to the column where the
             fragment starts being printed

Both classes are immutable: every combinator returns a new value, so a
rendered document can be printed any number of times, with or without
colours, and always yields the same characters.

Printing
────────
:meth:`Document.print` walks the fragments in order and threads the current
output column through the loop.  Escape codes are applied per physical line
so that a colour never spans a newline.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import (
    Any,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    TextIO,
    Tuple,
    Union,
    runtime_checkable,
)

from termcolor import colored


# ═════════════════════════════════════════════════════════════════════════
#  FRAGMENT
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Doc:
    """A single run of text sharing one style."""

    content: str
    fg: Optional[str] = None
    bg: Optional[str] = None
    attrs: Tuple[str, ...] = ()
    align: bool = False

    @property
    def is_styled(self) -> bool:
        return self.fg is not None or self.bg is not None or bool(self.attrs)

    def colors(
        self,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
        *attrs: Optional[str],
    ) -> Doc:
        """Return a copy styled with *fg*/*bg*/*attrs* (``None`` attrs are dropped)."""
        return replace(
            self,
            fg=fg,
            bg=bg,
            attrs=tuple(a for a in attrs if a is not None),
        )

    def aligned(self) -> Doc:
        return replace(self, align=True)

    def width(self) -> int:
        """Length of the longest line of the fragment; styling is ignored."""
        return max(len(ln) for ln in self.content.split("\n"))

    def emit(self, column: int, with_colors: bool = True) -> str:
        """
        Produce the text of this fragment as printed at *column* (1-based).

        Aligned fragments get ``column - 1`` spaces after every embedded
        newline.  When *with_colors* is set, every physical line is wrapped
        in its own escape sequence and the newlines themselves stay plain.
        """
        text = self.content
        if self.align and "\n" in text:
            text = text.replace("\n", "\n" + " " * (column - 1))

        if not with_colors or not self.is_styled:
            return text

        attrs = list(self.attrs) or None
        return "\n".join(
            colored(part, self.fg, self.bg, attrs, force_color=True) if part else part
            for part in text.split("\n")
        )


def advance_column(column: int, text: str) -> int:
    """Return the output column reached after printing *text* from *column*."""
    last_newline = text.rfind("\n")
    if last_newline < 0:
        return column + len(text)
    return len(text) - last_newline


# ── common fragments ─────────────────────────────────────────────────────

def text(value: Any) -> Doc:
    """Uncoloured fragment holding ``str(value)``."""
    return Doc(str(value))


def colon() -> Doc:
    return Doc(":")


def space() -> Doc:
    return Doc(" ")


def line() -> Doc:
    return Doc("\n")


def empty() -> Doc:
    return Doc("")


# ═════════════════════════════════════════════════════════════════════════
#  DOCUMENT
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Document:
    """An ordered, immutable sequence of :class:`Doc` fragments."""

    parts: Tuple[Doc, ...] = ()

    @classmethod
    def of(cls, *parts: Doc) -> Document:
        return cls(tuple(parts))

    @classmethod
    def from_parts(cls, parts: Iterable[Doc]) -> Document:
        return cls(tuple(parts))

    # ── composition ──────────────────────────────────────────────────

    def append(self, part: Doc) -> Document:
        return Document(self.parts + (part,))

    def concat(self, other: Document) -> Document:
        return Document(self.parts + other.parts)

    def __add__(self, other: Union[Doc, Document]) -> Document:
        if isinstance(other, Doc):
            return self.append(other)
        if isinstance(other, Document):
            return self.concat(other)
        return NotImplemented

    def __iter__(self) -> Iterator[Doc]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    # ── whole-document styling ───────────────────────────────────────

    def aligned(self) -> Document:
        """Mark every fragment as column-aligned."""
        return Document(tuple(p.aligned() for p in self.parts))

    def colors(
        self,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
        *attrs: Optional[str],
    ) -> Document:
        """Restyle every fragment, replacing whatever styling it had."""
        return Document(tuple(p.colors(fg, bg, *attrs) for p in self.parts))

    def strip_colors(self) -> Document:
        """Remove all styling; the text content is left untouched."""
        return self.colors(None, None)

    def pretty(self) -> Document:
        return self

    # ── output ───────────────────────────────────────────────────────

    def print(self, stream: TextIO, colors: bool = True) -> int:
        """
        Stream the document to *stream*.

        Returns the output column reached after the last fragment, which
        lets callers continue an aligned layout on the same line.
        """
        column = 1
        for part in self.parts:
            plain = part.emit(column, with_colors=False)
            stream.write(part.emit(column) if colors else plain)
            column = advance_column(column, plain)
        return column

    def render(self, colors: bool = True) -> str:
        buf = io.StringIO()
        self.print(buf, colors)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.render(colors=False)


# ═════════════════════════════════════════════════════════════════════════
#  STYLED TEXT
# ═════════════════════════════════════════════════════════════════════════

@runtime_checkable
class Pretty(Protocol):
    """Anything that knows how to turn itself into a :class:`Document`."""

    def pretty(self) -> Document: ...


StyledText = Union[str, Document, Pretty]


def as_document(message: Any) -> Document:
    """
    Normalise a message into a :class:`Document`.

    Strings become a single uncoloured fragment, documents are returned
    as-is and :class:`Pretty` objects are asked for their document.
    Anything else goes through ``str``.
    """
    if isinstance(message, Document):
        return message
    if isinstance(message, str):
        return Document.of(Doc(message))
    if isinstance(message, Doc):
        return Document.of(message)
    if isinstance(message, Pretty):
        return message.pretty()
    return Document.of(text(message))


__all__ = [
    "Doc",
    "Document",
    "Pretty",
    "StyledText",
    "advance_column",
    "as_document",
    "colon",
    "empty",
    "line",
    "space",
    "text",
]
