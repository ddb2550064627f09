# prettydiag/marker.py
"""
Report severities and marker roles.

A marker is a tagged message: the role only decides the colour used to draw
the marker and carries no other behaviour.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from prettydiag.doc import Document, as_document


class Severity(enum.Enum):
    """
    Report severity.

    Each carries:
      • label — the text shown in the ``[label]`` header
      • color — termcolor colour of the header and of primary markers
    """

    ERROR = ("error", "red")
    WARNING = ("warning", "yellow")

    def __init__(self, label: str, color: str) -> None:
        self.label = label
        self.color = color

    @property
    def is_error(self) -> bool:
        return self is Severity.ERROR

    @classmethod
    def from_string(cls, s: str) -> Severity:
        s_low = s.strip().lower()
        for member in cls:
            if member.label == s_low:
                return member
        raise ValueError(f"unknown severity {s!r}")


class MarkerRole(enum.Enum):
    PRIMARY = "primary"
    CONTEXT = "context"
    SUGGESTION = "suggestion"

    @classmethod
    def from_string(cls, s: str) -> MarkerRole:
        """Parse a role name; ``this``/``where``/``maybe`` are accepted too."""
        s_low = s.strip().lower()
        s_low = _ROLE_ALIASES.get(s_low, s_low)
        try:
            return cls(s_low)
        except ValueError:
            raise ValueError(f"unknown marker role {s!r}") from None


_ROLE_ALIASES = {
    "this": "primary",
    "where": "context",
    "maybe": "suggestion",
}


def color_for(role: MarkerRole, severity: Severity) -> str:
    """termcolor colour name used for a marker of *role* in a *severity* report."""
    if role is MarkerRole.PRIMARY:
        return severity.color
    if role is MarkerRole.CONTEXT:
        return "blue"
    return "magenta"


@dataclass(frozen=True)
class Marker:
    """A role plus its message; plain strings are wrapped into a Document."""

    role: MarkerRole
    message: Document

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", as_document(self.message))

    def color(self, severity: Severity) -> str:
        return color_for(self.role, severity)

    # ── convenience constructors ─────────────────────────────────────

    @classmethod
    def primary(cls, message: Any) -> Marker:
        """The main cause of the report; red for errors, yellow for warnings."""
        return cls(MarkerRole.PRIMARY, message)

    @classmethod
    def context(cls, message: Any) -> Marker:
        """Additional information, e.g. where a type was inferred."""
        return cls(MarkerRole.CONTEXT, message)

    @classmethod
    def suggestion(cls, message: Any) -> Marker:
        """A possible fix."""
        return cls(MarkerRole.SUGGESTION, message)


__all__ = ["Marker", "MarkerRole", "Severity", "color_for"]
