"""
prettydiag/loader.py
════════════════════

Build a :class:`~prettydiag.diagnostic.Diagnostic` from a JSON description.

Format
──────
::

    {
      "files": {
        "test.zc": "let id<a>(x : a) : a := x + 1",
        "other.zc": {"path": "src/other.zc"}
      },
      "reports": [
        {
          "severity": "error",
          "message": "Could not deduce constraint 'Num(a)'",
          "markers": [
            {"file": "test.zc", "begin": [1, 25], "end": [1, 30],
             "role": "primary", "message": "While applying function '+'"}
          ],
          "hints": ["Adding 'Num(a)' to the list of constraints may solve this problem."]
        }
      ]
    }

A ``{"path": …}`` file entry is read from disk, relative to the directory of
the JSON file.  Messages are either strings or lists of segments, a segment
being a string or ``{"text", "color", "on_color", "attrs"}`` using termcolor
names.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from termcolor import ATTRIBUTES, COLORS, HIGHLIGHTS

from prettydiag.diagnostic import Diagnostic
from prettydiag.doc import Doc, Document
from prettydiag.errors import InvalidPositionError, ReportLoadError
from prettydiag.marker import Marker, MarkerRole, Severity
from prettydiag.position import Position
from prettydiag.report import Report

_log = logging.getLogger(__name__)


def load_diagnostic_file(path: Union[str, Path]) -> Diagnostic:
    """Read and load the JSON description stored at *path*."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ReportLoadError(f"not valid UTF-8: {exc.reason}", source=str(p)) from exc
    except json.JSONDecodeError as exc:
        raise ReportLoadError(f"invalid JSON: {exc}", source=str(p)) from exc
    try:
        return load_diagnostic(data, base_dir=p.parent)
    except ReportLoadError as exc:
        exc.source = str(p)
        raise


def load_diagnostic(data: Any, base_dir: Optional[Path] = None) -> Diagnostic:
    """Turn the decoded JSON *data* into a diagnostic."""
    _expect(data, dict, "", "an object")
    diag = Diagnostic()

    files = data.get("files", {})
    _expect(files, dict, "files", "an object")
    for name, entry in files.items():
        diag.with_file(name, _load_file(entry, f"files.{name}", base_dir))

    reports = data.get("reports", [])
    _expect(reports, list, "reports", "a list")
    for idx, raw in enumerate(reports):
        diag.with_report(_load_report(raw, f"reports[{idx}]"))

    _log.info("loaded %d report(s) over %d file(s)", len(reports), len(files))
    return diag


# ── helpers ──────────────────────────────────────────────────────────────

def _expect(value: Any, kind: type, path: str, what: str) -> None:
    if not isinstance(value, kind):
        raise ReportLoadError(f"expected {what}, got {type(value).__name__}", path)


def _load_file(entry: Any, path: str, base_dir: Optional[Path]) -> str:
    if isinstance(entry, str):
        return entry
    _expect(entry, dict, path, "a string or an object")
    if "path" not in entry:
        raise ReportLoadError("missing 'path'", path)
    _expect(entry["path"], str, f"{path}.path", "a string")
    source = Path(entry["path"])
    if not source.is_absolute() and base_dir is not None:
        source = base_dir / source
    try:
        return source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportLoadError(f"cannot read {source}: {exc.strerror}", path) from exc
    except UnicodeDecodeError as exc:
        raise ReportLoadError(f"cannot decode {source}: {exc.reason}", path) from exc


def _load_report(raw: Any, path: str) -> Report:
    _expect(raw, dict, path, "an object")
    try:
        severity = Severity.from_string(raw.get("severity", "error"))
    except (AttributeError, ValueError) as exc:
        raise ReportLoadError(str(exc), f"{path}.severity") from exc

    if "message" not in raw:
        raise ReportLoadError("missing 'message'", path)
    message = _load_message(raw["message"], f"{path}.message")

    markers = raw.get("markers", [])
    _expect(markers, list, f"{path}.markers", "a list")
    entries = [
        _load_marker(m, f"{path}.markers[{idx}]") for idx, m in enumerate(markers)
    ]

    hints = raw.get("hints", [])
    _expect(hints, list, f"{path}.hints", "a list")
    return Report(
        severity,
        message,
        entries,
        [_load_message(h, f"{path}.hints[{idx}]") for idx, h in enumerate(hints)],
    )


def _load_marker(raw: Any, path: str) -> Tuple[Position, Marker]:
    _expect(raw, dict, path, "an object")
    for key in ("file", "begin", "end"):
        if key not in raw:
            raise ReportLoadError(f"missing '{key}'", path)
    _expect(raw["file"], str, f"{path}.file", "a string")
    begin = _load_point(raw["begin"], f"{path}.begin")
    end = _load_point(raw["end"], f"{path}.end")
    try:
        position = Position(begin[0], begin[1], end[0], end[1], raw["file"])
    except InvalidPositionError as exc:
        raise ReportLoadError(str(exc), path) from exc

    try:
        role = MarkerRole.from_string(raw.get("role", "primary"))
    except (AttributeError, ValueError) as exc:
        raise ReportLoadError(str(exc), f"{path}.role") from exc
    return position, Marker(role, _load_message(raw.get("message", ""), f"{path}.message"))


def _load_point(raw: Any, path: str) -> Tuple[int, int]:
    if (
        not isinstance(raw, list)
        or len(raw) != 2
        or not all(isinstance(n, int) and not isinstance(n, bool) for n in raw)
    ):
        raise ReportLoadError("expected [line, column]", path)
    return raw[0], raw[1]


def _load_message(raw: Any, path: str) -> Document:
    if isinstance(raw, str):
        return Document.of(Doc(raw))
    _expect(raw, list, path, "a string or a list of segments")
    parts: List[Doc] = []
    for idx, segment in enumerate(raw):
        parts.append(_load_segment(segment, f"{path}[{idx}]"))
    return Document(tuple(parts))


def _load_segment(raw: Any, path: str) -> Doc:
    if isinstance(raw, str):
        return Doc(raw)
    _expect(raw, dict, path, "a string or an object")
    content = raw.get("text", "")
    _expect(content, str, f"{path}.text", "a string")
    fg = _checked_name(raw.get("color"), COLORS, f"{path}.color")
    bg = _checked_name(raw.get("on_color"), HIGHLIGHTS, f"{path}.on_color")
    attrs = raw.get("attrs", [])
    _expect(attrs, list, f"{path}.attrs", "a list")
    checked = tuple(
        _checked_name(a, ATTRIBUTES, f"{path}.attrs[{idx}]", optional=False)
        for idx, a in enumerate(attrs)
    )
    return Doc(content, fg, bg, checked)


def _checked_name(
    name: Any, known: Mapping[str, int], path: str, optional: bool = True
) -> Optional[str]:
    if name is None and optional:
        return None
    if not isinstance(name, str) or name not in known:
        raise ReportLoadError(f"unknown termcolor name {name!r}", path)
    return name


__all__ = ["load_diagnostic", "load_diagnostic_file"]
