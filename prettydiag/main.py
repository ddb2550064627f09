#!/usr/bin/env python3
"""prettydiag/main.py — CLI entry-point.

Usage examples
--------------
    # Render the reports described in a JSON file
    python -m prettydiag reports.json

    # Plain ASCII, no colours, into a file
    python -m prettydiag reports.json --ascii --color never -o out.txt

    # Show version and exit
    python -m prettydiag --version

Exit codes
----------
    0   Success, no report with severity error.
    1   At least one report with severity error was rendered.
    2   Infrastructure failure (missing file, malformed JSON, …).

The JSON format is documented in :mod:`prettydiag.loader`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from prettydiag import __version__
from prettydiag.diagnostic import Diagnostic
from prettydiag.errors import PrettyDiagError
from prettydiag.loader import load_diagnostic_file

_log = logging.getLogger("prettydiag")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2

_COLOR_CHOICES = {"auto": None, "always": True, "never": False}


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``prettydiag`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("prettydiag")
    root.setLevel(level)
    # main() may run several times in one process
    root.handlers[:] = [handler]


def _open_output(dest: Optional[str]) -> TextIO:
    """Return a writable text stream.

    *dest* ``None`` or ``"-"`` → ``sys.stdout``; otherwise open the path
    for writing (creating parent directories as needed).
    """
    if dest is None or dest == "-":
        return sys.stdout
    p = Path(dest).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return open(p, "w", encoding="utf-8")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prettydiag",
        description="Render compiler-style diagnostics described in JSON files.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        metavar="FILE",
        help="JSON diagnostic description(s).",
    )
    glyphs = parser.add_mutually_exclusive_group()
    glyphs.add_argument(
        "--unicode",
        dest="unicode",
        action="store_const",
        const=True,
        default=None,
        help="Draw with Unicode box characters.",
    )
    glyphs.add_argument(
        "--ascii",
        dest="unicode",
        action="store_const",
        const=False,
        help="Draw with plain ASCII characters.",
    )
    parser.add_argument(
        "--color",
        choices=sorted(_COLOR_CHOICES),
        default="auto",
        help="Colourise the output (default: auto).",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="FILE",
        help='Output file ("-" or omit for stdout).',
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prettydiag CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    diagnostics: List[Diagnostic] = []
    for raw in args.files:
        try:
            diagnostics.append(load_diagnostic_file(raw))
        except PrettyDiagError as exc:
            _log.error("%s", exc, exc_info=args.verbose >= 2)
            return EXIT_INFRA
        except OSError as exc:
            _log.error("cannot read %s: %s", raw, exc.strerror or exc)
            return EXIT_INFRA

    try:
        stream = _open_output(args.output)
    except OSError as exc:
        _log.error("cannot open output %s: %s", args.output, exc.strerror or exc)
        return EXIT_INFRA

    colors = _COLOR_CHOICES[args.color]
    try:
        for diag in diagnostics:
            diag.print(stream, unicode=args.unicode, colors=colors)
    finally:
        if stream is not sys.stdout:
            stream.close()

    if any(d.has_errors() for d in diagnostics):
        return EXIT_ERROR
    return EXIT_OK


# ---------------------------------------------------------------------------
# Module execution support
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    raise SystemExit(main())
