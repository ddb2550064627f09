# tests/conftest.py
"""Shared fixtures: a small set of source files and a diagnostic holding them."""

import os
import re
import sys

import pytest

# Ensure prettydiag is importable from a source checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from prettydiag import Diagnostic


SOURCES = {
    "test.zc": (
        "let id<a>(x : a) : a := x + 1\n"
        "rec fix(f) := f(fix(f))\n"
        "let const<a, b>(x : a, y : b) : a := x"
    ),
    "somefile.zc": (
        "let id<a>(x : a) : a := x + 1\n"
        "rec fix(f) := f(fix(f))\n"
        "let const<a, b>(x : a, y : b) : a := x"
    ),
    "err.nst": "\n\n\n\n    = jmp g\n\n    g: forall(s: Ts, e: Tc).{ %r0: *s64 | s -> e }",
}

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def files():
    """File id → list of lines, as the layout engine expects them."""
    return {name: text.split("\n") for name, text in SOURCES.items()}


@pytest.fixture
def diag():
    d = Diagnostic()
    for name, text in SOURCES.items():
        d.with_file(name, text)
    return d


@pytest.fixture
def strip_ansi():
    return lambda s: ANSI_ESCAPE.sub("", s)
