# prettydiag/config.py
"""
Output options and their environment-driven defaults.

Explicit arguments always win.  When left as ``None``:

  • colours are used when ``$NO_COLOR`` is unset and either ``$FORCE_COLOR``
    is set or the stream is a TTY;
  • Unicode glyphs are used unless ``$PRETTYDIAG_ASCII`` is set or the
    stream's encoding cannot represent them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, TextIO

from prettydiag.glyphs import UNICODE

_log = logging.getLogger(__name__)

ENV_NO_COLOR = "NO_COLOR"
ENV_FORCE_COLOR = "FORCE_COLOR"
ENV_ASCII = "PRETTYDIAG_ASCII"

_UNICODE_PROBE = "".join(getattr(UNICODE, name) for name in UNICODE.widths())


@dataclass(frozen=True)
class OutputOptions:
    unicode: bool = True
    colors: bool = False

    @classmethod
    def detect(
        cls,
        stream: Optional[TextIO] = None,
        unicode: Optional[bool] = None,
        colors: Optional[bool] = None,
    ) -> OutputOptions:
        if colors is None:
            colors = _colors_wanted(stream)
        if unicode is None:
            unicode = _unicode_wanted(stream)
        options = cls(unicode=unicode, colors=colors)
        _log.debug("output options: %s", options)
        return options


def _colors_wanted(stream: Optional[TextIO]) -> bool:
    if os.environ.get(ENV_NO_COLOR):
        return False
    if os.environ.get(ENV_FORCE_COLOR):
        return True
    return hasattr(stream, "isatty") and stream.isatty()


def _unicode_wanted(stream: Optional[TextIO]) -> bool:
    if os.environ.get(ENV_ASCII):
        return False
    encoding = getattr(stream, "encoding", None)
    if not encoding:
        return True
    try:
        _UNICODE_PROBE.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


__all__ = ["ENV_ASCII", "ENV_FORCE_COLOR", "ENV_NO_COLOR", "OutputOptions"]
