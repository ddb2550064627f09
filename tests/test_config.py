# tests/test_config.py
"""Tests for environment-driven output options."""

import io

import pytest

from prettydiag.config import ENV_ASCII, ENV_FORCE_COLOR, ENV_NO_COLOR, OutputOptions


class FakeStream(io.StringIO):

    def __init__(self, tty=False, encoding="utf-8"):
        super().__init__()
        self._tty = tty
        self._encoding = encoding

    def isatty(self):
        return self._tty

    @property
    def encoding(self):
        return self._encoding


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ENV_NO_COLOR, ENV_FORCE_COLOR, ENV_ASCII):
        monkeypatch.delenv(name, raising=False)


class TestColors:

    def test_tty_gets_colours(self):
        assert OutputOptions.detect(FakeStream(tty=True)).colors

    def test_pipe_gets_none(self):
        assert not OutputOptions.detect(FakeStream(tty=False)).colors

    def test_no_color_wins_over_tty(self, monkeypatch):
        monkeypatch.setenv(ENV_NO_COLOR, "1")
        assert not OutputOptions.detect(FakeStream(tty=True)).colors

    def test_force_color_on_pipe(self, monkeypatch):
        monkeypatch.setenv(ENV_FORCE_COLOR, "1")
        assert OutputOptions.detect(FakeStream(tty=False)).colors

    def test_no_color_wins_over_force_color(self, monkeypatch):
        monkeypatch.setenv(ENV_NO_COLOR, "1")
        monkeypatch.setenv(ENV_FORCE_COLOR, "1")
        assert not OutputOptions.detect(FakeStream(tty=True)).colors

    def test_explicit_argument_wins(self, monkeypatch):
        monkeypatch.setenv(ENV_NO_COLOR, "1")
        assert OutputOptions.detect(FakeStream(), colors=True).colors

    def test_no_stream(self):
        assert not OutputOptions.detect(None).colors


class TestUnicode:

    def test_utf8_stream(self):
        assert OutputOptions.detect(FakeStream(encoding="utf-8")).unicode

    @pytest.mark.parametrize("encoding", ["ascii", "latin-1", "no-such-codec"])
    def test_narrow_encoding_falls_back_to_ascii(self, encoding):
        assert not OutputOptions.detect(FakeStream(encoding=encoding)).unicode

    def test_unknown_encoding_assumes_unicode(self):
        assert OutputOptions.detect(io.StringIO()).unicode

    def test_env_forces_ascii(self, monkeypatch):
        monkeypatch.setenv(ENV_ASCII, "1")
        assert not OutputOptions.detect(FakeStream(encoding="utf-8")).unicode

    def test_explicit_argument_wins(self, monkeypatch):
        monkeypatch.setenv(ENV_ASCII, "1")
        assert OutputOptions.detect(FakeStream(), unicode=True).unicode
