# tests/test_marker.py
"""Tests for severities, marker roles and the role → colour mapping."""

import pytest

from prettydiag.doc import Doc, Document
from prettydiag.marker import Marker, MarkerRole, Severity, color_for


class TestSeverity:

    def test_labels_and_colors(self):
        assert Severity.ERROR.label == "error"
        assert Severity.ERROR.color == "red"
        assert Severity.WARNING.label == "warning"
        assert Severity.WARNING.color == "yellow"

    def test_is_error(self):
        assert Severity.ERROR.is_error
        assert not Severity.WARNING.is_error

    @pytest.mark.parametrize("s, expected", [
        ("error", Severity.ERROR),
        (" Warning ", Severity.WARNING),
        ("ERROR", Severity.ERROR),
    ])
    def test_from_string(self, s, expected):
        assert Severity.from_string(s) is expected

    def test_from_string_unknown(self):
        with pytest.raises(ValueError, match="unknown severity"):
            Severity.from_string("fatal")


class TestMarkerRole:

    @pytest.mark.parametrize("s, expected", [
        ("primary", MarkerRole.PRIMARY),
        ("this", MarkerRole.PRIMARY),
        ("Context", MarkerRole.CONTEXT),
        ("where", MarkerRole.CONTEXT),
        ("suggestion", MarkerRole.SUGGESTION),
        ("maybe", MarkerRole.SUGGESTION),
    ])
    def test_from_string(self, s, expected):
        assert MarkerRole.from_string(s) is expected

    def test_from_string_unknown(self):
        with pytest.raises(ValueError, match="unknown marker role"):
            MarkerRole.from_string("note")


class TestColorFor:

    @pytest.mark.parametrize("role, severity, expected", [
        (MarkerRole.PRIMARY, Severity.ERROR, "red"),
        (MarkerRole.PRIMARY, Severity.WARNING, "yellow"),
        (MarkerRole.CONTEXT, Severity.ERROR, "blue"),
        (MarkerRole.CONTEXT, Severity.WARNING, "blue"),
        (MarkerRole.SUGGESTION, Severity.ERROR, "magenta"),
        (MarkerRole.SUGGESTION, Severity.WARNING, "magenta"),
    ])
    def test_mapping(self, role, severity, expected):
        assert color_for(role, severity) == expected
        assert Marker(role, "m").color(severity) == expected


class TestMarker:

    def test_string_message_is_wrapped(self):
        m = Marker.primary("Required here")
        assert m.role is MarkerRole.PRIMARY
        assert m.message == Document.of(Doc("Required here"))

    def test_document_message_kept(self):
        doc = Document.of(Doc("x", "green"))
        assert Marker.context(doc).message is doc

    def test_constructors(self):
        assert Marker.context("c").role is MarkerRole.CONTEXT
        assert Marker.suggestion("s").role is MarkerRole.SUGGESTION

    def test_markers_compare_by_value(self):
        assert Marker.primary("a") == Marker.primary("a")
        assert Marker.primary("a") != Marker.context("a")
