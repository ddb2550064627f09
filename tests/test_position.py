# tests/test_position.py
"""Tests for source spans: validation, ordering, coverage and display."""

import pytest

from prettydiag.errors import InvalidPositionError, PrettyDiagError
from prettydiag.position import NO_FILE, Position


class TestValidation:

    @pytest.mark.parametrize("coords", [
        (0, 1, 1, 1),
        (1, 0, 1, 1),
        (1, 1, 0, 1),
        (1, 1, 1, 0),
        (-3, 1, 1, 1),
    ])
    def test_rejects_coordinates_below_one(self, coords):
        with pytest.raises(InvalidPositionError):
            Position(*coords, "a.zc")

    @pytest.mark.parametrize("coords", [
        (2, 1, 1, 5),
        (1, 6, 1, 5),
    ])
    def test_rejects_end_before_begin(self, coords):
        with pytest.raises(InvalidPositionError) as info:
            Position(*coords, "a.zc")
        assert "a.zc@" in str(info.value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Position(0, 0, 0, 0, "a.zc")
        assert issubclass(InvalidPositionError, PrettyDiagError)

    def test_empty_span_is_allowed(self):
        p = Position(1, 4, 1, 4, "a.zc")
        assert p.is_inline


class TestOrdering:

    def test_sorts_by_begin_then_end(self):
        a = Position(1, 8, 1, 9, "t")
        b = Position(1, 11, 1, 16, "t")
        c = Position(1, 11, 1, 20, "t")
        d = Position(2, 1, 2, 2, "t")
        assert sorted([d, c, b, a]) == [a, b, c, d]

    def test_file_breaks_ties(self):
        a = Position(1, 5, 1, 7, "a.zc")
        b = Position(1, 5, 1, 7, "b.zc")
        assert sorted([b, a]) == [a, b]

    def test_equal_positions_hash_alike(self):
        assert hash(Position(1, 2, 3, 4, "f")) == hash(Position(1, 2, 3, 4, "f"))
        assert len({Position(1, 2, 3, 4, "f"), Position(1, 2, 3, 4, "f")}) == 1


class TestCoverage:

    def test_inline_is_half_open(self):
        p = Position(1, 25, 1, 30, "t")
        assert not p.covers(1, 24)
        assert p.covers(1, 25)
        assert p.covers(1, 29)
        assert not p.covers(1, 30)
        assert not p.covers(2, 25)

    def test_multiline(self):
        p = Position(1, 5, 3, 4, "t")
        assert not p.covers(1, 4)
        assert p.covers(1, 5)
        assert p.covers(1, 500)
        assert p.covers(2, 1)
        assert p.covers(3, 3)
        assert not p.covers(3, 4)
        assert not p.covers(4, 1)

    def test_is_inline(self):
        assert Position(2, 1, 2, 9, "t").is_inline
        assert not Position(2, 1, 3, 1, "t").is_inline


class TestDisplay:

    def test_str(self):
        assert str(Position(1, 25, 1, 30, "test.zc")) == "test.zc@1:25-1:30"

    def test_default(self):
        p = Position.default()
        assert p.file == NO_FILE
        assert str(p) == "<no-file>@1:1-1:1"
