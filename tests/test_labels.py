"""Tests for board cell labels."""

import pytest

from hexengine.models.offset import OffsetCoord
from hexengine.util.labels import format_label, parse_label, row_letters


class TestRowLetters:
    @pytest.mark.parametrize(
        ("row", "letters"),
        [(0, "A"), (10, "K"), (25, "Z"), (26, "AA"), (33, "AH"), (51, "AZ"), (52, "BA")],
    )
    def test_known_rows(self, row, letters):
        assert row_letters(row) == letters

    def test_negative_row(self):
        with pytest.raises(ValueError):
            row_letters(-1)


class TestFormatLabel:
    def test_first_cell(self):
        assert format_label(OffsetCoord(0, 0)) == "A1"

    def test_columns_start_at_one(self):
        assert format_label(OffsetCoord(14, 10)) == "K15"

    def test_last_cell(self):
        assert format_label(OffsetCoord(34, 33)) == "AH35"


class TestParseLabel:
    def test_simple(self):
        assert parse_label("K15") == OffsetCoord(14, 10)

    def test_two_letters(self):
        assert parse_label("AH35") == OffsetCoord(34, 33)

    def test_case_and_whitespace(self):
        assert parse_label("  k15 ") == OffsetCoord(14, 10)

    def test_no_bounds_check(self):
        assert parse_label("A99") == OffsetCoord(98, 0)

    @pytest.mark.parametrize("text", ["", "15K", "K", "15", "K-1", "A0", "K 15"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_label(text)

    def test_roundtrip_whole_board(self):
        for row in range(34):
            for col in range(35):
                cell = OffsetCoord(col, row)
                assert parse_label(format_label(cell)) == cell
