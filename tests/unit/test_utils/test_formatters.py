"""Unit tests for formatting helpers."""

import pytest

from semf.utils.formatters import format_ordering_answer, format_percentage, round_half_up


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,decimals,expected", [
        (2.5, 0, 3),
        (3.5, 0, 4),
        (2.4, 0, 2),
        (0.25, 1, 0.3),
        (14.583333, 1, 14.6),
        (41.666667, 1, 41.7),
        (50.0, 1, 50.0),
    ])
    def test_rounding(self, value, decimals, expected):
        assert round_half_up(value, decimals) == pytest.approx(expected)


class TestFormatPercentage:

    @pytest.mark.parametrize("part,whole,expected", [
        (7, 24, 29),
        (1, 8, 13),
        (14, 20, 70),
        (12, 12, 100),
        (0, 12, 0),
        (3, 0, 0),
    ])
    def test_percentage(self, part, whole, expected):
        assert format_percentage(part, whole) == expected


class TestFormatOrderingAnswer:

    def test_comma_space_join(self):
        assert format_ordering_answer(["B", "C", "D", "A"]) == "B, C, D, A"

    def test_letters_trimmed(self):
        assert format_ordering_answer([" C", "B ", "A", "D"]) == "C, B, A, D"

    def test_empty(self):
        assert format_ordering_answer([]) == ""
