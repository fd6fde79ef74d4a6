"""
Tests for duvlab.shared.formatting
"""

import pytest

from duvlab.shared.formatting import format_duv


class TestFormatDuv:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (-0.00194999, "-0.0019"),
            (0.0033, "0.0033"),
            (0.12345, "0.1235"),
            (0.00015, "0.0002"),
            (-0.00015, "-0.0002"),
            (2.0, "2.0000"),
            (0.0, "0.0000"),
        ],
    )
    def test_golden(self, value: float, expected: str) -> None:
        assert format_duv(value) == expected

    def test_always_dot_separator(self) -> None:
        assert "," not in format_duv(1234.56789)
        assert format_duv(1234.56789) == "1234.5679"

    def test_huge_value(self) -> None:
        text = format_duv(1e300)
        assert text.endswith(".0000")
        assert text.startswith("1000")

    def test_non_finite(self) -> None:
        assert format_duv(float("nan")) == "NaN"
        assert format_duv(float("inf")) == "Infinity"
        assert format_duv(float("-inf")) == "-Infinity"
