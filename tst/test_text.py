"""Tests for text and number helpers."""

import pytest

from windlogger_config.errors import GrammarError
from windlogger_config.numeric import parse_float
from windlogger_config.text import fold_lower, is_blank, split_trim


class TestFoldLower:
    def test_folds_mixed_case(self):
        assert fold_lower("Ch2.MvPerBit") == "ch2.mvperbit"

    def test_empty(self):
        assert fold_lower("") == ""


class TestIsBlank:
    @pytest.mark.parametrize("text", ["", " ", "\t", "  \t \r"])
    def test_blank(self, text):
        assert is_blank(text)

    def test_not_blank(self):
        assert not is_blank("  x ")


class TestSplitTrim:
    def test_split_and_strip(self):
        assert split_trim("  ch1.r1 =  100 ", "=") == ("ch1.r1", "100")

    def test_splits_at_first_delimiter(self):
        assert split_trim("a=b=c", "=") == ("a", "b=c")

    def test_missing_delimiter(self):
        with pytest.raises(GrammarError):
            split_trim("ch1.r1 100", "=")

    @pytest.mark.parametrize("text,delimiter", [
        ("ch1.r1 =", "="),
        ("= 100", "="),
        (" = ", "="),
        ("ch1. ", "."),
        (" .r1", "."),
    ])
    def test_empty_side(self, text, delimiter):
        with pytest.raises(GrammarError):
            split_trim(text, delimiter)


class TestParseFloat:
    def test_integer(self):
        assert parse_float("680000") == (680000.0, True)

    def test_zero_is_consumed(self):
        assert parse_float("0") == (0.0, True)

    def test_non_numeric(self):
        value, consumed = parse_float("abc")
        assert not consumed
        assert value == 0.0

    def test_empty(self):
        assert parse_float("") == (0.0, False)

    def test_trailing_suffix_tolerated(self):
        assert parse_float("12.5ohm") == (12.5, True)

    def test_sign_fraction_and_exponent(self):
        assert parse_float("-.5") == (-0.5, True)
        assert parse_float("4.7e3") == (4700.0, True)

    def test_incomplete_exponent_ignored(self):
        assert parse_float("1e") == (1.0, True)

    def test_sign_only(self):
        assert parse_float("-")[1] is False
