# tests/test_validators.py
"""
Validator Tests - Unit Tests for Input Validation Helpers

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- curconv.shared.validators (parse_amount, validate_api_key, mask_api_key)
- curconv.shared.number_format (positional, compact)
"""
import pytest  # Testing framework for writing and running tests

from curconv.shared.number_format import compact, positional
from curconv.shared.validators import mask_api_key, parse_amount, validate_api_key


class TestParseAmount:
    def test_valid_numbers(self):
        assert parse_amount("100") == 100.0
        assert parse_amount("4231.1296") == 4231.1296
        assert parse_amount("0.00025") == 0.00025
        assert parse_amount("-5") == -5.0
        assert parse_amount("3.26e11") == 326000000000.0

    @pytest.mark.parametrize("raw", ["", "abc", "1,000", "12abc", "nan", "inf", "-inf"])
    def test_rejected(self, raw):
        assert parse_amount(raw) is None


class TestValidateApiKey:
    def test_valid(self):
        assert validate_api_key("a1b2c3d4e5f6")

    def test_invalid(self):
        assert not validate_api_key("")
        assert not validate_api_key("has space")
        assert not validate_api_key("with/slash")
        assert not validate_api_key("tab\tkey")


class TestMaskApiKey:
    def test_keeps_last_four(self):
        assert mask_api_key("abcdef123456") == "********3456"

    def test_short_keys_fully_masked(self):
        assert mask_api_key("abc") == "***"
        assert mask_api_key("") == ""


class TestPositional:
    def test_no_exponent(self):
        assert positional(1e-05) == "0.00001"
        assert positional(2.5e20) == "250000000000000000000"
        assert positional(0.1) == "0.1"


class TestCompact:
    def test_drops_integral_fraction(self):
        assert compact(100.0) == "100"
        assert compact(0.0) == "0"

    def test_keeps_other_digits(self):
        assert compact(100.05) == "100.05"
        assert compact(1e-07) == "0.0000001"
