"""Unit tests for dapp_utils.validation module."""
import pytest

from dapp_utils.validation import is_non_negative_integer, string_is_float, string_is_integer


class TestStringIsInteger:
    @pytest.mark.parametrize("value", ["0", "1", "1000000000000000000000000", "007"])
    def test_accepts_positive_integers(self, value):
        assert string_is_integer(value) is True

    def test_rejects_negative_by_default(self):
        assert string_is_integer("-1") is False

    def test_negative_zero_is_not_negative(self):
        assert string_is_integer("-0") is True

    def test_accepts_negative_when_allowed(self):
        assert string_is_integer("-1", positive_numbers_only=False) is True

    @pytest.mark.parametrize("value", ["", "-", "1.0", "1e3", "0x10", " 1", "1 ", "1_000", "+1", "--1", "١٢"])
    def test_rejects_malformed(self, value):
        assert string_is_integer(value, positive_numbers_only=False) is False

    @pytest.mark.parametrize("value", [None, 1, 1.0, b"1"])
    def test_rejects_non_strings(self, value):
        assert string_is_integer(value) is False


class TestStringIsFloat:
    @pytest.mark.parametrize("value", ["0", "1.5", "-1.5", ".5", "-.5", "1000000.000001"])
    def test_accepts_decimal_literals(self, value):
        assert string_is_float(value) is True

    @pytest.mark.parametrize("value", ["", ".", "1.", "1e5", "NaN", "Infinity", "1,5", "1.2.3", None])
    def test_rejects_malformed(self, value):
        assert string_is_float(value) is False


class TestIsNonNegativeInteger:
    def test_values(self):
        assert is_non_negative_integer(0) is True
        assert is_non_negative_integer(18) is True
        assert is_non_negative_integer(-1) is False
        assert is_non_negative_integer(True) is False
        assert is_non_negative_integer(1.0) is False
