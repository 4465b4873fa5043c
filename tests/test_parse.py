"""Unit tests for dapp_utils.parse module."""
import pytest

from dapp_utils.errors import InvalidInputError
from dapp_utils.format import format_amount
from dapp_utils.parse import parse_amount


class TestParseAmount:
    def test_default_decimals(self):
        assert parse_amount("1") == "1000000000000000000"
        assert parse_amount("1.5") == "1500000000000000000"

    def test_custom_decimals(self):
        assert parse_amount("1.5", 6) == "1500000"
        assert parse_amount("42", 0) == "42"

    def test_large_amounts_use_plain_notation(self):
        assert parse_amount("1000") == "1000000000000000000000"
        assert parse_amount("123456789.123456789") == "123456789123456789000000000"

    def test_leading_decimal_point(self):
        assert parse_amount(".5", 2) == "50"

    def test_negative(self):
        assert parse_amount("-2.25", 2) == "-225"

    def test_zero(self):
        assert parse_amount("0") == "0"
        assert parse_amount("-0.0") == "0"

    def test_extra_precision_rounds_half_up(self):
        assert parse_amount("1.005", 2) == "101"
        assert parse_amount("1.004", 2) == "100"
        assert parse_amount("-1.005", 2) == "-101"

    def test_rejects_invalid_amount(self):
        with pytest.raises(InvalidInputError):
            parse_amount("1,5")
        with pytest.raises(InvalidInputError):
            parse_amount("1e18")

    def test_rejects_negative_decimals(self):
        with pytest.raises(InvalidInputError, match="num_decimals"):
            parse_amount("1", -1)

    @pytest.mark.parametrize("amount,decimals", [("1.5", 18), ("0.0505", 18), ("1234.567891", 6)])
    def test_inverse_of_format_amount(self, amount, decimals):
        assert format_amount(parse_amount(amount, decimals), decimals=decimals) == amount
