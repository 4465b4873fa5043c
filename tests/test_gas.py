"""Unit tests for dapp_utils.gas module."""
from decimal import Decimal

import pytest

from dapp_utils.constants import MAX_GAS_PRICE, MIN_GAS_PRICE
from dapp_utils.errors import DappUtilsError
from dapp_utils.gas import calculate_fee_limit, recommend_gas_price
from dapp_utils.types import NetworkConfig


# --- recommend_gas_price ---


class TestRecommendGasPriceMissingPpu:
    def test_zero_ppu(self):
        result = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=45_000_000,
            ppu=0,
        )
        assert result == MIN_GAS_PRICE

    def test_none_ppu(self):
        result = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=45_000_000,
            ppu=None,
        )
        assert result == MIN_GAS_PRICE

    def test_zero_gas_limit(self):
        result = recommend_gas_price(
            transaction_data_length=0,
            transaction_gas_limit=0,
            ppu=11_760_000,
        )
        assert result == MIN_GAS_PRICE


class TestRecommendGasPriceBounds:
    @pytest.mark.parametrize("data_length,gas_limit,ppu", [
        (30, 45_000_000, 11_760_000),
        (0, 50_000, 11_760_000),
        (143, 30_000_000, 1_000_000_000),
        (600_000_000, 100, 22_760_000),
        (100, 600_000_000, 11_760_000),
    ])
    def test_within_bounds(self, data_length, gas_limit, ppu):
        result = recommend_gas_price(
            transaction_data_length=data_length,
            transaction_gas_limit=gas_limit,
            ppu=ppu,
        )
        assert MIN_GAS_PRICE <= result <= MIN_GAS_PRICE * 30
        assert isinstance(result, int)

    def test_caps_at_max_gas_price(self):
        result = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=45_000_000,
            ppu=1_000_000_000_000,
        )
        assert result == MAX_GAS_PRICE == MIN_GAS_PRICE * 30

    def test_uses_min_gas_price_for_low_ppu(self):
        result = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=45_000_000,
            ppu=1,
        )
        assert result == MIN_GAS_PRICE


class TestRecommendGasPriceFormula:
    def test_move_balance_pays_full_ppu(self):
        # A plain transfer has no execution gas, so the price equals the ppu.
        result = recommend_gas_price(
            transaction_data_length=0,
            transaction_gas_limit=50_000,
            ppu=2_000_000_000,
        )
        assert result == 2_000_000_000

    def test_price_makes_fee_match_ppu(self):
        # data_cost = 50_000 + 10 * 1_500 = 65_000; execution = 935_000
        # weighted gas = 65_000 + 935_000 * 0.01 = 74_350
        result = recommend_gas_price(
            transaction_data_length=10,
            transaction_gas_limit=1_000_000,
            ppu=200_000_000,
        )
        assert result == 200_000_000 * 1_000_000 // 74_350

    def test_uses_network_config(self):
        config = NetworkConfig(
            chain_id="T",
            min_gas_price=2_000_000_000,
            min_gas_limit=50_000,
            gas_per_data_byte=1_500,
            gas_price_modifier=Decimal("0.01"),
        )
        result = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=45_000_000,
            ppu=1_000_000_000_000,
            network_config=config,
        )
        assert result == 2_000_000_000 * 30


# --- calculate_fee_limit ---


class TestCalculateFeeLimit:
    def test_move_balance(self):
        assert calculate_fee_limit(gas_limit=50_000, gas_price=1_000_000_000) == "50000000000000"

    def test_with_data_and_execution_gas(self):
        # move balance = 50_000 + 5 * 1_500 = 57_500
        # fee = 57_500 * 1e9 + 42_500 * 1e9 * 0.01
        fee = calculate_fee_limit(gas_limit=100_000, gas_price=1_000_000_000, data="hello")
        assert fee == "57925000000000"

    def test_accepts_integer_strings(self):
        assert calculate_fee_limit(gas_limit="50000", gas_price="1000000000") == "50000000000000"

    def test_invalid_values_fall_back_to_minimums(self):
        assert calculate_fee_limit(gas_limit="abc", gas_price="1.5") == "50000000000000"

    @pytest.mark.parametrize("gas_limit,gas_price", [
        (50_000, -1_000_000_000),
        (-50_000, 1_000_000_000),
        (50_000.0, 1_000_000_000),
        (50_000, True),
        ("-50000", "-1"),
    ])
    def test_negative_or_non_integer_values_fall_back(self, gas_limit, gas_price):
        fee = calculate_fee_limit(gas_limit=gas_limit, gas_price=gas_price)
        assert fee == "50000000000000"
        assert not fee.startswith("-")

    def test_not_enough_gas(self):
        with pytest.raises(DappUtilsError) as exc_info:
            calculate_fee_limit(gas_limit=50_000, gas_price=1_000_000_000, data="hello")
        assert exc_info.value.code == "NOT_ENOUGH_GAS"

    def test_guarded_transaction_needs_extra_gas(self):
        with pytest.raises(DappUtilsError):
            calculate_fee_limit(gas_limit=50_000, gas_price=1_000_000_000, guarded=True)
        fee = calculate_fee_limit(gas_limit=100_000, gas_price=1_000_000_000, guarded=True)
        assert fee == "100000000000000"

    def test_fee_is_floored(self):
        # 1 execution gas unit at price 1 and modifier 0.01 pays 0.01
        fee = calculate_fee_limit(gas_limit=50_001, gas_price=1)
        assert fee == "50000"

    def test_utf8_data_counts_bytes(self):
        fee = calculate_fee_limit(gas_limit=53_000, gas_price=1, data="é")
        assert fee == "53000"
