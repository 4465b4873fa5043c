"""Gas price recommendation and fee limits.

Fees follow the network's two-part model: the "move balance" part
(``min_gas_limit + data_length * gas_per_data_byte``) is paid at the full gas
price, the remaining execution gas at ``gas_price * gas_price_modifier``.
All arithmetic is exact Decimal math floored to whole atomic units.
"""
from __future__ import annotations

import decimal
from decimal import ROUND_FLOOR, Decimal

from .constants import EXTRA_GAS_LIMIT_GUARDED_TX
from .errors import DappUtilsError
from .network import DEFAULT_NETWORK_CONFIG
from .types import NetworkConfig
from .validation import is_non_negative_integer, string_is_integer

_CONTEXT = decimal.Context(prec=78, rounding=ROUND_FLOOR)


def recommend_gas_price(
    *,
    transaction_data_length: int,
    transaction_gas_limit: int,
    ppu: int | None,
    network_config: NetworkConfig | None = None,
) -> int:
    """Recommend a gas price that pays ``ppu`` atomic units per gas unit.

    Returns the network minimum when ``ppu`` is missing or already covered by
    the minimum price, otherwise the price that makes the whole fee equal
    ``ppu * gas_limit``, capped at ``max_gas_price``.
    """
    config = network_config or DEFAULT_NETWORK_CONFIG
    min_price = config.min_gas_price

    if not ppu or transaction_gas_limit <= 0:
        return min_price

    with decimal.localcontext(_CONTEXT):
        modifier = config.gas_price_modifier
        gas_limit = Decimal(transaction_gas_limit)
        data_cost = Decimal(config.min_gas_limit + transaction_data_length * config.gas_per_data_byte)
        execution_cost = gas_limit - data_cost

        initially_paid_fee = data_cost * min_price + execution_cost * min_price * modifier
        current_ppu = (initially_paid_fee / gas_limit).to_integral_value()
        if ppu <= current_ppu:
            return min_price

        weighted_gas = data_cost + execution_cost * modifier
        gas_price = int((Decimal(ppu) * gas_limit / weighted_gas).to_integral_value())

    return max(min_price, min(gas_price, config.max_gas_price))


def calculate_fee_limit(
    *,
    gas_limit: int | str,
    gas_price: int | str,
    data: str = "",
    guarded: bool = False,
    network_config: NetworkConfig | None = None,
) -> str:
    """Return the maximum fee (atomic units, integer string) of a transaction.

    Invalid or negative ``gas_limit``/``gas_price`` values (floats and bools
    included) fall back to the network minimums. Guarded transactions reserve
    EXTRA_GAS_LIMIT_GUARDED_TX on top of the move-balance gas.

    Raises:
        DappUtilsError: ``NOT_ENOUGH_GAS`` when ``gas_limit`` does not cover
            the move-balance gas.
    """
    config = network_config or DEFAULT_NETWORK_CONFIG
    limit = _as_int(gas_limit, config.min_gas_limit)
    price = _as_int(gas_price, config.min_gas_price)

    move_balance_gas = config.min_gas_limit + len(data.encode("utf-8")) * config.gas_per_data_byte
    if guarded:
        move_balance_gas += EXTRA_GAS_LIMIT_GUARDED_TX

    if limit < move_balance_gas:
        raise DappUtilsError(
            "NOT_ENOUGH_GAS",
            f"Gas limit {limit} is below the required {move_balance_gas}",
        )

    with decimal.localcontext(_CONTEXT):
        processing_fee = Decimal(limit - move_balance_gas) * price * config.gas_price_modifier
        fee = Decimal(move_balance_gas * price) + processing_fee
        return format(fee.to_integral_value(), "f")


def _as_int(value: int | str, fallback: int) -> int:
    if isinstance(value, int):
        return value if is_non_negative_integer(value) else fallback
    if string_is_integer(value):
        return int(value)
    return fallback
