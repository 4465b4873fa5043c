"""Shared defaults for amount formatting and gas estimation."""
from __future__ import annotations

# Amount display
DECIMALS = 18
DIGITS = 4
ZERO = "0"

# Gas (values in atomic units / gas units)
MIN_GAS_PRICE = 1_000_000_000
MAX_GAS_PRICE_MULTIPLIER = 30
MAX_GAS_PRICE = MIN_GAS_PRICE * MAX_GAS_PRICE_MULTIPLIER
MIN_GAS_LIMIT = 50_000
GAS_PER_DATA_BYTE = 1_500
GAS_PRICE_MODIFIER = "0.01"
EXTRA_GAS_LIMIT_GUARDED_TX = 50_000

# Network
CHAIN_ID = "D"
MIN_TRANSACTION_VERSION = 1
