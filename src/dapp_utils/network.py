"""Gateway client for network gas settings."""
from __future__ import annotations

import os
import sys
from decimal import Decimal, InvalidOperation
from typing import Any

import requests

from .constants import (
    CHAIN_ID,
    GAS_PER_DATA_BYTE,
    GAS_PRICE_MODIFIER,
    MIN_GAS_LIMIT,
    MIN_GAS_PRICE,
    MIN_TRANSACTION_VERSION,
)
from .errors import DappUtilsError
from .types import NetworkConfig

_DEFAULT_BASE_URL = "https://devnet-gateway.multiversx.com"
_DEFAULT_TIMEOUT = 10
_DEFAULT_MAX_RETRIES = 2

DEFAULT_NETWORK_CONFIG = NetworkConfig(
    chain_id=CHAIN_ID,
    min_gas_price=MIN_GAS_PRICE,
    min_gas_limit=MIN_GAS_LIMIT,
    gas_per_data_byte=GAS_PER_DATA_BYTE,
    gas_price_modifier=Decimal(GAS_PRICE_MODIFIER),
    min_transaction_version=MIN_TRANSACTION_VERSION,
)


class NetworkClient:
    """Fetches gas settings from a gateway.

    Example::

        client = NetworkClient("https://gateway.multiversx.com")
        config = client.get_network_config()
        price = recommend_gas_price(
            transaction_data_length=30,
            transaction_gas_limit=6_000_000,
            ppu=11_760_000,
            network_config=config,
        )

    Args:
        base_url: Gateway base URL. Defaults to ``DAPP_UTILS_API_URL`` or
            the public devnet gateway.
        timeout: Per-request timeout in seconds.
        max_retries: Retries on connection errors and timeouts.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        max_retries: int = _DEFAULT_MAX_RETRIES,
    ):
        base_url = base_url or os.environ.get("DAPP_UTILS_API_URL") or _DEFAULT_BASE_URL
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._network_config: NetworkConfig | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_network_config(self, refresh: bool = False) -> NetworkConfig:
        """Return the gateway's network config, cached after the first call.

        Retries connection errors and timeouts; HTTP errors raise
        DappUtilsError with the gateway's error code.
        """
        if self._network_config is not None and not refresh:
            return self._network_config

        url = f"{self._base_url}/network/config"
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            try:
                resp = requests.get(url, timeout=self._timeout)
                raw = _json_or_empty(resp)

                if resp.status_code >= 400:
                    raise DappUtilsError(
                        raw.get("code") or "UNKNOWN_ERROR",
                        raw.get("error") or f"HTTP {resp.status_code}",
                        resp.status_code,
                    )

                self._network_config = parse_network_config(raw)
                return self._network_config

            except DappUtilsError:
                raise
            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt == self._max_retries:
                    raise
                last_error = exc
                print(
                    f"[dapp-utils] {type(exc).__name__} fetching {url},"
                    f" retry {attempt + 1}/{self._max_retries}",
                    file=sys.stderr,
                )

        raise last_error or RuntimeError("Network config request failed after retries")


def parse_network_config(raw: dict[str, Any]) -> NetworkConfig:
    """Parse a gateway ``/network/config`` body into a NetworkConfig.

    Missing keys fall back to DEFAULT_NETWORK_CONFIG.

    Raises:
        DappUtilsError: ``INVALID_NETWORK_CONFIG`` for a malformed body or a
            value that is not a number.
    """
    config = None
    if isinstance(raw, dict):
        data = raw.get("data") or {}
        if isinstance(data, dict):
            config = data.get("config") or {}
    if not isinstance(config, dict):
        raise DappUtilsError("INVALID_NETWORK_CONFIG", "Malformed network config body")
    defaults = DEFAULT_NETWORK_CONFIG

    try:
        modifier = Decimal(str(config.get("erd_gas_price_modifier", defaults.gas_price_modifier)))
    except InvalidOperation as exc:
        raise DappUtilsError(
            "INVALID_NETWORK_CONFIG", f"Invalid gas price modifier: {exc}"
        ) from exc
    if not modifier.is_finite() or not Decimal(0) < modifier <= Decimal(1):
        raise DappUtilsError(
            "INVALID_NETWORK_CONFIG",
            f"Gas price modifier must be in (0, 1], got {modifier}",
        )

    return NetworkConfig(
        chain_id=str(config.get("erd_chain_id", defaults.chain_id)),
        min_gas_price=_config_int(config, "erd_min_gas_price", defaults.min_gas_price),
        min_gas_limit=_config_int(config, "erd_min_gas_limit", defaults.min_gas_limit),
        gas_per_data_byte=_config_int(config, "erd_gas_per_data_byte", defaults.gas_per_data_byte),
        gas_price_modifier=modifier,
        min_transaction_version=_config_int(
            config, "erd_min_transaction_version", defaults.min_transaction_version
        ),
    )


def _config_int(config: dict[str, Any], key: str, default: int) -> int:
    value = config.get(key, default)
    if isinstance(value, bool):
        raise DappUtilsError("INVALID_NETWORK_CONFIG", f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise DappUtilsError(
            "INVALID_NETWORK_CONFIG", f"{key} must be an integer, got {value!r}"
        ) from exc


def _json_or_empty(resp: requests.Response) -> dict[str, Any]:
    try:
        raw = resp.json()
    except ValueError:
        return {}
    return raw if isinstance(raw, dict) else {}
