"""dapp-utils: amount formatting, gas and wallet provider helpers for dApps."""
from .constants import DECIMALS, DIGITS, ZERO, MIN_GAS_PRICE, MAX_GAS_PRICE
from .errors import DappUtilsError, InvalidInputError, ProviderNotInitializedError
from .format import FormatAmountOptions, format_amount
from .parse import parse_amount
from .validation import string_is_integer, string_is_float
from .gas import recommend_gas_price, calculate_fee_limit
from .network import NetworkClient, parse_network_config, DEFAULT_NETWORK_CONFIG
from .enums import (
    CrossWindowProviderRequest,
    CrossWindowProviderResponse,
    SignMessageStatus,
    WindowProviderRequest,
    WindowProviderResponse,
)
from .protocol import (
    RESPONSE_TYPE_MAP,
    WINDOW_RESPONSE_TYPE_MAP,
    build_request,
    parse_request,
    build_reply,
    parse_reply,
    expected_response_type,
    is_expected_reply,
)
from .provider import DAppProviderBase, EmptyProvider, provider_not_initialized_error
from .sandbox import SandboxProvider
from .types import (
    NetworkConfig,
    SignableMessage,
    LoginResponseData,
    CancelResponseData,
    SignMessageResponseData,
    ReplyPayload,
    ReplyMessage,
    RequestMessage,
)

__all__ = [
    "DECIMALS",
    "DIGITS",
    "ZERO",
    "MIN_GAS_PRICE",
    "MAX_GAS_PRICE",
    "DappUtilsError",
    "InvalidInputError",
    "ProviderNotInitializedError",
    "FormatAmountOptions",
    "format_amount",
    "parse_amount",
    "string_is_integer",
    "string_is_float",
    "recommend_gas_price",
    "calculate_fee_limit",
    "NetworkClient",
    "parse_network_config",
    "DEFAULT_NETWORK_CONFIG",
    "CrossWindowProviderRequest",
    "CrossWindowProviderResponse",
    "SignMessageStatus",
    "WindowProviderRequest",
    "WindowProviderResponse",
    "RESPONSE_TYPE_MAP",
    "WINDOW_RESPONSE_TYPE_MAP",
    "build_request",
    "parse_request",
    "build_reply",
    "parse_reply",
    "expected_response_type",
    "is_expected_reply",
    "DAppProviderBase",
    "EmptyProvider",
    "provider_not_initialized_error",
    "SandboxProvider",
    "NetworkConfig",
    "SignableMessage",
    "LoginResponseData",
    "CancelResponseData",
    "SignMessageResponseData",
    "ReplyPayload",
    "ReplyMessage",
    "RequestMessage",
]
