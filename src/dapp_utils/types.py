"""Dataclasses for network settings and wallet provider messages."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .constants import MAX_GAS_PRICE_MULTIPLIER
from .enums import (
    CrossWindowProviderRequest,
    CrossWindowProviderResponse,
    SignMessageStatus,
)

# Plain transaction object as exchanged with wallets: nonce, value, receiver,
# sender, gasPrice, gasLimit, data, chainID, version, signature, ...
PlainTransaction = dict[str, Any]


@dataclass(frozen=True)
class NetworkConfig:
    """Gas and chain settings of a network (gateway ``/network/config``)."""
    chain_id: str
    min_gas_price: int
    min_gas_limit: int
    gas_per_data_byte: int
    gas_price_modifier: Decimal
    min_transaction_version: int = 1

    @property
    def max_gas_price(self) -> int:
        """Upper bound for recommended gas prices."""
        return self.min_gas_price * MAX_GAS_PRICE_MULTIPLIER


@dataclass
class SignableMessage:
    """A message a wallet is asked to sign."""
    message: bytes
    address: str | None = None
    signature: str | None = None

    @property
    def is_signed(self) -> bool:
        return self.signature is not None


@dataclass
class LoginResponseData:
    """Payload data of a LOGIN_RESPONSE."""
    address: str
    access_token: str | None = None
    name: str | None = None
    signature: str | None = None
    multisig: str | None = None
    impersonate: str | None = None


@dataclass
class CancelResponseData:
    """Payload data of a CANCEL_RESPONSE."""
    address: str


@dataclass
class SignMessageResponseData:
    """Payload data of a SIGN_MESSAGE_RESPONSE."""
    status: SignMessageStatus
    signature: str | None = None


@dataclass
class ReplyPayload:
    """Reply envelope: either ``data`` or an ``error`` message."""
    data: Any = None
    error: str | None = None


@dataclass
class ReplyMessage:
    """A wallet's reply to a provider request."""
    type: CrossWindowProviderResponse
    payload: ReplyPayload = field(default_factory=ReplyPayload)

    @property
    def ok(self) -> bool:
        """True if the reply carries no error."""
        return self.payload.error is None


@dataclass
class RequestMessage:
    """A provider request sent from the dApp to the wallet."""
    type: CrossWindowProviderRequest
    payload: Any = None
