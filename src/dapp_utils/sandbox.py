"""Sandbox wallet provider: in-memory Ed25519 wallet with zero network calls.

Answers the provider message protocol the way a wallet window would, and
signs with real Ed25519 keys so signatures verify with dapp_utils.crypto.
Intended for tests and local development; keys are throwaway unless given.
"""
from __future__ import annotations

import os
import sys
from typing import Any

from nacl.signing import SigningKey

from .constants import CHAIN_ID
from .crypto import (
    parse_secret_key,
    public_key_hex,
    sign_message as sign_message_crypto,
    transaction_signing_payload,
)
from .enums import CrossWindowProviderRequest, CrossWindowProviderResponse, SignMessageStatus
from .errors import DappUtilsError
from .protocol import build_reply, expected_response_type, parse_request
from .provider import DAppProviderBase, DAppProviderOptions
from .types import (
    CancelResponseData,
    LoginResponseData,
    PlainTransaction,
    SignableMessage,
    SignMessageResponseData,
)

DEFAULT_SANDBOX_CONFIG = {
    "secret_key": None,             # hex seed, None = generate
    "guardian_secret_key": None,    # None = transactions cannot be guarded
    "chain_id": CHAIN_ID,
    "auto_approve": True,           # False = every signing prompt is rejected
    "name": "Sandbox Wallet",
}


class SandboxProvider(DAppProviderBase):
    """In-memory wallet provider. Zero network calls."""

    def __init__(self, config: dict | None = None):
        merged = {**DEFAULT_SANDBOX_CONFIG, **(config or {})}
        self._signing_key = _load_key(merged["secret_key"]) or SigningKey.generate()
        self._guardian_key = _load_key(merged["guardian_secret_key"])
        self.chain_id = merged["chain_id"]
        self.auto_approve = merged["auto_approve"]
        self.name = merged["name"]

        self.logged_in = False
        self._warned = False

    @property
    def address(self) -> str:
        """Hex encoded public key of the wallet."""
        return public_key_hex(self._signing_key)

    @property
    def guardian(self) -> str | None:
        if self._guardian_key is None:
            return None
        return public_key_hex(self._guardian_key)

    def _warn_once(self):
        if self._warned:
            return
        self._warned = True
        if os.environ.get("DAPP_UTILS_SANDBOX_QUIET", "").lower() in ("true", "1"):
            return
        print(
            "[dapp-utils] Sandbox provider in use, signatures come from an in-memory wallet.",
            file=sys.stderr,
        )

    # ------------------------------------------------------------------
    # DAppProviderBase
    # ------------------------------------------------------------------

    def login(self, options: DAppProviderOptions | None = None) -> dict[str, Any]:
        """Log in; signs ``address + token`` when a ``token`` option is given."""
        self._warn_once()
        self.logged_in = True
        result: dict[str, Any] = {"address": self.address}
        token = (options or {}).get("token")
        if token:
            payload = f"{self.address}{token}".encode("utf-8")
            result["signature"] = sign_message_crypto(payload, self._signing_key)
        return result

    def logout(self, options: DAppProviderOptions | None = None) -> bool:
        self.logged_in = False
        return True

    def sign_transaction(
        self, transaction: PlainTransaction, options: DAppProviderOptions | None = None
    ) -> PlainTransaction | None:
        signed = self.sign_transactions([transaction], options)
        return signed[0] if signed else None

    def sign_transactions(
        self, transactions: list[PlainTransaction], options: DAppProviderOptions | None = None
    ) -> list[PlainTransaction] | None:
        """Sign copies of ``transactions``; None when the prompt is rejected."""
        self._warn_once()
        if not self.auto_approve:
            return None
        return [self._sign(tx) for tx in transactions]

    def sign_message(
        self, message: SignableMessage, options: DAppProviderOptions | None = None
    ) -> SignableMessage | None:
        self._warn_once()
        if not self.auto_approve:
            return None
        return SignableMessage(
            message=message.message,
            address=self.address,
            signature=sign_message_crypto(message.message, self._signing_key),
        )

    # ------------------------------------------------------------------
    # Guardian
    # ------------------------------------------------------------------

    def guard_transactions(
        self, transactions: list[PlainTransaction]
    ) -> list[PlainTransaction] | None:
        """Co-sign already signed transactions with the guardian key.

        Returns None when the prompt is rejected.
        """
        self._warn_once()
        if not self.auto_approve:
            return None
        if self._guardian_key is None:
            raise DappUtilsError("GUARDIAN_NOT_CONFIGURED", "Sandbox has no guardian key")

        guarded = []
        for tx in transactions:
            if tx.get("guardian") != self.guardian:
                raise DappUtilsError(
                    "GUARDIAN_MISMATCH",
                    f"Transaction guardian {tx.get('guardian')!r} is not {self.guardian}",
                )
            cosigned = dict(tx)
            cosigned["guardianSignature"] = sign_message_crypto(
                transaction_signing_payload(cosigned), self._guardian_key
            )
            guarded.append(cosigned)
        return guarded

    def _sign(self, transaction: PlainTransaction) -> PlainTransaction:
        signed = dict(transaction)
        signed.pop("signature", None)
        signed.pop("guardianSignature", None)

        chain_id = signed.setdefault("chainID", self.chain_id)
        if chain_id != self.chain_id:
            raise DappUtilsError(
                "CHAIN_MISMATCH",
                f"Transaction chain {chain_id!r} does not match wallet chain {self.chain_id!r}",
            )
        sender = signed.setdefault("sender", self.address)
        if sender != self.address:
            raise DappUtilsError("SENDER_MISMATCH", f"Cannot sign for sender {sender}")
        if self._guardian_key is not None:
            signed.setdefault("guardian", self.guardian)

        signed["signature"] = sign_message_crypto(
            transaction_signing_payload(signed), self._signing_key
        )
        return signed

    # ------------------------------------------------------------------
    # Message protocol
    # ------------------------------------------------------------------

    def handshake(self) -> dict[str, Any]:
        """Reply a wallet window sends once it is ready."""
        self._warn_once()
        return build_reply(CrossWindowProviderResponse.HANDSHAKE, True)

    def handle_request(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Answer a wire request dict with the wire reply the dApp expects.

        Signing failures are reported in the reply's ``error`` field, the way
        a wallet window reports them, rather than raised.
        """
        request = parse_request(raw)
        reply_type = expected_response_type(request.type)

        if request.type == CrossWindowProviderRequest.LOGIN:
            result = self.login({"token": request.payload.get("token")})
            return build_reply(reply_type, LoginResponseData(
                address=result["address"],
                signature=result.get("signature"),
                name=self.name,
            ))

        if request.type == CrossWindowProviderRequest.LOGOUT:
            return build_reply(reply_type, self.logout())

        if request.type == CrossWindowProviderRequest.SIGN_MESSAGE:
            signed = self.sign_message(SignableMessage(request.payload["message"].encode("utf-8")))
            if signed is None:
                data = SignMessageResponseData(status=SignMessageStatus.CANCELLED)
            else:
                data = SignMessageResponseData(status=SignMessageStatus.SIGNED, signature=signed.signature)
            return build_reply(reply_type, data)

        if request.type == CrossWindowProviderRequest.SIGN_TRANSACTIONS:
            try:
                signed_txs = self.sign_transactions(request.payload)
            except DappUtilsError as exc:
                return build_reply(reply_type, error=exc.message)
            if signed_txs is None:
                return self._cancel_reply()
            return build_reply(reply_type, signed_txs)

        if request.type == CrossWindowProviderRequest.GUARD_TRANSACTIONS:
            try:
                guarded_txs = self.guard_transactions(request.payload)
            except DappUtilsError as exc:
                return build_reply(reply_type, error=exc.message)
            if guarded_txs is None:
                return self._cancel_reply()
            return build_reply(reply_type, guarded_txs)

        if request.type == CrossWindowProviderRequest.CANCEL_ACTION:
            return self._cancel_reply()

        if request.type == CrossWindowProviderRequest.FINALIZE_RESET_STATE:
            self.reset()
            return build_reply(reply_type, True)

        # FINALIZE_HANDSHAKE
        return build_reply(reply_type)

    def _cancel_reply(self) -> dict[str, Any]:
        return build_reply(
            CrossWindowProviderResponse.CANCEL, CancelResponseData(address=self.address)
        )

    def reset(self):
        """Drop login state."""
        self.logged_in = False


def _load_key(key_hex: str | None) -> SigningKey | None:
    if not key_hex:
        return None
    return parse_secret_key(key_hex)
