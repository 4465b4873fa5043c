"""Cryptographic utilities for wallet providers.

Handles secret key parsing, canonical JSON, Ed25519 signing, and signature
verification for messages and plain transaction objects.
Uses PyNaCl for Ed25519.
"""
from __future__ import annotations

import json
from typing import Any

from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

# Fields excluded from the signed payload of a transaction.
SIGNATURE_FIELDS = ("signature", "guardianSignature")


def parse_secret_key(key_hex: str) -> SigningKey:
    """Parse a hex encoded 32-byte Ed25519 seed.

    Raises:
        ValueError: If the key string is malformed.
    """
    try:
        seed = bytes.fromhex(key_hex)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid hex in secret key: {exc}") from exc

    if len(seed) != 32:
        raise ValueError(f"Secret key must be 32 bytes, got {len(seed)}")

    return SigningKey(seed)


def public_key_hex(signing_key: SigningKey) -> str:
    return bytes(signing_key.verify_key).hex()


def sort_keys_deep(obj: Any) -> Any:
    """Recursively sort dictionary keys for deterministic serialization."""
    if isinstance(obj, dict):
        return {k: sort_keys_deep(v) for k, v in sorted(obj.items())}
    if isinstance(obj, list):
        return [sort_keys_deep(item) for item in obj]
    return obj


def canonicalize(obj: dict[str, Any]) -> bytes:
    """Produce canonical JSON bytes (sorted keys, compact separators)."""
    sorted_obj = sort_keys_deep(obj)
    return json.dumps(sorted_obj, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def transaction_signing_payload(transaction: dict[str, Any]) -> bytes:
    """Canonical bytes of a plain transaction object, signatures excluded."""
    unsigned = {k: v for k, v in transaction.items() if k not in SIGNATURE_FIELDS}
    return canonicalize(unsigned)


def sign_message(message: bytes, signing_key: SigningKey) -> str:
    """Sign a message with Ed25519 and return the hex signature."""
    signed = signing_key.sign(message)
    return signed.signature.hex()


def verify_signature(message: bytes, signature_hex: str, public_key: str) -> bool:
    """Verify a hex Ed25519 signature against a message and hex public key."""
    try:
        verify_key = VerifyKey(bytes.fromhex(public_key))
        verify_key.verify(message, bytes.fromhex(signature_hex))
        return True
    except (BadSignatureError, TypeError, ValueError):
        return False


def verify_transaction(transaction: dict[str, Any]) -> bool:
    """Verify the sender signature and, if guarded, the guardian co-signature."""
    signature = transaction.get("signature")
    sender = transaction.get("sender")
    if not signature or not sender:
        return False

    payload = transaction_signing_payload(transaction)
    if not verify_signature(payload, signature, sender):
        return False

    guardian = transaction.get("guardian")
    if guardian:
        guardian_signature = transaction.get("guardianSignature")
        if not guardian_signature:
            return False
        return verify_signature(payload, guardian_signature, guardian)
    return True
