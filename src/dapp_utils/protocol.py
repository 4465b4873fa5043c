"""Request/reply contracts between a dApp and a wallet provider.

Messages travel as plain dicts (``{"type": ..., "payload": ...}``), e.g. via
``postMessage``. This module builds and validates them and maps wire dicts
to the dataclasses in :mod:`dapp_utils.types`.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from .enums import (
    CrossWindowProviderRequest,
    CrossWindowProviderResponse,
    SignMessageStatus,
)
from .errors import InvalidInputError
from .types import (
    CancelResponseData,
    LoginResponseData,
    ReplyMessage,
    ReplyPayload,
    RequestMessage,
    SignMessageResponseData,
)

Request = CrossWindowProviderRequest
Response = CrossWindowProviderResponse

RESPONSE_TYPE_MAP: dict[CrossWindowProviderRequest, CrossWindowProviderResponse] = {
    Request.SIGN_TRANSACTIONS: Response.SIGN_TRANSACTIONS,
    Request.GUARD_TRANSACTIONS: Response.GUARD_TRANSACTIONS,
    Request.SIGN_MESSAGE: Response.SIGN_MESSAGE,
    Request.LOGIN: Response.LOGIN,
    Request.LOGOUT: Response.DISCONNECT,
    Request.CANCEL_ACTION: Response.CANCEL,
    Request.FINALIZE_HANDSHAKE: Response.NONE,
    Request.FINALIZE_RESET_STATE: Response.RESET_STATE,
}

# The window (extension) provider shares the cross-window vocabulary.
WINDOW_RESPONSE_TYPE_MAP = RESPONSE_TYPE_MAP

_TRANSACTION_REQUESTS = (Request.SIGN_TRANSACTIONS, Request.GUARD_TRANSACTIONS)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


def build_request(request_type: CrossWindowProviderRequest | str, payload: Any = None) -> dict[str, Any]:
    """Build the wire dict for a provider request.

    Raises:
        InvalidInputError: Unknown request type or a payload that does not
            match the request type.
    """
    message_type = _request_type(request_type)
    _check_request_payload(message_type, payload)
    return {"type": message_type.value, "payload": payload}


def parse_request(raw: dict[str, Any]) -> RequestMessage:
    """Parse a wire request dict into a RequestMessage."""
    if not isinstance(raw, dict):
        raise InvalidInputError("Request must be a dict")
    message_type = _request_type(raw.get("type"))
    payload = raw.get("payload")
    _check_request_payload(message_type, payload)
    return RequestMessage(type=message_type, payload=payload)


def expected_response_type(request_type: CrossWindowProviderRequest | str) -> CrossWindowProviderResponse:
    """Response type a wallet answers ``request_type`` with."""
    return RESPONSE_TYPE_MAP[_request_type(request_type)]


def is_expected_reply(
    request_type: CrossWindowProviderRequest | str,
    reply_type: CrossWindowProviderResponse | str,
) -> bool:
    """True if ``reply_type`` answers ``request_type``.

    Every request may also be answered with CANCEL_RESPONSE when the user
    closes or rejects the wallet prompt.
    """
    try:
        reply = Response(reply_type)
    except ValueError:
        return False
    return reply in (expected_response_type(request_type), Response.CANCEL)


def _request_type(value: Any) -> CrossWindowProviderRequest:
    try:
        return Request(value)
    except ValueError:
        raise InvalidInputError(f"Unknown request type: {value!r}") from None


def _check_request_payload(message_type: CrossWindowProviderRequest, payload: Any) -> None:
    if message_type == Request.LOGIN:
        if not isinstance(payload, dict):
            raise InvalidInputError("LOGIN_REQUEST payload must be a dict")
        token = payload.get("token")
        if token is not None and not isinstance(token, str):
            raise InvalidInputError("Login token must be a string")
    elif message_type in _TRANSACTION_REQUESTS:
        if not isinstance(payload, list) or not payload:
            raise InvalidInputError(f"{message_type.value} payload must be a non-empty list")
        if not all(isinstance(tx, dict) for tx in payload):
            raise InvalidInputError("Transactions must be plain transaction dicts")
    elif message_type == Request.SIGN_MESSAGE:
        if not isinstance(payload, dict) or not isinstance(payload.get("message"), str):
            raise InvalidInputError("SIGN_MESSAGE_REQUEST payload must carry a message string")
    elif payload is not None:
        raise InvalidInputError(f"{message_type.value} takes no payload")


# ---------------------------------------------------------------------------
# Replies
# ---------------------------------------------------------------------------


def build_reply(
    reply_type: CrossWindowProviderResponse | str,
    data: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Build the wire dict for a wallet reply.

    Dataclass data is serialised with camelCase keys; ``None`` fields are
    omitted.
    """
    message_type = _response_type(reply_type)
    payload: dict[str, Any] = {}
    if data is not None:
        payload["data"] = _to_wire(data)
    if error is not None:
        payload["error"] = error
    return {"type": message_type.value, "payload": payload}


def parse_reply(raw: dict[str, Any]) -> ReplyMessage:
    """Parse a wire reply dict into a ReplyMessage with typed data."""
    if not isinstance(raw, dict):
        raise InvalidInputError("Reply must be a dict")
    message_type = _response_type(raw.get("type"))
    payload = raw.get("payload") or {}
    if not isinstance(payload, dict):
        raise InvalidInputError("Reply payload must be a dict")

    data = payload.get("data")
    if data is not None:
        data = _parse_reply_data(message_type, data)

    return ReplyMessage(
        type=message_type,
        payload=ReplyPayload(data=data, error=payload.get("error")),
    )


def _response_type(value: Any) -> CrossWindowProviderResponse:
    try:
        return Response(value)
    except ValueError:
        raise InvalidInputError(f"Unknown response type: {value!r}") from None


def _parse_reply_data(message_type: CrossWindowProviderResponse, data: Any) -> Any:
    if message_type == Response.LOGIN:
        if not isinstance(data, dict) or not data.get("address"):
            raise InvalidInputError("LOGIN_RESPONSE data must carry an address")
        return LoginResponseData(
            address=data["address"],
            access_token=data.get("accessToken"),
            name=data.get("name"),
            signature=data.get("signature"),
            multisig=data.get("multisig"),
            impersonate=data.get("impersonate"),
        )
    if message_type == Response.CANCEL:
        if not isinstance(data, dict):
            raise InvalidInputError("CANCEL_RESPONSE data must be a dict")
        return CancelResponseData(address=data.get("address", ""))
    if message_type == Response.SIGN_MESSAGE:
        if not isinstance(data, dict):
            raise InvalidInputError("SIGN_MESSAGE_RESPONSE data must be a dict")
        try:
            status = SignMessageStatus(data.get("status"))
        except ValueError:
            raise InvalidInputError(f"Unknown sign message status: {data.get('status')!r}") from None
        return SignMessageResponseData(status=status, signature=data.get("signature"))
    return data


def _to_wire(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            _camel_case(f.name): _to_wire(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_to_wire(item) for item in value]
    return value


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
