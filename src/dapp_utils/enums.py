"""Message vocabulary shared by dApps and wallet providers."""
from __future__ import annotations

from enum import Enum


class CrossWindowProviderRequest(str, Enum):
    SIGN_TRANSACTIONS = "SIGN_TRANSACTIONS_REQUEST"
    GUARD_TRANSACTIONS = "GUARD_TRANSACTIONS_REQUEST"
    SIGN_MESSAGE = "SIGN_MESSAGE_REQUEST"
    LOGIN = "LOGIN_REQUEST"
    LOGOUT = "LOGOUT_REQUEST"
    CANCEL_ACTION = "CANCEL_ACTION_REQUEST"
    FINALIZE_HANDSHAKE = "FINALIZE_HANDSHAKE_REQUEST"
    FINALIZE_RESET_STATE = "FINALIZE_RESET_STATE_REQUEST"


class CrossWindowProviderResponse(str, Enum):
    HANDSHAKE = "HANDSHAKE_RESPONSE"
    GUARD_TRANSACTIONS = "GUARD_TRANSACTIONS_RESPONSE"
    LOGIN = "LOGIN_RESPONSE"
    DISCONNECT = "DISCONNECT_RESPONSE"
    CANCEL = "CANCEL_RESPONSE"
    SIGN_TRANSACTIONS = "SIGN_TRANSACTIONS_RESPONSE"
    SIGN_MESSAGE = "SIGN_MESSAGE_RESPONSE"
    NONE = "NONE_RESPONSE"
    RESET_STATE = "RESET_STATE_RESPONSE"


class SignMessageStatus(str, Enum):
    PENDING = "pending"
    FAILED = "failed"
    SIGNED = "signed"
    CANCELLED = "cancelled"


# In-browser (extension) providers use the same messages.
WindowProviderRequest = CrossWindowProviderRequest
WindowProviderResponse = CrossWindowProviderResponse
