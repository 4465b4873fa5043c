"""Error classes for dapp-utils."""
from __future__ import annotations


class DappUtilsError(Exception):
    """Base error for dapp-utils operations."""

    def __init__(self, code: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


class InvalidInputError(DappUtilsError, ValueError):
    """Raised when a helper receives a malformed amount, literal or message."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__("INVALID_INPUT", message)


class ProviderNotInitializedError(DappUtilsError):
    """Raised when a provider method is called before a provider is wired in."""

    def __init__(self, caller: str):
        super().__init__(
            "PROVIDER_NOT_INITIALIZED",
            f"Unable to perform {caller}, Provider not initialized",
        )
        self.caller = caller
