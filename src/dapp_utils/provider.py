"""Wallet provider contract shared by every dApp provider implementation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, NoReturn

from .errors import ProviderNotInitializedError
from .types import PlainTransaction, SignableMessage

# Provider call options: ``callback_url`` plus provider specific extras.
DAppProviderOptions = dict[str, Any]


class DAppProviderBase(ABC):
    """Interface a dApp talks to, whatever wallet sits behind it."""

    def login(self, options: DAppProviderOptions | None = None) -> str | bool | dict[str, Any]:
        """Log in. Returns an address, a success flag, or a dict with
        ``address``, ``signature`` and optional ``multisig``/``impersonate``.
        """
        raise NotImplementedError(f"{type(self).__name__} does not support login")

    @abstractmethod
    def logout(self, options: DAppProviderOptions | None = None) -> bool:
        ...

    @abstractmethod
    def sign_transaction(
        self, transaction: PlainTransaction, options: DAppProviderOptions | None = None
    ) -> PlainTransaction | None:
        ...

    @abstractmethod
    def sign_transactions(
        self, transactions: list[PlainTransaction], options: DAppProviderOptions | None = None
    ) -> list[PlainTransaction] | None:
        ...

    @abstractmethod
    def sign_message(
        self, message: SignableMessage, options: DAppProviderOptions | None = None
    ) -> SignableMessage | None:
        ...


def provider_not_initialized_error(caller: str) -> Callable[..., NoReturn]:
    """Return a callable that raises ProviderNotInitializedError for ``caller``."""
    def _raise(*args: Any, **kwargs: Any) -> NoReturn:
        raise ProviderNotInitializedError(caller)
    return _raise


class EmptyProvider(DAppProviderBase):
    """Placeholder used until a real provider is set; every call raises."""

    def login(self, options=None):
        provider_not_initialized_error("login")()

    def logout(self, options=None):
        provider_not_initialized_error("logout")()

    def sign_transaction(self, transaction, options=None):
        provider_not_initialized_error("sign_transaction")()

    def sign_transactions(self, transactions, options=None):
        provider_not_initialized_error("sign_transactions")()

    def sign_message(self, message, options=None):
        provider_not_initialized_error("sign_message")()
