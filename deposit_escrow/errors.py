"""Escrow error hierarchy.

Every failure of an entry point is an ``EscrowError``. Errors abort the
invocation they occur in and its buffered state writes are discarded; nothing
is retried.
"""
from __future__ import annotations


class EscrowError(Exception):
    """Base class for all escrow failures."""


class Unauthorized(EscrowError):
    """A transfer notification came from a ledger that is not configured."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFound(EscrowError):
    """A state entry (deposit record, configuration) does not exist."""

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)


class PaymentError(EscrowError):
    """A payment precondition was not met."""


class NoFunds(PaymentError):
    """A claim was attempted while one of the input balances is zero."""

    def __init__(self, message: str = "No funds sent") -> None:
        super().__init__(message)


class ArithmeticFailure(EscrowError):
    """A Uint128 amount overflowed, underflowed or was out of range."""


class StateAccessFailure(EscrowError):
    """Reading or writing persistent state failed."""


class DispatchFailure(EscrowError):
    """An external ledger rejected a request or could not be reached."""


class InvalidAddress(EscrowError):
    """An address is empty or not in normalized form."""


class AlreadyInitialized(EscrowError):
    """``initialize`` was called on a contract that already has a configuration."""

    def __init__(self, message: str = "Contract already initialized") -> None:
        super().__init__(message)
