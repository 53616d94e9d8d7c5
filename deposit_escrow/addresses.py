"""Address validation."""
from __future__ import annotations

from .errors import InvalidAddress


def validate_address(address: str) -> str:
    """Return ``address`` unchanged if it is a normalized address."""
    if not isinstance(address, str) or not address:
        raise InvalidAddress("Address must be a non-empty string")
    if any(ch.isspace() for ch in address):
        raise InvalidAddress(f"Address contains whitespace: {address!r}")
    if address != address.lower():
        raise InvalidAddress(f"Address not normalized: {address}")
    return address
