"""State store protocol — persistent key-value state of the contract."""
from typing import Any, Protocol


class StateStore(Protocol):
    """Abstract interface for the contract's key-value state."""

    def get(self, key: str) -> dict[str, Any] | None: ...

    def set(self, key: str, value: dict[str, Any]) -> None: ...

    def flush(self) -> None: ...
