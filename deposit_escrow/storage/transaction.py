"""Write-buffering overlay used to make an invocation all-or-nothing."""
from __future__ import annotations

from typing import Any

from .memory import MemoryStore


class Transaction:
    """Overlay over a ``MemoryStore`` that buffers writes until ``commit``.

    Reads see the transaction's own writes first. Dropping the transaction
    without committing discards every write.
    """

    def __init__(self, base: MemoryStore) -> None:
        self._base = base
        self._writes: dict[str, dict[str, Any]] = {}
        self._committed = False

    def get(self, key: str) -> dict[str, Any] | None:
        if key in self._writes:
            return dict(self._writes[key])
        return self._base.get(key)

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._writes[key] = dict(value)

    def flush(self) -> None:
        """Writes reach the base store only through ``commit``."""

    @property
    def pending(self) -> int:
        return len(self._writes)

    def commit(self) -> None:
        """Apply buffered writes to the base store and persist it.

        If persisting fails, the base store is put back to its previous
        contents before the error propagates.
        """
        if self._committed:
            raise RuntimeError("Transaction already committed")

        previous = {key: self._base.get(key) for key in self._writes}
        for key, value in self._writes.items():
            self._base.set(key, value)
        try:
            self._base.flush()
        except Exception:
            for key, value in previous.items():
                if value is None:
                    self._base.remove(key)
                else:
                    self._base.set(key, value)
            raise
        self._committed = True
