"""In-memory state store."""
from __future__ import annotations

from typing import Any


class MemoryStore:
    """Dict-backed key-value store. Values are copied in and out."""

    def __init__(self, data: dict[str, dict[str, Any]] | None = None) -> None:
        self._data: dict[str, dict[str, Any]] = {
            k: dict(v) for k, v in (data or {}).items()
        }

    def get(self, key: str) -> dict[str, Any] | None:
        value = self._data.get(key)
        return dict(value) if value is not None else None

    def set(self, key: str, value: dict[str, Any]) -> None:
        self._data[key] = dict(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def flush(self) -> None:
        """Nothing to persist."""

    def snapshot(self) -> dict[str, dict[str, Any]]:
        return {k: dict(v) for k, v in self._data.items()}
