"""Typed accessors over a ``StateStore``: single items and keyed maps."""
from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar

from ..errors import NotFound, StateAccessFailure
from ..interfaces.state_store import StateStore


class StateCodec(Protocol):
    def to_state(self) -> dict[str, Any]: ...


T = TypeVar("T", bound=StateCodec)


def _decode(model: Any, key: str, raw: dict[str, Any]) -> Any:
    try:
        return model.from_state(raw)
    except (KeyError, TypeError) as e:
        raise StateAccessFailure(f"Corrupt state entry '{key}': {e}") from e


class Item(Generic[T]):
    """A single value stored under a fixed key."""

    def __init__(self, key: str, model: type[T]) -> None:
        self.key = key
        self.model = model

    def may_load(self, store: StateStore) -> T | None:
        raw = store.get(self.key)
        if raw is None:
            return None
        return _decode(self.model, self.key, raw)

    def load(self, store: StateStore) -> T:
        value = self.may_load(store)
        if value is None:
            raise NotFound(f"{self.key} not found")
        return value

    def save(self, store: StateStore, value: T) -> None:
        store.set(self.key, value.to_state())

    def exists(self, store: StateStore) -> bool:
        return store.get(self.key) is not None


class Map(Generic[T]):
    """Values stored under ``<namespace>/<key>``."""

    def __init__(self, namespace: str, model: type[T]) -> None:
        self.namespace = namespace
        self.model = model

    def _key(self, key: str) -> str:
        return f"{self.namespace}/{key}"

    def may_load(self, store: StateStore, key: str) -> T | None:
        full_key = self._key(key)
        raw = store.get(full_key)
        if raw is None:
            return None
        return _decode(self.model, full_key, raw)

    def load(self, store: StateStore, key: str) -> T:
        value = self.may_load(store, key)
        if value is None:
            raise NotFound(f"{self._key(key)} not found")
        return value

    def save(self, store: StateStore, key: str, value: T) -> None:
        store.set(self._key(key), value.to_state())

    def update(
        self, store: StateStore, key: str, action: Callable[[T | None], T]
    ) -> T:
        """Load, transform with ``action`` and save.

        ``action`` receives ``None`` when no entry exists and may raise to
        abort the update.
        """
        new_value = action(self.may_load(store, key))
        self.save(store, key, new_value)
        return new_value

