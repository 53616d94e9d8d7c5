"""Unit tests for state stores, transactions and typed accessors."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from deposit_escrow.errors import NotFound, StateAccessFailure
from deposit_escrow.models import Deposit
from deposit_escrow.storage import Item, JsonFileStore, Map, MemoryStore, Transaction


class TestMemoryStore:
    def test_get_missing(self) -> None:
        assert MemoryStore().get("nope") is None

    def test_values_are_copied(self) -> None:
        store = MemoryStore()
        value = {"a": "1"}
        store.set("k", value)
        value["a"] = "2"
        assert store.get("k") == {"a": "1"}

    def test_remove(self) -> None:
        store = MemoryStore({"k": {}})
        store.remove("k")
        assert store.get("k") is None


class TestTransaction:
    def test_reads_own_writes(self) -> None:
        base = MemoryStore()
        txn = Transaction(base)
        txn.set("k", {"v": "1"})
        assert txn.get("k") == {"v": "1"}
        assert base.get("k") is None

    def test_commit_applies_writes(self) -> None:
        base = MemoryStore({"old": {"v": "0"}})
        txn = Transaction(base)
        txn.set("new", {"v": "1"})
        txn.set("old", {"v": "2"})
        txn.commit()
        assert base.snapshot() == {"old": {"v": "2"}, "new": {"v": "1"}}

    def test_uncommitted_writes_are_discarded(self) -> None:
        base = MemoryStore({"k": {"v": "0"}})
        txn = Transaction(base)
        txn.set("k", {"v": "1"})
        del txn
        assert base.get("k") == {"v": "0"}

    def test_failed_flush_restores_base(self, monkeypatch: pytest.MonkeyPatch) -> None:
        base = MemoryStore({"old": {"v": "0"}})

        def failing_flush() -> None:
            raise StateAccessFailure("disk full")

        monkeypatch.setattr(base, "flush", failing_flush)
        txn = Transaction(base)
        txn.set("old", {"v": "1"})
        txn.set("new", {"v": "1"})

        with pytest.raises(StateAccessFailure):
            txn.commit()
        assert base.snapshot() == {"old": {"v": "0"}}

    def test_double_commit_raises(self) -> None:
        txn = Transaction(MemoryStore())
        txn.commit()
        with pytest.raises(RuntimeError):
            txn.commit()


class TestTypedAccessors:
    def test_item_load_missing_raises(self) -> None:
        with pytest.raises(NotFound):
            Item("deposit", Deposit).load(MemoryStore())

    def test_item_save_load(self) -> None:
        store = MemoryStore()
        item = Item("deposit", Deposit)
        item.save(store, Deposit(1, 2))
        assert item.exists(store)
        assert item.load(store) == Deposit(1, 2)

    def test_map_namespacing(self) -> None:
        store = MemoryStore()
        deposits = Map("deposits", Deposit)
        deposits.save(store, "user", Deposit(3, 4))
        assert store.get("deposits/user") == {"asset_a_amount": "3", "asset_b_amount": "4"}

    def test_map_update_receives_none_when_missing(self) -> None:
        seen = []

        def action(current):
            seen.append(current)
            return Deposit(1, 1)

        Map("deposits", Deposit).update(MemoryStore(), "user", action)
        assert seen == [None]

    def test_map_update_error_leaves_state(self) -> None:
        store = MemoryStore()
        deposits = Map("deposits", Deposit)

        def action(current):
            raise NotFound()

        with pytest.raises(NotFound):
            deposits.update(store, "user", action)
        assert deposits.may_load(store, "user") is None

    def test_corrupt_entry(self) -> None:
        store = MemoryStore({"deposits/user": {"asset_a_amount": "1"}})
        with pytest.raises(StateAccessFailure, match="Corrupt"):
            Map("deposits", Deposit).load(store, "user")


class TestJsonFileStore:
    def test_missing_file_starts_empty(self, tmp_path: Path) -> None:
        assert JsonFileStore(tmp_path / "state.json").snapshot() == {}

    def test_flush_and_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "state.json"
        store = JsonFileStore(path)
        store.set("deposits/user", {"asset_a_amount": "5", "asset_b_amount": "0"})
        store.flush()

        assert json.loads(path.read_text())["deposits/user"]["asset_a_amount"] == "5"
        assert JsonFileStore(path).get("deposits/user") == {
            "asset_a_amount": "5",
            "asset_b_amount": "0",
        }

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "state.json")
        store.set("k", {})
        store.flush()
        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]

    def test_corrupt_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json")
        with pytest.raises(StateAccessFailure):
            JsonFileStore(path)

    def test_non_object_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text("[]")
        with pytest.raises(StateAccessFailure):
            JsonFileStore(path)
