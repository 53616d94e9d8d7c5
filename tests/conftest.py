"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from deposit_escrow.config import AppConfig, ContractConfig, LedgerConfig, StateConfig
from deposit_escrow.contract import CONTRACT_NAME, CONTRACT_VERSION, Contract
from deposit_escrow.models import ContractVersion, EscrowConfig
from deposit_escrow.state import CONFIG, CONTRACT_INFO
from deposit_escrow.storage import MemoryStore

from tests.helpers import ADMIN, BLACK, BLUE, ESCROW, RED, FakeLedger


# ---------------------------------------------------------------------------
# Escrow fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def escrow_config() -> EscrowConfig:
    return EscrowConfig(
        admin=ADMIN,
        asset_a_ledger=RED,
        asset_b_ledger=BLUE,
        target_ledger=BLACK,
        total_supply=5000,
    )


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def initialized_store(store: MemoryStore, escrow_config: EscrowConfig) -> MemoryStore:
    CONTRACT_INFO.save(store, ContractVersion(CONTRACT_NAME, CONTRACT_VERSION))
    CONFIG.save(store, escrow_config)
    return store


@pytest.fixture()
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture()
def contract(initialized_store: MemoryStore, ledger: FakeLedger) -> Contract:
    return Contract(initialized_store, ESCROW, ledger, ledger)


@pytest.fixture()
def fresh_contract(store: MemoryStore, ledger: FakeLedger) -> Contract:
    return Contract(store, ESCROW, ledger, ledger)


# ---------------------------------------------------------------------------
# App config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_ledger_config() -> LedgerConfig:
    return LedgerConfig(
        rpc_endpoints=("https://rpc1.example.com", "https://rpc2.example.com"),
        rpc_timeout=10,
    )


@pytest.fixture()
def sample_app_config(tmp_path: Path, sample_ledger_config: LedgerConfig) -> AppConfig:
    return AppConfig(
        contract=ContractConfig(address=ESCROW),
        state=StateConfig(path=str(tmp_path / "state.json")),
        ledger=sample_ledger_config,
    )


SAMPLE_YAML = textwrap.dedent("""\
    contract:
      address: contract3
    state:
      path: "escrow_state.json"
    ledger:
      rpc_endpoints: ["https://rpc.example.com"]
      rpc_timeout: 10
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
