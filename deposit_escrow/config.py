"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .addresses import validate_address
from .errors import InvalidAddress

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ContractConfig:
    address: str = ""


@dataclass(frozen=True)
class StateConfig:
    path: str = "escrow_state.json"


@dataclass(frozen=True)
class LedgerConfig:
    rpc_endpoints: tuple[str, ...] = ()
    rpc_timeout: int = 30


@dataclass(frozen=True)
class AppConfig:
    contract: ContractConfig = field(default_factory=ContractConfig)
    state: StateConfig = field(default_factory=StateConfig)
    ledger: LedgerConfig = field(default_factory=LedgerConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_contract(raw: dict[str, Any]) -> ContractConfig:
    return ContractConfig(address=str(raw.get("address", "")))


def _build_state(raw: dict[str, Any]) -> StateConfig:
    return StateConfig(path=str(raw.get("path", StateConfig.path)))


def _build_ledger(raw: dict[str, Any]) -> LedgerConfig:
    return LedgerConfig(
        rpc_endpoints=tuple(raw.get("rpc_endpoints", [])),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        contract=_build_contract(raw.get("contract", {})),
        state=_build_state(raw.get("state", {})),
        ledger=_build_ledger(raw.get("ledger", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.contract.address:
        raise ValueError("contract.address must be configured")
    try:
        validate_address(cfg.contract.address)
    except InvalidAddress as e:
        raise ValueError(f"contract.address is invalid: {e}") from e

    if not cfg.state.path:
        raise ValueError("state.path must be configured")

    if not cfg.ledger.rpc_endpoints:
        raise ValueError("At least one ledger RPC endpoint must be configured")
    if cfg.ledger.rpc_timeout <= 0:
        raise ValueError(f"ledger.rpc_timeout must be positive, got {cfg.ledger.rpc_timeout}")
