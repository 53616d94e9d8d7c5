"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .amounts import checked_add, checked_sub, to_uint128


class InputAsset(str, Enum):
    """Which of the two input assets a ledger carries."""

    A = "asset_a"
    B = "asset_b"


@dataclass(frozen=True)
class EscrowConfig:
    """Configuration written once by ``initialize``."""

    admin: str
    asset_a_ledger: str
    asset_b_ledger: str
    target_ledger: str
    total_supply: int

    def input_asset_for(self, ledger: str) -> InputAsset | None:
        """Return the input asset tracked for ``ledger``, if it is one of ours."""
        if ledger == self.asset_a_ledger:
            return InputAsset.A
        if ledger == self.asset_b_ledger:
            return InputAsset.B
        return None

    def to_state(self) -> dict[str, Any]:
        return {
            "admin": self.admin,
            "asset_a_ledger": self.asset_a_ledger,
            "asset_b_ledger": self.asset_b_ledger,
            "target_ledger": self.target_ledger,
            "total_supply": str(self.total_supply),
        }

    @classmethod
    def from_state(cls, raw: dict[str, Any]) -> EscrowConfig:
        return cls(
            admin=raw["admin"],
            asset_a_ledger=raw["asset_a_ledger"],
            asset_b_ledger=raw["asset_b_ledger"],
            target_ledger=raw["target_ledger"],
            total_supply=to_uint128(raw["total_supply"]),
        )


@dataclass(frozen=True)
class Deposit:
    """Accumulated input balances of a single depositor."""

    asset_a_amount: int = 0
    asset_b_amount: int = 0

    @property
    def claimable(self) -> int:
        return min(self.asset_a_amount, self.asset_b_amount)

    def credit(self, asset: InputAsset, amount: int) -> Deposit:
        if asset is InputAsset.A:
            return Deposit(
                asset_a_amount=checked_add(self.asset_a_amount, amount),
                asset_b_amount=self.asset_b_amount,
            )
        return Deposit(
            asset_a_amount=self.asset_a_amount,
            asset_b_amount=checked_add(self.asset_b_amount, amount),
        )

    def debit(self, amount: int) -> Deposit:
        """Subtract ``amount`` from both balances."""
        return Deposit(
            asset_a_amount=checked_sub(self.asset_a_amount, amount),
            asset_b_amount=checked_sub(self.asset_b_amount, amount),
        )

    def to_state(self) -> dict[str, Any]:
        return {
            "asset_a_amount": str(self.asset_a_amount),
            "asset_b_amount": str(self.asset_b_amount),
        }

    @classmethod
    def from_state(cls, raw: dict[str, Any]) -> Deposit:
        return cls(
            asset_a_amount=to_uint128(raw["asset_a_amount"]),
            asset_b_amount=to_uint128(raw["asset_b_amount"]),
        )


@dataclass(frozen=True)
class ContractVersion:
    contract: str
    version: str

    def to_state(self) -> dict[str, Any]:
        return {"contract": self.contract, "version": self.version}

    @classmethod
    def from_state(cls, raw: dict[str, Any]) -> ContractVersion:
        return cls(contract=raw["contract"], version=raw["version"])


# ---------------------------------------------------------------------------
# Notification outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AdminFunding:
    """The admin seeded the contract with target asset; nothing is credited."""

    amount: int


@dataclass(frozen=True)
class DepositCredit:
    """A depositor's balance of one input asset was increased."""

    depositor: str
    asset: InputAsset
    amount: int
    deposit: Deposit


TransferOutcome = Union[AdminFunding, DepositCredit]


# ---------------------------------------------------------------------------
# Messages and responses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransferInstruction:
    """Instruction to move ``amount`` of ``asset`` from the contract to ``recipient``."""

    asset: str
    recipient: str
    amount: int


@dataclass(frozen=True)
class Response:
    """Result of an execute entry point."""

    attributes: tuple[tuple[str, str], ...] = ()
    messages: tuple[TransferInstruction, ...] = ()

    def attribute(self, key: str) -> str | None:
        for k, v in self.attributes:
            if k == key:
                return v
        return None


@dataclass(frozen=True)
class AssetBalance:
    """One asset held by an address, as reported by the balance service.

    ``kind`` is ``"native"`` for chain currency (``asset`` is the denom) or
    ``"token"`` for a ledger-issued token (``asset`` is the ledger address).
    """

    kind: str
    asset: str
    amount: int


@dataclass(frozen=True)
class SupplyInfo:
    total_supply: int
    claimed_supply: int
    remaining_supply: int


@dataclass(frozen=True)
class DepositInfo:
    asset_a_amount: int
    asset_b_amount: int
