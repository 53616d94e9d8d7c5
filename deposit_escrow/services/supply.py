"""Supply accounting for the target asset."""
from __future__ import annotations

from typing import Iterable

from ..amounts import checked_add, checked_sub
from ..models import AssetBalance, EscrowConfig, SupplyInfo

TOKEN_KIND = "token"


def remaining_supply(config: EscrowConfig, balances: Iterable[AssetBalance]) -> int:
    """Sum the observed balances of the target token; other assets count as zero."""
    remaining = 0
    for balance in balances:
        if balance.kind == TOKEN_KIND and balance.asset == config.target_ledger:
            remaining = checked_add(remaining, balance.amount)
    return remaining


def supply_info(config: EscrowConfig, balances: Iterable[AssetBalance]) -> SupplyInfo:
    """Combine the configured total with a live balance observation.

    Raises ``ArithmeticFailure`` if the contract holds more target asset
    than the configured total.
    """
    remaining = remaining_supply(config, balances)
    return SupplyInfo(
        total_supply=config.total_supply,
        claimed_supply=checked_sub(config.total_supply, remaining),
        remaining_supply=remaining,
    )
