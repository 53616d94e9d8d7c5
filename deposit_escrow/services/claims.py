"""Claim settlement — converts paired deposits into target-asset transfers."""
from __future__ import annotations

import logging

from ..addresses import validate_address
from ..errors import NoFunds, NotFound
from ..interfaces.state_store import StateStore
from ..models import Deposit, EscrowConfig, TransferInstruction
from ..state import DEPOSITS

logger = logging.getLogger(__name__)


class ClaimEngine:
    """Settle a depositor's claim against the deposit ledger."""

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def claim(self, config: EscrowConfig, depositor: str) -> TransferInstruction:
        """Debit ``min(a, b)`` from both balances and return the payout instruction.

        The instruction is not executed here; the caller must dispatch it and
        discard the ledger update if the dispatch fails.

        Raises:
            NotFound: ``depositor`` has no record.
            NoFunds: either balance is zero.
        """
        depositor = validate_address(depositor)
        deposit = DEPOSITS.load(self._store, depositor)

        if deposit.asset_a_amount == 0 or deposit.asset_b_amount == 0:
            raise NoFunds()

        claim_amount = deposit.claimable

        def settle(current: Deposit | None) -> Deposit:
            if current is None:
                raise NotFound()
            return current.debit(claim_amount)

        remaining = DEPOSITS.update(self._store, depositor, settle)
        logger.info(
            "Claim of %d by %s (left %d/%d)",
            claim_amount,
            depositor,
            remaining.asset_a_amount,
            remaining.asset_b_amount,
        )

        return TransferInstruction(
            asset=config.target_ledger,
            recipient=depositor,
            amount=claim_amount,
        )
