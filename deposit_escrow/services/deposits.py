"""Deposit accounting — applies transfer notifications to the deposit ledger."""
from __future__ import annotations

import logging
from typing import Callable

from ..addresses import validate_address
from ..amounts import to_uint128
from ..errors import NotFound, Unauthorized
from ..interfaces.state_store import StateStore
from ..models import (
    AdminFunding,
    Deposit,
    DepositCredit,
    DepositInfo,
    EscrowConfig,
    TransferOutcome,
)
from ..state import DEPOSITS

logger = logging.getLogger(__name__)


class DepositAccountingEngine:
    """Credit depositor balances from input-ledger notifications."""

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def record_transfer(
        self,
        config: EscrowConfig,
        notifying_ledger: str,
        depositor: str,
        amount: int,
    ) -> TransferOutcome:
        """Apply a transfer of ``amount`` made by ``depositor`` via ``notifying_ledger``.

        The admin funds the contract with the target asset through the same
        notification channel; those transfers are reported as
        ``AdminFunding`` and never touch the deposit ledger.

        Raises:
            Unauthorized: ``notifying_ledger`` is neither input ledger.
            NotFound: the existing record disappeared before it was saved.
            ArithmeticFailure: the balance would overflow Uint128.
        """
        depositor = validate_address(depositor)
        amount = to_uint128(amount)

        if depositor == config.admin:
            logger.info("Initial target funding of %d via %s", amount, notifying_ledger)
            return AdminFunding(amount=amount)

        asset = config.input_asset_for(notifying_ledger)
        if asset is None:
            logger.warning(
                "Rejected transfer notification from unknown ledger %s", notifying_ledger
            )
            raise Unauthorized()

        existing = DEPOSITS.may_load(self._store, depositor)
        if existing is None:
            deposit = Deposit().credit(asset, amount)
            DEPOSITS.save(self._store, depositor, deposit)
        else:
            deposit = existing.credit(asset, amount)
            DEPOSITS.update(self._store, depositor, _replace_existing(deposit))

        logger.info(
            "Credited %d %s to %s (now %d/%d)",
            amount,
            asset.value,
            depositor,
            deposit.asset_a_amount,
            deposit.asset_b_amount,
        )
        return DepositCredit(depositor=depositor, asset=asset, amount=amount, deposit=deposit)

    def deposit_info(self, address: str) -> DepositInfo:
        deposit = DEPOSITS.load(self._store, validate_address(address))
        return DepositInfo(
            asset_a_amount=deposit.asset_a_amount,
            asset_b_amount=deposit.asset_b_amount,
        )


def _replace_existing(new_value: Deposit) -> Callable[[Deposit | None], Deposit]:
    def action(current: Deposit | None) -> Deposit:
        if current is None:
            raise NotFound()
        return new_value

    return action

