"""Contract entry points.

Each execute entry point runs against a ``Transaction`` over the contract's
state store. Outbound transfer instructions are dispatched after the handler
returns and the buffered writes are committed only if every dispatch
succeeded, so a failed payout also undoes the ledger debit that caused it.
"""
from __future__ import annotations

import logging
from typing import Callable

from . import __version__
from .addresses import validate_address
from .amounts import to_uint128
from .errors import AlreadyInitialized
from .interfaces.balance_querier import BalanceQuerier
from .interfaces.transfer_channel import TransferChannel
from .models import (
    AdminFunding,
    ContractVersion,
    DepositInfo,
    EscrowConfig,
    Response,
    SupplyInfo,
)
from .services import ClaimEngine, DepositAccountingEngine, supply_info
from .state import CONFIG, CONTRACT_INFO
from .storage import MemoryStore, Transaction

logger = logging.getLogger(__name__)

CONTRACT_NAME = "deposit-escrow"
CONTRACT_VERSION = __version__


class Contract:
    """Paired deposit escrow bound to a state store and the external ledgers."""

    def __init__(
        self,
        store: MemoryStore,
        address: str,
        querier: BalanceQuerier,
        channel: TransferChannel,
    ) -> None:
        self._store = store
        self.address = validate_address(address)
        self._querier = querier
        self._channel = channel

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def _execute(
        self, method: str, handler: Callable[[Transaction], Response]
    ) -> Response:
        txn = Transaction(self._store)
        try:
            response = handler(txn)
            for message in response.messages:
                await self._channel.transfer(self.address, message)
            txn.commit()
        except Exception as e:
            logger.warning(
                "%s failed, discarding %d pending writes: %s", method, txn.pending, e
            )
            raise

        logger.debug("%s committed %d writes", method, txn.pending)
        return response

    async def initialize(
        self,
        sender: str,
        asset_a_ledger: str,
        asset_b_ledger: str,
        target_ledger: str,
        total_supply: int,
    ) -> Response:
        """One-time setup; ``sender`` becomes the admin."""
        config = EscrowConfig(
            admin=validate_address(sender),
            asset_a_ledger=validate_address(asset_a_ledger),
            asset_b_ledger=validate_address(asset_b_ledger),
            target_ledger=validate_address(target_ledger),
            total_supply=to_uint128(total_supply),
        )

        def handler(txn: Transaction) -> Response:
            if CONFIG.exists(txn):
                raise AlreadyInitialized()
            CONTRACT_INFO.save(txn, ContractVersion(CONTRACT_NAME, CONTRACT_VERSION))
            CONFIG.save(txn, config)
            return Response(
                attributes=(
                    ("method", "instantiate"),
                    ("owner", config.admin),
                    ("asset_a_ledger", config.asset_a_ledger),
                    ("asset_b_ledger", config.asset_b_ledger),
                    ("target_ledger", config.target_ledger),
                    ("total_supply", str(config.total_supply)),
                )
            )

        return await self._execute("initialize", handler)

    async def notify_transfer(
        self, notifying_ledger: str, sender: str, amount: int
    ) -> Response:
        """Called by an asset ledger after moving ``amount`` in on behalf of ``sender``."""

        def handler(txn: Transaction) -> Response:
            config = CONFIG.load(txn)
            outcome = DepositAccountingEngine(txn).record_transfer(
                config, notifying_ledger, sender, amount
            )
            if isinstance(outcome, AdminFunding):
                return Response(attributes=(("method", "initial_token_deposit"),))
            return Response(
                attributes=(
                    ("method", "deposit"),
                    ("depositor", outcome.depositor),
                    ("asset", outcome.asset.value),
                    ("amount", str(outcome.amount)),
                )
            )

        return await self._execute("notify_transfer", handler)

    async def claim(self, sender: str) -> Response:
        """Claim target asset for ``sender`` against their paired deposits."""

        def handler(txn: Transaction) -> Response:
            config = CONFIG.load(txn)
            instruction = ClaimEngine(txn).claim(config, sender)
            return Response(
                attributes=(
                    ("method", "claim"),
                    ("sender", instruction.recipient),
                    ("amount", str(instruction.amount)),
                ),
                messages=(instruction,),
            )

        return await self._execute("claim", handler)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def query_supply_info(self) -> SupplyInfo:
        config = CONFIG.load(self._store)
        balances = await self._querier.query_balances(self.address)
        return supply_info(config, balances)

    def query_deposit_info(self, address: str) -> DepositInfo:
        return DepositAccountingEngine(self._store).deposit_info(address)

    def query_contract_version(self) -> ContractVersion:
        return CONTRACT_INFO.load(self._store)
