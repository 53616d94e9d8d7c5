"""Addresses and fakes shared by the test modules."""
from __future__ import annotations

from deposit_escrow.errors import DispatchFailure
from deposit_escrow.models import AssetBalance, TransferInstruction

ADMIN = "admin"
USER = "user"
RED = "contract0"
BLUE = "contract1"
BLACK = "contract2"
ESCROW = "contract3"
STRANGER = "contract9"


class FakeLedger:
    """In-memory stand-in for the external asset ledgers."""

    def __init__(self) -> None:
        self.balances: dict[str, list[AssetBalance]] = {}
        self.transfers: list[tuple[str, TransferInstruction]] = []
        self.reject_transfers = False

    async def query_balances(self, holder: str) -> list[AssetBalance]:
        return list(self.balances.get(holder, []))

    async def transfer(self, sender: str, instruction: TransferInstruction) -> None:
        if self.reject_transfers:
            raise DispatchFailure("transfer rejected")
        self.transfers.append((sender, instruction))
