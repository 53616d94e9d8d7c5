"""Transfer channel protocol — outbound transfer instructions."""
from typing import Protocol

from ..models import TransferInstruction


class TransferChannel(Protocol):
    """Abstract interface for executing transfers out of the contract.

    Implementations raise ``DispatchFailure`` when the ledger rejects the
    transfer.
    """

    async def transfer(self, sender: str, instruction: TransferInstruction) -> None: ...
