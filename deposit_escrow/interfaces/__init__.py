"""Protocol interfaces for the escrow's external collaborators."""
from .balance_querier import BalanceQuerier
from .state_store import StateStore
from .transfer_channel import TransferChannel

__all__ = ["BalanceQuerier", "StateStore", "TransferChannel"]
