"""Escrow engines."""
from .claims import ClaimEngine
from .deposits import DepositAccountingEngine
from .supply import remaining_supply, supply_info

__all__ = ["ClaimEngine", "DepositAccountingEngine", "remaining_supply", "supply_info"]
