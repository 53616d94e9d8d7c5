"""Balance querier protocol — live balance observation."""
from typing import Protocol

from ..models import AssetBalance


class BalanceQuerier(Protocol):
    """Abstract interface for reading the assets held by an address."""

    async def query_balances(self, holder: str) -> list[AssetBalance]: ...
