"""External asset ledger clients."""
from .client import LedgerRpcClient

__all__ = ["LedgerRpcClient"]
