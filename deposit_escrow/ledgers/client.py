"""Ledger RPC client with fallback support."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..amounts import to_uint128
from ..config import LedgerConfig
from ..errors import ArithmeticFailure, DispatchFailure
from ..models import AssetBalance, TransferInstruction

logger = logging.getLogger(__name__)


class LedgerRpcClient:
    """JSON-RPC client for the asset ledgers with automatic endpoint fallback.

    Serves both as the balance querier and as the transfer channel of the
    contract.
    """

    def __init__(self, config: LedgerConfig) -> None:
        self.endpoints = list(config.rpc_endpoints)
        self.timeout = config.rpc_timeout
        self.current_rpc_index = 0

    async def _post(self, rpc_url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST one JSON-RPC request to ``rpc_url`` and return its result."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)
        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(
                rpc_url,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                result = await response.json()
                if "error" in result:
                    raise DispatchFailure(f"RPC Error: {result['error']}")
                return result.get("result") or {}

    async def rpc_call(self, method: str, params: list[Any]) -> dict[str, Any]:
        """Make a read-only RPC call with fallback to alternative endpoints."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            rpc_index = (self.current_rpc_index + attempt) % len(self.endpoints)
            rpc_url = self.endpoints[rpc_index]

            try:
                result = await self._post(rpc_url, payload)
            except Exception as e:
                last_error = e
                logger.warning("RPC endpoint %s failed: %s", rpc_url, e)
                if attempt < len(self.endpoints) - 1:
                    logger.info("Trying next endpoint...")
                continue

            if rpc_index != self.current_rpc_index:
                logger.info("Switched to RPC endpoint: %s", rpc_url)
                self.current_rpc_index = rpc_index
            return result

        raise DispatchFailure(f"All RPC endpoints failed. Last error: {last_error}")

    async def rpc_submit(self, method: str, params: list[Any]) -> dict[str, Any]:
        """Send a state-changing RPC call exactly once, to the current endpoint.

        Never falls back: a request that timed out may still have been applied.
        """
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        rpc_url = self.endpoints[self.current_rpc_index]
        try:
            return await self._post(rpc_url, payload)
        except DispatchFailure:
            raise
        except Exception as e:
            raise DispatchFailure(f"RPC endpoint {rpc_url} failed: {e}") from e

    async def query_balances(self, holder: str) -> list[AssetBalance]:
        """Get every asset balance held by ``holder``."""
        result = await self.rpc_call("ledger_getBalances", [holder])

        balances: list[AssetBalance] = []
        for entry in result.get("balances") or []:
            try:
                balances.append(
                    AssetBalance(
                        kind=entry["kind"],
                        asset=entry["asset"],
                        amount=to_uint128(entry["amount"]),
                    )
                )
            except (KeyError, TypeError, ArithmeticFailure) as e:
                raise DispatchFailure(f"Malformed balance entry {entry!r}: {e}") from e
        return balances

    async def transfer(self, sender: str, instruction: TransferInstruction) -> None:
        """Ask the ledger at ``instruction.asset`` to move funds out of ``sender``."""
        await self.rpc_submit(
            "ledger_transfer",
            [
                {
                    "asset": instruction.asset,
                    "sender": sender,
                    "recipient": instruction.recipient,
                    "amount": str(instruction.amount),
                }
            ],
        )
        logger.info(
            "Transferred %d of %s to %s",
            instruction.amount,
            instruction.asset,
            instruction.recipient,
        )
