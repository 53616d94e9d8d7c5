"""Command-line interface for the deposit escrow."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Any

from .config import AppConfig, load_config
from .contract import Contract
from .errors import EscrowError
from .ledgers import LedgerRpcClient
from .logging_setup import configure_logging
from .models import Response
from .storage import JsonFileStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="deposit-escrow",
        description="Paired deposit escrow",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    init_parser = sub.add_parser("init", help="Initialize the escrow (once)")
    init_parser.add_argument("--sender", required=True, help="Admin address")
    init_parser.add_argument("--asset-a", required=True, help="Input ledger A address")
    init_parser.add_argument("--asset-b", required=True, help="Input ledger B address")
    init_parser.add_argument("--target", required=True, help="Target ledger address")
    init_parser.add_argument(
        "--total-supply", required=True, type=int, help="Target asset supply"
    )

    notify_parser = sub.add_parser("notify", help="Apply a transfer notification")
    notify_parser.add_argument("ledger", help="Address of the notifying ledger")
    notify_parser.add_argument("sender", help="Address that sent the funds")
    notify_parser.add_argument("amount", type=int, help="Amount transferred")

    claim_parser = sub.add_parser("claim", help="Claim target asset for a depositor")
    claim_parser.add_argument("sender", help="Depositor address")

    sub.add_parser("supply", help="Show total/claimed/remaining supply")

    deposit_parser = sub.add_parser("deposit", help="Show deposits of an address")
    deposit_parser.add_argument("address")

    sub.add_parser("version", help="Show stored contract version")

    return parser


def build_contract(config: AppConfig) -> Contract:
    client = LedgerRpcClient(config.ledger)
    return Contract(
        store=JsonFileStore(config.state.path),
        address=config.contract.address,
        querier=client,
        channel=client,
    )


def _to_json(result: Any) -> str:
    if isinstance(result, Response):
        payload: Any = {
            "attributes": dict(result.attributes),
            "messages": [dataclasses.asdict(m) for m in result.messages],
        }
    else:
        payload = dataclasses.asdict(result)
    return json.dumps(payload, indent=2)


async def _run(args: argparse.Namespace) -> Any:
    """Execute the selected command."""
    contract = build_contract(load_config(args.config))

    if args.command == "init":
        return await contract.initialize(
            args.sender, args.asset_a, args.asset_b, args.target, args.total_supply
        )
    if args.command == "notify":
        return await contract.notify_transfer(args.ledger, args.sender, args.amount)
    if args.command == "claim":
        return await contract.claim(args.sender)
    if args.command == "supply":
        return await contract.query_supply_info()
    if args.command == "deposit":
        return contract.query_deposit_info(args.address)
    if args.command == "version":
        return contract.query_contract_version()
    raise ValueError(f"Unknown command: {args.command}")


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    try:
        result = asyncio.run(_run(args))
    except EscrowError as e:
        logger.error("%s failed: %s: %s", args.command, type(e).__name__, e)
        sys.exit(1)

    print(_to_json(result))
