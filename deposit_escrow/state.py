"""Contract state layout."""
from .models import ContractVersion, Deposit, EscrowConfig
from .storage import Item, Map

CONTRACT_INFO: Item[ContractVersion] = Item("contract_info", ContractVersion)

# Written once by initialize, read-only afterwards
CONFIG: Item[EscrowConfig] = Item("config", EscrowConfig)

# Per-depositor input balances used for issuing the target asset
DEPOSITS: Map[Deposit] = Map("deposits", Deposit)
