"""Key-value ledger adapters."""

from rwa_options.ledger._protocols import LedgerStore
from rwa_options.ledger.client import LedgerClient
from rwa_options.ledger.config import LedgerConfig, get_config, set_config
from rwa_options.ledger.memory import InMemoryLedger

__all__ = [
    "InMemoryLedger",
    "LedgerClient",
    "LedgerConfig",
    "LedgerStore",
    "get_config",
    "set_config",
]
