"""
RWA Options.

Option positions on tokenized real-world assets, kept in an external key-value ledger with
obscured premium/amount fields revealed only behind a wallet signature.
"""

__version__ = "0.1.0"

from rwa_options.catalog import DisclosureField, PositionCatalog
from rwa_options.ledger import InMemoryLedger, LedgerClient, LedgerConfig

# Configure structlog once at import time (quiet by default).
from rwa_options.logging import configure_structlog
from rwa_options.session import SessionContext

configure_structlog()

__all__ = [
    "DisclosureField",
    "InMemoryLedger",
    "LedgerClient",
    "LedgerConfig",
    "PositionCatalog",
    "SessionContext",
    "__version__",
]
