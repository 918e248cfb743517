"""
Configuration for the ledger service (address discovery and chain identifier).
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LEDGER_URL = "http://127.0.0.1:8080"

LEDGER_URL_ENV = "RWA_LEDGER_URL"
LEDGER_ADDRESS_ENV = "RWA_LEDGER_ADDRESS"
CHAIN_ID_ENV = "RWA_CHAIN_ID"


class LedgerConfig(BaseModel):
    """Where the ledger lives and which network it belongs to."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_LEDGER_URL
    """HTTP base URL of the key-value ledger service."""

    contract_address: str = ""
    """Store address reported in the disclosure message."""

    chain_id: int = Field(default=0, ge=0)
    """Network chain identifier reported in the disclosure message."""

    @classmethod
    def from_env(cls) -> LedgerConfig:
        """Build a config from `RWA_LEDGER_*` / `RWA_CHAIN_ID` environment variables."""
        chain_id_raw = os.getenv(CHAIN_ID_ENV, "").strip()
        try:
            chain_id = int(chain_id_raw, 0) if chain_id_raw else 0
        except ValueError:
            raise ValueError(f"Invalid {CHAIN_ID_ENV}: {chain_id_raw!r}") from None

        return cls(
            base_url=(os.getenv(LEDGER_URL_ENV) or DEFAULT_LEDGER_URL).rstrip("/"),
            contract_address=os.getenv(LEDGER_ADDRESS_ENV, "").strip(),
            chain_id=chain_id,
        )


# Singleton for global access
_config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get the current global ledger configuration."""
    return _config


def set_config(config: LedgerConfig) -> None:
    """Replace the global ledger configuration."""
    global _config  # noqa: PLW0603 - intentional singleton for CLI state
    _config = config
