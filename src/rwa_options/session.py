"""Per-session state, established once when a session starts."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rwa_options.disclosure.context import (
    DEFAULT_DURATION_DAYS,
    DisclosureContext,
    generate_public_key,
)
from rwa_options.exceptions import AuthorizationError
from rwa_options.ledger.config import LedgerConfig, get_config

if TYPE_CHECKING:
    from collections.abc import Callable

    from rwa_options.disclosure.wallet import Wallet


@dataclass(frozen=True)
class SessionContext:
    """Who is acting, which ledger they talk to, and the disclosure context."""

    config: LedgerConfig
    disclosure: DisclosureContext
    wallet: Wallet | None = None

    @classmethod
    def start(
        cls,
        *,
        wallet: Wallet | None = None,
        config: LedgerConfig | None = None,
        clock: Callable[[], float] = time.time,
        duration_days: int = DEFAULT_DURATION_DAYS,
    ) -> SessionContext:
        """Read the clock once and generate fresh session key material."""
        config = config or get_config()
        disclosure = DisclosureContext(
            public_key=generate_public_key(),
            contract_address=config.contract_address,
            chain_id=config.chain_id,
            start_timestamp=int(clock()),
            duration_days=duration_days,
        )
        return cls(config=config, disclosure=disclosure, wallet=wallet)

    @property
    def account(self) -> str | None:
        """Connected account identifier, if a wallet is connected."""
        return self.wallet.address if self.wallet is not None else None

    def require_wallet(self) -> Wallet:
        """Return the wallet or raise if none is connected."""
        if self.wallet is None:
            raise AuthorizationError("Connect a wallet first")
        return self.wallet
