"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models and the real codec
- Real in-memory ledger for catalog/index tests
- respx ONLY for the HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from rwa_options.catalog import PositionCatalog
from rwa_options.disclosure.wallet import LocalKeyWallet
from rwa_options.ledger import InMemoryLedger, LedgerConfig
from rwa_options.session import SessionContext
from tests.helpers import FIXED_NOW

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def clock() -> Callable[[], float]:
    return lambda: FIXED_NOW


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def ledger_config() -> LedgerConfig:
    return LedgerConfig(
        base_url="http://ledger.test",
        contract_address="0x5FbDB2315678afecb367f032d93F642f64180aa3",
        chain_id=11155111,
    )


@pytest.fixture
def make_wallet() -> Callable[..., LocalKeyWallet]:
    def _make(approve: Callable[[str], bool] | None = None) -> LocalKeyWallet:
        return LocalKeyWallet(ec.generate_private_key(ec.SECP256K1()), approve=approve)

    return _make


@pytest.fixture
def owner_wallet(make_wallet: Callable[..., LocalKeyWallet]) -> LocalKeyWallet:
    return make_wallet()


@pytest.fixture
def session(
    owner_wallet: LocalKeyWallet,
    ledger_config: LedgerConfig,
    clock: Callable[[], float],
) -> SessionContext:
    return SessionContext.start(wallet=owner_wallet, config=ledger_config, clock=clock)


@pytest.fixture
def catalog(
    ledger: InMemoryLedger,
    session: SessionContext,
    clock: Callable[[], float],
) -> PositionCatalog:
    return PositionCatalog(ledger, session, clock=clock)
