from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rwa_options.exceptions import AuthorizationError
from rwa_options.session import SessionContext

if TYPE_CHECKING:
    from collections.abc import Callable

    from rwa_options.disclosure.wallet import LocalKeyWallet
    from rwa_options.ledger import LedgerConfig


def test_start_builds_disclosure_context(
    owner_wallet: LocalKeyWallet,
    ledger_config: LedgerConfig,
    clock: Callable[[], float],
) -> None:
    session = SessionContext.start(wallet=owner_wallet, config=ledger_config, clock=clock)

    assert session.account == owner_wallet.address
    assert session.disclosure.contract_address == ledger_config.contract_address
    assert session.disclosure.chain_id == 11155111
    assert session.disclosure.start_timestamp == 1_700_000_000
    assert session.disclosure.duration_days == 30
    assert session.disclosure.public_key.startswith("0x")


def test_context_reused_within_session(session: SessionContext) -> None:
    assert session.disclosure.message() == session.disclosure.message()


def test_sessions_get_distinct_key_material(ledger_config: LedgerConfig) -> None:
    first = SessionContext.start(config=ledger_config)
    second = SessionContext.start(config=ledger_config)

    assert first.disclosure.public_key != second.disclosure.public_key


def test_require_wallet_without_wallet(ledger_config: LedgerConfig) -> None:
    session = SessionContext.start(config=ledger_config)

    assert session.account is None
    with pytest.raises(AuthorizationError, match="wallet"):
        session.require_wallet()
