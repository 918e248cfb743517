from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import respx

from rwa_options.disclosure.wallet import generate_wallet_key
from rwa_options.ledger.config import DEFAULT_LEDGER_URL, LedgerConfig, set_config
from tests.helpers import FakeLedgerService

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_ENV_VARS = (
    "RWA_LEDGER_URL",
    "RWA_LEDGER_ADDRESS",
    "RWA_CHAIN_ID",
    "RWA_WALLET_KEY_PATH",
    "RWA_WALLET_KEY_B64",
)


@pytest.fixture(autouse=True)
def _isolated_cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    set_config(LedgerConfig())
    yield
    set_config(LedgerConfig())


@pytest.fixture
def ledger_service() -> Iterator[FakeLedgerService]:
    service = FakeLedgerService(DEFAULT_LEDGER_URL)
    with respx.mock(assert_all_called=False) as router:
        service.install(router)
        yield service


@pytest.fixture
def wallet_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "owner.pem"
    generate_wallet_key(path)
    monkeypatch.setenv("RWA_WALLET_KEY_PATH", str(path))
    return path
