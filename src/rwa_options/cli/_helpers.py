"""Shared helpers for CLI commands: wallet resolution and session construction."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.markup import escape

from rwa_options.cli.utils import console
from rwa_options.disclosure.wallet import (
    WALLET_KEY_B64_ENV,
    WALLET_KEY_PATH_ENV,
    LocalKeyWallet,
)
from rwa_options.paths import DEFAULT_WALLET_KEY_PATH

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from rwa_options.catalog import PositionCatalog


def _preview(message: str, width: int = 40) -> str:
    lines = []
    for line in message.splitlines():
        lines.append(line if len(line) <= width + 12 else f"{line[: width + 12]}...")
    return "\n".join(lines)


def prompt_approval(message: str) -> bool:
    """Show the disclosure message and ask the user to sign it."""
    console.print("[bold]Signature request[/bold]")
    console.print(f"[dim]{escape(_preview(message))}[/dim]")
    return typer.confirm("Sign this message?", default=False)


def resolve_wallet_env() -> tuple[str | None, str | None]:
    """Return (key_path, key_b64) from the environment, falling back to the default path."""
    key_b64 = os.getenv(WALLET_KEY_B64_ENV) or None
    key_path = os.getenv(WALLET_KEY_PATH_ENV) or None
    if not key_b64 and not key_path and DEFAULT_WALLET_KEY_PATH.exists():
        key_path = str(DEFAULT_WALLET_KEY_PATH)
    return key_path, key_b64


def load_wallet(*, purpose: str, assume_yes: bool = False) -> LocalKeyWallet:
    """Load the session wallet or exit with a hint on how to configure one.

    Raises:
        typer.Exit: If no wallet key is configured or it cannot be loaded.
    """
    key_path, key_b64 = resolve_wallet_env()
    if not key_path and not key_b64:
        console.print(f"[red]Error:[/red] {purpose} requires a connected wallet.")
        console.print(
            f"[dim]Run `rwa-options wallet init`, or set {WALLET_KEY_PATH_ENV} "
            f"(or {WALLET_KEY_B64_ENV}).[/dim]"
        )
        raise typer.Exit(1)

    try:
        return LocalKeyWallet.from_key(
            key_path=key_path,
            key_b64=key_b64,
            approve=None if assume_yes else prompt_approval,
        )
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


@asynccontextmanager
async def open_catalog(wallet: LocalKeyWallet | None = None) -> AsyncIterator[PositionCatalog]:
    """Start a session against the configured ledger and yield its catalog."""
    from rwa_options.catalog import PositionCatalog
    from rwa_options.ledger import LedgerClient
    from rwa_options.session import SessionContext

    session = SessionContext.start(wallet=wallet)
    async with LedgerClient(config=session.config) as ledger:
        yield PositionCatalog(ledger, session)


def default_wallet_path(path: Path | None) -> Path:
    if path is not None:
        return path
    env_path = os.getenv(WALLET_KEY_PATH_ENV)
    return Path(env_path) if env_path else DEFAULT_WALLET_KEY_PATH
