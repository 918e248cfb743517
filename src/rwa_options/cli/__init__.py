"""
CLI application for RWA Options.

Every command is one user-triggered action; errors are reported here and never retried.
"""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import find_dotenv, load_dotenv

from rwa_options.cli.positions import app as positions_app
from rwa_options.cli.utils import console
from rwa_options.cli.wallet import app as wallet_app

app = typer.Typer(
    name="rwa-options",
    help="RWA Options CLI - option positions with obscured premium and amount.",
    add_completion=False,
)

app.add_typer(positions_app, name="positions")
app.add_typer(wallet_app, name="wallet")


@app.callback()
def main(
    ledger_url: Annotated[
        str | None,
        typer.Option(
            "--ledger-url",
            help="Ledger service URL. Defaults to RWA_LEDGER_URL.",
            show_default=False,
        ),
    ] = None,
    chain_id: Annotated[
        int | None,
        typer.Option(
            "--chain-id",
            help="Network chain id. Defaults to RWA_CHAIN_ID.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """RWA Options CLI."""
    from rwa_options.ledger.config import LedgerConfig, set_config

    load_dotenv(find_dotenv(usecwd=True))

    # Priority: CLI flag > environment variable > default
    try:
        config = LedgerConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    overrides: dict[str, object] = {}
    if ledger_url:
        overrides["base_url"] = ledger_url.rstrip("/")
    if chain_id is not None:
        if chain_id < 0:
            console.print(f"[red]Error:[/red] Invalid chain id {chain_id}.")
            raise typer.Exit(1)
        overrides["chain_id"] = chain_id
    set_config(config.model_copy(update=overrides))


@app.command()
def version() -> None:
    """Show version information."""
    from rwa_options import __version__

    console.print(f"rwa-options v{__version__}")


@app.command()
def status() -> None:
    """Check whether the ledger service is reachable."""
    from rwa_options.cli.utils import run_async
    from rwa_options.ledger import LedgerClient, get_config

    async def _check() -> bool:
        async with LedgerClient() as ledger:
            return await ledger.is_available()

    config = get_config()
    if run_async(_check()):
        console.print(f"[green]✓[/green] Ledger available at {config.base_url}")
        return
    console.print(f"[red]✗[/red] Ledger unavailable at {config.base_url}")
    raise typer.Exit(1)
