"""Typer CLI commands for the local signing wallet."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - Required at runtime for Typer introspection
from typing import Annotated

import typer
from rich.markup import escape

from rwa_options.cli._helpers import default_wallet_path, load_wallet
from rwa_options.cli.utils import console

app = typer.Typer(help="Local signing wallet.")


@app.command("init")
def wallet_init(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Where to write the key. Defaults to RWA_WALLET_KEY_PATH or data/wallet.pem.",
            show_default=False,
        ),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing key file.")
    ] = False,
) -> None:
    """Generate a new wallet key."""
    from rwa_options.disclosure.wallet import account_address, generate_wallet_key

    target = default_wallet_path(path)
    try:
        private_key = generate_wallet_key(target, overwrite=force)
    except FileExistsError:
        console.print(f"[red]Error:[/red] Wallet key already exists: {escape(str(target))}")
        console.print("[dim]Use --force to replace it.[/dim]")
        raise typer.Exit(1) from None
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    console.print(f"[green]✓[/green] Wallet key written to {escape(str(target))}")
    console.print(f"Account: [cyan]{account_address(private_key.public_key())}[/cyan]")


@app.command("address")
def wallet_address() -> None:
    """Show the account identifier of the configured wallet."""
    wallet = load_wallet(purpose="Showing the wallet address", assume_yes=True)
    console.print(wallet.address)
