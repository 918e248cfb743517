"""Typer CLI commands for option positions (list, show, create, exercise, disclose)."""

from __future__ import annotations

import json
import time
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.markup import escape
from rich.table import Table

from rwa_options.catalog import DisclosureField, summarize
from rwa_options.cli._helpers import load_wallet, open_catalog
from rwa_options.cli.utils import console, exit_with_error, run_async
from rwa_options.exceptions import RwaOptionsError
from rwa_options.positions.codec import format_number
from rwa_options.positions.lifecycle import display_status
from rwa_options.positions.models import Asset, PositionType

if TYPE_CHECKING:
    from rwa_options.positions.models import Position

app = typer.Typer(help="Create, list and act on option positions.")

CIPHERTEXT_PREVIEW = 30


def _format_expiry(expiry: int) -> str:
    return datetime.fromtimestamp(expiry, tz=UTC).strftime("%Y-%m-%d %H:%M UTC")


def _position_json(position: Position, now: float) -> dict[str, Any]:
    data = position.model_dump(mode="json")
    data["display_status"] = display_status(position, now).value
    return data


@app.command("list")
def positions_list(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List all positions, latest expiry first."""

    async def _list() -> list[Position]:
        try:
            async with open_catalog() as catalog:
                return await catalog.list()
        except RwaOptionsError as e:
            exit_with_error("Refresh", e)

    positions = run_async(_list())
    now = time.time()

    if output_json:
        typer.echo(json.dumps([_position_json(p, now) for p in positions], indent=2))
        return

    if not positions:
        console.print("[yellow]No option positions found[/yellow]")
        console.print("[dim]Tip: create one with `rwa-options positions create`.[/dim]")
        return

    table = Table(title="Option Positions", show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Asset")
    table.add_column("Type", style="magenta")
    table.add_column("Strike", justify="right")
    table.add_column("Expiry")
    table.add_column("Status")

    for position in positions:
        table.add_row(
            position.id,
            position.asset.value,
            position.position_type.value.upper(),
            position.strike_price,
            _format_expiry(position.expiry),
            display_status(position, now).value,
        )

    console.print(table)
    summary = summarize(positions)
    console.print(f"\nTotal: {summary.total}  Active: {summary.active}")


@app.command("show")
def positions_show(
    position_id: Annotated[str, typer.Argument(help="Position id.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show one position (obscured fields stay obscured)."""

    async def _show() -> Position:
        try:
            async with open_catalog() as catalog:
                return await catalog.get(position_id)
        except RwaOptionsError as e:
            exit_with_error("Lookup", e)

    position = run_async(_show())
    now = time.time()

    if output_json:
        typer.echo(json.dumps(_position_json(position, now), indent=2))
        return

    table = Table(title="Option Details", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("ID", position.id)
    table.add_row("Asset", position.asset.value)
    table.add_row("Type", position.position_type.value.upper())
    table.add_row("Strike Price", position.strike_price)
    table.add_row("Expiry", _format_expiry(position.expiry))
    table.add_row("Status", display_status(position, now).value.upper())
    table.add_row("Owner", position.owner)
    table.add_row("Premium", f"{position.premium[:CIPHERTEXT_PREVIEW]}...")
    table.add_row("Amount", f"{position.amount[:CIPHERTEXT_PREVIEW]}...")
    console.print(table)


@app.command("create")
def positions_create(
    asset: Annotated[Asset, typer.Option("--asset", "-a", help="Underlying asset.")] = Asset.USDT,
    position_type: Annotated[
        PositionType, typer.Option("--type", "-t", help="Option type.")
    ] = PositionType.CALL,
    strike: Annotated[str, typer.Option("--strike", "-s", help="Strike price.")] = "0",
    expiry_days: Annotated[
        int, typer.Option("--expiry-days", "-d", help="Days until expiry (1-365).")
    ] = 30,
    premium: Annotated[float, typer.Option("--premium", help="Premium (stored obscured).")] = 0.0,
    amount: Annotated[float, typer.Option("--amount", help="Amount (stored obscured).")] = 0.0,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Create a new option position."""
    from pydantic import ValidationError

    from rwa_options.positions.models import NewPosition

    try:
        request = NewPosition(
            asset=asset,
            position_type=position_type,
            strike_price=Decimal(strike),
            expiry_days=expiry_days,
            premium=premium,
            amount=amount,
        )
    except InvalidOperation:
        console.print(f"[red]Error:[/red] Invalid strike price: {escape(strike)}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            console.print(f"[red]Error:[/red] {field}: {escape(err['msg'])}")
        raise typer.Exit(1) from None

    wallet = load_wallet(purpose="Creating a position", assume_yes=True)

    async def _create() -> Position:
        try:
            async with open_catalog(wallet) as catalog:
                return await catalog.create(request)
        except RwaOptionsError as e:
            exit_with_error("Submission", e)

    position = run_async(_create())

    if output_json:
        typer.echo(json.dumps(_position_json(position, time.time()), indent=2))
        return
    console.print("[green]✓[/green] Encrypted option created!")
    console.print(f"ID: [cyan]{position.id}[/cyan]")


@app.command("exercise")
def positions_exercise(
    position_id: Annotated[str, typer.Argument(help="Position id.")],
) -> None:
    """Exercise an active position you own."""
    wallet = load_wallet(purpose="Exercising a position", assume_yes=True)

    async def _exercise() -> None:
        try:
            async with open_catalog(wallet) as catalog:
                await catalog.exercise(position_id)
        except RwaOptionsError as e:
            exit_with_error("Exercise", e)

    run_async(_exercise())
    console.print(f"[green]✓[/green] Option {escape(position_id)} exercised successfully!")


@app.command("disclose")
def positions_disclose(
    position_id: Annotated[str, typer.Argument(help="Position id.")],
    field: Annotated[DisclosureField, typer.Argument(help="Obscured field to reveal.")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Sign without prompting.")
    ] = False,
) -> None:
    """Reveal premium or amount after signing the session disclosure message."""
    wallet = load_wallet(purpose="Disclosure", assume_yes=yes)

    async def _disclose() -> float:
        try:
            async with open_catalog(wallet) as catalog:
                position = await catalog.get(position_id)
                return await catalog.disclose(position, field)
        except RwaOptionsError as e:
            exit_with_error("Disclosure", e)

    value = run_async(_disclose())
    console.print(f"Decrypted {field.value.capitalize()}: [green]{format_number(value)}[/green]")
