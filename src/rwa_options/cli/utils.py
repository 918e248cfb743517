"""Shared utilities for CLI commands (console output, async helpers, error rendering)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, NoReturn, TypeVar

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from rwa_options.exceptions import (
    AuthorizationError,
    DecodeError,
    NetworkError,
    ParseError,
    PositionNotFoundError,
    RwaOptionsError,
    UserRejected,
)

if TYPE_CHECKING:
    from collections.abc import Coroutine

console = Console()
logger = structlog.get_logger()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_with_error(action: str, error: RwaOptionsError) -> NoReturn:
    """Print a user-facing message for `error` and exit with code 1."""
    message = escape(str(error))
    if isinstance(error, UserRejected):
        console.print(f"[yellow]{action} cancelled:[/yellow] signature rejected by user.")
    elif isinstance(error, NetworkError):
        logger.error("Ledger call failed", action=action, status_code=error.status_code)
        console.print(f"[red]{action} failed:[/red] {message}")
        console.print("[dim]The ledger may be unreachable; try again.[/dim]")
    elif isinstance(error, AuthorizationError):
        console.print(f"[red]Not allowed:[/red] {message}")
    elif isinstance(error, PositionNotFoundError):
        console.print(f"[red]Error:[/red] {message}")
    elif isinstance(error, DecodeError):
        console.print(f"[red]Undecodable field:[/red] {escape(error.reason)}")
    elif isinstance(error, ParseError):
        console.print(f"[red]Malformed record:[/red] {message}")
    else:
        console.print(f"[red]{action} failed:[/red] {message}")
    raise typer.Exit(1)
