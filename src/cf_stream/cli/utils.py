"""Shared utilities for CLI commands (console output, async helpers, error exits)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from collections.abc import Coroutine

    import httpx

    from cf_stream.api.exceptions import CloudflareAPIError, CloudflareError

console = Console()

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


def exit_api_error(error: CloudflareAPIError) -> NoReturn:
    """Print an API error and exit with code 2."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(2) from None


def exit_error(error: CloudflareError | ValueError | httpx.HTTPError) -> NoReturn:
    """Print a client-side error (bad input, bad response, transport failure) and exit 1."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1) from None
