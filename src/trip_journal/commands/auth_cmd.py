"""CLI commands for authentication management."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console

from trip_journal.client import open_client
from trip_journal.services.auth import AuthService
from trip_journal.utils.errors import NetworkError, handle_error
from trip_journal.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="auth", help="Register, log in and manage the cached token.")

Server = Annotated[str | None, typer.Option("--server", "-s", help="Server profile from config/servers.yaml")]
Output = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
Verbose = Annotated[bool, typer.Option("--verbose", "-v")]


async def _register(server: str | None, username: str, password: str, verbose: bool) -> dict:
    async with open_client(server, verbose) as client:
        await AuthService(client).register(username, password)
        return client.tokens.get_status().model_dump(mode="json")


async def _login(server: str | None, username: str, password: str, verbose: bool) -> dict:
    async with open_client(server, verbose) as client:
        await AuthService(client).log_in(username, password)
        return client.tokens.get_status().model_dump(mode="json")


async def _logout(server: str | None) -> None:
    async with open_client(server) as client:
        await AuthService(client).log_out()


async def _status(server: str | None) -> dict:
    async with open_client(server) as client:
        await client.tokens.check_expiration()
        return client.tokens.get_status().model_dump(mode="json")


@app.command()
def register(
    username: Annotated[str, typer.Option("--username", "-u", prompt=True)],
    password: Annotated[str, typer.Option("--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True)],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Create an account and cache its token."""
    try:
        console.print(f"Registering [bold]{username}[/bold]...", style="yellow")
        result = asyncio.run(_register(server, username, password, verbose))
        print_output(result, output, title="Registered")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def login(
    username: Annotated[str, typer.Option("--username", "-u", prompt=True)],
    password: Annotated[str, typer.Option("--password", "-p", prompt=True, hide_input=True)],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Log in and cache the token."""
    try:
        console.print(f"Logging in as [bold]{username}[/bold]...", style="yellow")
        result = asyncio.run(_login(server, username, password, verbose))
        print_output(result, output, title="Authentication")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def logout(server: Server = None) -> None:
    """Discard the cached token."""
    try:
        asyncio.run(_logout(server))
        console.print("[green]Logged out.[/green]")
    except ValueError as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command()
def status(
    server: Server = None,
    output: Output = OutputFormat.TABLE,
) -> None:
    """Show current token status."""
    try:
        result = asyncio.run(_status(server))
    except ValueError as e:
        handle_error(e)
        raise typer.Exit(1)

    if result["expires_at"] is None:
        result["expires_at"] = "N/A"
    print_output(result, output, title="Token Status")
