"""CLI commands for trip management."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Annotated, AsyncIterator

import typer
from rich.console import Console

from trip_journal.client import open_client
from trip_journal.models.trips import TripCreate, TripUpdate
from trip_journal.services.trips import TripService
from trip_journal.utils.dates import ensure_utc
from trip_journal.utils.errors import NetworkError, handle_error
from trip_journal.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="trips", help="Manage trips.")

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]
COLUMNS = ["id", "name", "start_date", "end_date", "events"]

Server = Annotated[str | None, typer.Option("--server", "-s", help="Server profile from config/servers.yaml")]
Output = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
Verbose = Annotated[bool, typer.Option("--verbose", "-v")]


@asynccontextmanager
async def _build_service(server: str | None, verbose: bool = False) -> AsyncIterator[TripService]:
    async with open_client(server, verbose) as client:
        yield TripService(client)


@app.command("list")
def list_trips(
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """List all trips."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.list()

    try:
        trips = asyncio.run(run())
        console.print(f"[dim]Found {len(trips)} trips[/dim]")
        print_output(trips, output, columns=COLUMNS, title="Trips")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("get")
def get_trip(
    trip_id: Annotated[int, typer.Argument(help="Trip ID")],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Show a single trip."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.get(trip_id)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title=f"Trip {trip_id}")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("create")
def create_trip(
    name: Annotated[str, typer.Option("--name", "-n", help="Trip name")],
    start_date: Annotated[datetime, typer.Option("--start", formats=DATE_FORMATS, help="Start date")],
    end_date: Annotated[datetime, typer.Option("--end", formats=DATE_FORMATS, help="End date")],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Create a new trip."""
    request = TripCreate(name=name, start_date=ensure_utc(start_date), end_date=ensure_utc(end_date))

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.create(request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Trip Created")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("update")
def update_trip(
    trip_id: Annotated[int, typer.Argument(help="Trip ID")],
    name: Annotated[str, typer.Option("--name", "-n", help="Trip name")],
    start_date: Annotated[datetime, typer.Option("--start", formats=DATE_FORMATS, help="Start date")],
    end_date: Annotated[datetime, typer.Option("--end", formats=DATE_FORMATS, help="End date")],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Replace a trip's name and dates."""
    request = TripUpdate(name=name, start_date=ensure_utc(start_date), end_date=ensure_utc(end_date))

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.update(trip_id, request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Trip Updated")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("delete")
def delete_trip(
    trip_id: Annotated[int, typer.Argument(help="Trip ID")],
    server: Server = None,
    verbose: Verbose = False,
) -> None:
    """Delete a trip."""
    async def run():
        async with _build_service(server, verbose) as service:
            await service.delete(trip_id)

    try:
        asyncio.run(run())
        console.print(f"[green]Deleted trip {trip_id}.[/green]")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)
