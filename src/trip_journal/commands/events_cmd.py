"""CLI commands for event management."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Annotated, AsyncIterator

import typer
from rich.console import Console

from trip_journal.client import open_client
from trip_journal.models.events import EventCreate, EventUpdate, Location
from trip_journal.services.events import EventService
from trip_journal.utils.dates import ensure_utc
from trip_journal.utils.errors import NetworkError, handle_error
from trip_journal.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="events", help="Manage trip events.")

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]
COLUMNS = ["id", "name", "date", "note", "transition_from_previous", "media"]

Server = Annotated[str | None, typer.Option("--server", "-s", help="Server profile from config/servers.yaml")]
Output = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
Verbose = Annotated[bool, typer.Option("--verbose", "-v")]
Note = Annotated[str | None, typer.Option("--note", help="Free-form note")]
Transition = Annotated[str | None, typer.Option("--transition", help="How you got here from the previous event")]
Latitude = Annotated[float | None, typer.Option("--lat", help="Latitude")]
Longitude = Annotated[float | None, typer.Option("--lon", help="Longitude")]
Address = Annotated[str | None, typer.Option("--address", help="Street address")]


@asynccontextmanager
async def _build_service(server: str | None, verbose: bool = False) -> AsyncIterator[EventService]:
    async with open_client(server, verbose) as client:
        yield EventService(client)


def _location(lat: float | None, lon: float | None, address: str | None) -> Location | None:
    if lat is None and lon is None:
        return None
    if lat is None or lon is None:
        raise typer.BadParameter("--lat and --lon must be given together")
    return Location(latitude=lat, longitude=lon, address=address)


@app.command("list")
def list_events(
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """List all events."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.list()

    try:
        events = asyncio.run(run())
        console.print(f"[dim]Found {len(events)} events[/dim]")
        print_output(events, output, columns=COLUMNS, title="Events")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("get")
def get_event(
    event_id: Annotated[int, typer.Argument(help="Event ID")],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Show a single event."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.get(event_id)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title=f"Event {event_id}")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("create")
def create_event(
    trip_id: Annotated[int, typer.Option("--trip-id", "-t", help="Trip the event belongs to")],
    name: Annotated[str, typer.Option("--name", "-n", help="Event name")],
    date: Annotated[datetime, typer.Option("--date", "-d", formats=DATE_FORMATS, help="When it happened")],
    note: Note = None,
    transition: Transition = None,
    lat: Latitude = None,
    lon: Longitude = None,
    address: Address = None,
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Add an event to a trip."""
    request = EventCreate(
        trip_id=trip_id,
        name=name,
        note=note,
        date=ensure_utc(date),
        location=_location(lat, lon, address),
        transition_from_previous=transition,
    )

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.create(request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Event Created")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("update")
def update_event(
    event_id: Annotated[int, typer.Argument(help="Event ID")],
    name: Annotated[str, typer.Option("--name", "-n", help="Event name")],
    date: Annotated[datetime, typer.Option("--date", "-d", formats=DATE_FORMATS, help="When it happened")],
    note: Note = None,
    transition: Transition = None,
    lat: Latitude = None,
    lon: Longitude = None,
    address: Address = None,
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Replace an event's details."""
    request = EventUpdate(
        name=name,
        note=note,
        date=ensure_utc(date),
        location=_location(lat, lon, address),
        transition_from_previous=transition,
    )

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.update(event_id, request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Event Updated")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("delete")
def delete_event(
    event_id: Annotated[int, typer.Argument(help="Event ID")],
    server: Server = None,
    verbose: Verbose = False,
) -> None:
    """Delete an event."""
    async def run():
        async with _build_service(server, verbose) as service:
            await service.delete(event_id)

    try:
        asyncio.run(run())
        console.print(f"[green]Deleted event {event_id}.[/green]")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)
