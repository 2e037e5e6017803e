"""CLI commands for media management."""

from __future__ import annotations

import asyncio
import base64
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, AsyncIterator

import typer
from rich.console import Console

from trip_journal.client import open_client
from trip_journal.models.media import MediaCreate, MediaUpdate
from trip_journal.services.media import MediaService
from trip_journal.utils.errors import NetworkError, handle_error
from trip_journal.utils.output import OutputFormat, print_output

console = Console(stderr=True)
app = typer.Typer(name="media", help="Manage photos and other media attached to events.")

COLUMNS = ["id", "url", "caption"]

Server = Annotated[str | None, typer.Option("--server", "-s", help="Server profile from config/servers.yaml")]
Output = Annotated[OutputFormat, typer.Option("--output", "-o", help="Output format")]
Verbose = Annotated[bool, typer.Option("--verbose", "-v")]
Caption = Annotated[str | None, typer.Option("--caption", "-c", help="Caption")]


@asynccontextmanager
async def _build_service(server: str | None, verbose: bool = False) -> AsyncIterator[MediaService]:
    async with open_client(server, verbose) as client:
        yield MediaService(client)


@app.command("list")
def list_media(
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """List all media."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.list()

    try:
        items = asyncio.run(run())
        console.print(f"[dim]Found {len(items)} media items[/dim]")
        print_output(items, output, columns=COLUMNS, title="Media")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("get")
def get_media(
    media_id: Annotated[int, typer.Argument(help="Media ID")],
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Show a single media item."""
    async def run():
        async with _build_service(server, verbose) as service:
            return await service.get(media_id)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title=f"Media {media_id}")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("create")
def create_media(
    event_id: Annotated[int, typer.Option("--event-id", "-e", help="Event the media belongs to")],
    file: Annotated[Path, typer.Option("--file", "-f", exists=True, dir_okay=False, readable=True, help="File to upload")],
    caption: Caption = None,
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Upload a file and attach it to an event."""
    request = MediaCreate(
        event_id=event_id,
        base64_data=base64.b64encode(file.read_bytes()).decode("ascii"),
        caption=caption,
    )

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.create(request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Media Uploaded")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("update")
def update_media(
    media_id: Annotated[int, typer.Argument(help="Media ID")],
    caption: Caption = None,
    server: Server = None,
    output: Output = OutputFormat.TABLE,
    verbose: Verbose = False,
) -> None:
    """Change a media item's caption."""
    request = MediaUpdate(caption=caption)

    async def run():
        async with _build_service(server, verbose) as service:
            return await service.update(media_id, request)

    try:
        print_output(asyncio.run(run()), output, columns=COLUMNS, title="Media Updated")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)


@app.command("delete")
def delete_media(
    media_id: Annotated[int, typer.Argument(help="Media ID")],
    server: Server = None,
    verbose: Verbose = False,
) -> None:
    """Delete a media item."""
    async def run():
        async with _build_service(server, verbose) as service:
            await service.delete(media_id)

    try:
        asyncio.run(run())
        console.print(f"[green]Deleted media {media_id}.[/green]")
    except (NetworkError, ValueError) as e:
        handle_error(e)
        raise typer.Exit(1)
