"""Trip Journal CLI: entry point.

Command-line client for the Trip Journal API: account login and
trip, event and media management.
"""

from __future__ import annotations

import logging

import typer

from trip_journal.commands.auth_cmd import app as auth_app
from trip_journal.commands.trips_cmd import app as trips_app
from trip_journal.commands.events_cmd import app as events_app
from trip_journal.commands.media_cmd import app as media_app

app = typer.Typer(
    name="trip-journal",
    help="CLI client for the Trip Journal API.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(auth_app, name="auth")
app.add_typer(trips_app, name="trips")
app.add_typer(events_app, name="events")
app.add_typer(media_app, name="media")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Trip Journal CLI: log in, then manage trips, events and media."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


if __name__ == "__main__":
    app()
