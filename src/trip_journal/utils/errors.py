"""Error types for the journal client and structured CLI error output."""

from __future__ import annotations

import json
import sys

from rich.console import Console

console = Console(stderr=True)


class NetworkError(RuntimeError):
    """Base class for errors raised by the request pipeline."""

    code = "NETWORK_ERROR"


class InvalidTarget(NetworkError):
    """The endpoint could not be composed into a well-formed URL."""

    code = "INVALID_TARGET"


class BadResponse(NetworkError):
    """Transport failure, timeout, or a status code that was not accepted."""

    code = "BAD_RESPONSE"


class FailedToDecodeResponse(NetworkError):
    """The response body did not match the expected shape."""

    code = "DECODE_ERROR"


class StoreError(RuntimeError):
    """The credential store could not save, load, or delete a token."""

    code = "STORE_ERROR"


# Actionable hints keyed by error type
_ERROR_HINTS: list[tuple[type[Exception], str]] = [
    (InvalidTarget, "Check the server base_url in config/servers.yaml"),
    (BadResponse, "Request rejected or server unreachable. Check `trip-journal auth status` and log in again if needed"),
    (FailedToDecodeResponse, "Unexpected response body, check the server version"),
    (StoreError, "Credential file unreadable, check TRIP_JOURNAL_CREDENTIAL_PATH"),
]


def _get_hint(error: Exception) -> str | None:
    """Match an error to an actionable hint."""
    for error_type, hint in _ERROR_HINTS:
        if isinstance(error, error_type):
            return hint
    return None


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for scripting:
    {"error": true, "code": "BAD_RESPONSE", "message": "...", "hint": "..."}

    Also prints a human-readable error to stderr.
    """
    message = str(error) or type(error).__name__
    hint = _get_hint(error)
    code = getattr(error, "code", "RUNTIME_ERROR")

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
