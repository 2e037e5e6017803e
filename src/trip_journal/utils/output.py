"""Output formatting for CLI results."""

from __future__ import annotations

import csv
import io
import json
import sys
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)

Rows = Sequence[BaseModel | dict[str, Any]] | BaseModel | dict[str, Any]


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def to_rows(data: Rows) -> list[dict[str, Any]]:
    """Normalize models and dicts into a list of JSON-compatible dicts."""
    if isinstance(data, (BaseModel, dict)):
        data = [data]
    return [
        item.model_dump(mode="json") if isinstance(item, BaseModel) else item
        for item in data
    ]


def print_output(
    data: Rows,
    fmt: OutputFormat = OutputFormat.TABLE,
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print data in the requested format.

    Args:
        data: Models or dicts to display (one or many).
        fmt: Output format (table, json, csv).
        columns: Which columns to show in table/csv mode. None = all.
        title: Optional title for table output.
    """
    if fmt == OutputFormat.JSON:
        rows = to_rows(data)
        print_json(rows[0] if isinstance(data, (BaseModel, dict)) else rows)
    elif fmt == OutputFormat.CSV:
        print_csv(to_rows(data), columns)
    else:
        print_table(to_rows(data), columns, title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def print_table(
    rows: list[dict[str, Any]],
    columns: list[str] | None = None,
    title: str | None = None,
) -> None:
    """Print rows as a Rich table."""
    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    if columns is None:
        columns = list(rows[0].keys())

    table = Table(title=title, show_lines=False)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in rows:
        table.add_row(*[_cell(row.get(col, "")) for col in columns])

    console.print(table)


def print_csv(rows: list[dict[str, Any]], columns: list[str] | None = None) -> None:
    """Print rows as CSV to stdout."""
    if not rows:
        return

    if columns is None:
        columns = list(rows[0].keys())

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: _cell(row.get(k, "")) for k in columns})
    sys.stdout.write(buf.getvalue())


def _cell(value: Any) -> str:
    # Nested lists (events, media) are summarized by count.
    if isinstance(value, list):
        return str(len(value))
    if value is None:
        return ""
    return str(value)
