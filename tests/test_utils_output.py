"""Tests for utils/output.py: JSON/CSV/table output routing."""
import json
from datetime import datetime, timezone

from trip_journal.models.media import Media
from trip_journal.models.trips import Trip
from trip_journal.utils.output import OutputFormat, print_csv, print_json, print_output, to_rows


def _trip():
    return Trip(
        id=1,
        name="Lisbon",
        start_date=datetime(2026, 5, 1, tzinfo=timezone.utc),
        end_date=datetime(2026, 5, 8, tzinfo=timezone.utc),
    )


# ── to_rows ──────────────────────────────────────────────────────────

def test_to_rows_single_model():
    rows = to_rows(Media(id=1, url="u"))
    assert rows == [{"id": 1, "url": "u", "caption": None}]


def test_to_rows_models_are_json_compatible():
    rows = to_rows([_trip()])
    assert rows[0]["start_date"] == "2026-05-01T00:00:00Z"


def test_to_rows_dicts_pass_through():
    assert to_rows({"a": 1}) == [{"a": 1}]


# ── print_json ───────────────────────────────────────────────────────

def test_print_json_list(capsys):
    print_json([{"id": "1"}, {"id": "2"}])
    assert len(json.loads(capsys.readouterr().out)) == 2


def test_print_json_empty(capsys):
    print_json([])
    assert json.loads(capsys.readouterr().out) == []


# ── print_csv ────────────────────────────────────────────────────────

def test_print_csv_basic(capsys):
    print_csv([{"name": "a", "val": "1"}, {"name": "b", "val": "2"}])
    lines = [line.strip() for line in capsys.readouterr().out.strip().splitlines()]
    assert lines[0] == "name,val"
    assert len(lines) == 3


def test_print_csv_selected_columns(capsys):
    print_csv([{"name": "a", "val": "1", "extra": "x"}], columns=["name", "val"])
    assert "extra" not in capsys.readouterr().out


def test_print_csv_lists_become_counts(capsys):
    print_csv([{"id": 1, "events": [{}, {}]}])
    assert capsys.readouterr().out.strip().splitlines()[1].strip() == "1,2"


def test_print_csv_empty(capsys):
    print_csv([])
    assert capsys.readouterr().out == ""


# ── print_output routing ────────────────────────────────────────────

def test_output_routes_to_json(capsys):
    print_output([{"x": 1}], fmt=OutputFormat.JSON)
    assert json.loads(capsys.readouterr().out) == [{"x": 1}]


def test_output_single_model_json_is_object(capsys):
    print_output(_trip(), fmt=OutputFormat.JSON)
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Lisbon"
    assert data["events"] == []


def test_output_routes_to_csv(capsys):
    print_output([_trip()], fmt=OutputFormat.CSV, columns=["id", "name"])
    assert capsys.readouterr().out.splitlines()[1].strip() == "1,Lisbon"


def test_output_table_goes_to_stderr(capsys):
    print_output([{"x": 1}], fmt=OutputFormat.TABLE)
    assert capsys.readouterr().out == ""
