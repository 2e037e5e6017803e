"""Tests for utils/dates.py: ISO-8601 fallback parsing."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ValidationError

from trip_journal.utils.dates import JournalDate, ensure_utc, parse_iso8601


class _Stamped(BaseModel):
    at: JournalDate


# ── parse_iso8601 ────────────────────────────────────────────────────

def test_parse_fractional_seconds():
    assert parse_iso8601("2026-05-01T09:00:00.123Z") == datetime(2026, 5, 1, 9, 0, 0, 123000, tzinfo=timezone.utc)


def test_parse_microseconds():
    assert parse_iso8601("2026-05-01T09:00:00.123456+00:00").microsecond == 123456


def test_parse_without_fractional_seconds():
    assert parse_iso8601("2026-05-01T09:00:00Z") == datetime(2026, 5, 1, 9, 0, 0, tzinfo=timezone.utc)


def test_parse_offset():
    parsed = parse_iso8601("2026-05-01T11:00:00+02:00")
    assert parsed == datetime(2026, 5, 1, 9, 0, 0, tzinfo=timezone.utc)
    assert parsed.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize("value", [
    "May 1st 2026",
    "2026-05-01",
    "2026-05-01T09:00:00",
    "1714554000",
    "",
])
def test_parse_rejects(value):
    with pytest.raises(ValueError, match="Cannot decode date string"):
        parse_iso8601(value)


# ── JournalDate ──────────────────────────────────────────────────────

def test_journal_date_from_string():
    assert _Stamped.model_validate({"at": "2026-05-01T09:00:00Z"}).at.year == 2026


def test_journal_date_accepts_datetime():
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    assert _Stamped(at=now).at == now


def test_journal_date_naive_datetime_becomes_utc():
    stamped = _Stamped(at=datetime(2026, 1, 1, 9, 0))
    assert stamped.at == datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    assert stamped.at.tzinfo is timezone.utc


def test_journal_date_rejects_number():
    with pytest.raises(ValidationError):
        _Stamped.model_validate({"at": 1714554000})


def test_journal_date_rejects_naive_string():
    with pytest.raises(ValidationError):
        _Stamped.model_validate_json('{"at": "2026-05-01T09:00:00"}')


# ── ensure_utc ───────────────────────────────────────────────────────

def test_ensure_utc_naive():
    assert ensure_utc(datetime(2026, 5, 1)).tzinfo == timezone.utc


def test_ensure_utc_keeps_aware():
    aware = datetime(2026, 5, 1, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(aware) is aware
