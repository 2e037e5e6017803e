"""Trip data models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trip_journal.models.events import Event
from trip_journal.utils.dates import JournalDate


class Trip(BaseModel):
    id: int
    name: str
    start_date: JournalDate
    end_date: JournalDate
    events: list[Event] = Field(default_factory=list)


class TripCreate(BaseModel):
    name: str
    start_date: JournalDate
    end_date: JournalDate


class TripUpdate(BaseModel):
    name: str
    start_date: JournalDate
    end_date: JournalDate
