"""Event data models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from trip_journal.models.media import Media
from trip_journal.utils.dates import JournalDate


class Location(BaseModel):
    latitude: float
    longitude: float
    address: str | None = None


class Event(BaseModel):
    id: int
    name: str
    note: str | None = None
    date: JournalDate
    location: Location | None = None
    transition_from_previous: str | None = None
    media: list[Media] = Field(default_factory=list)


class EventCreate(BaseModel):
    trip_id: int
    name: str
    note: str | None = None
    date: JournalDate
    location: Location | None = None
    transition_from_previous: str | None = None


class EventUpdate(BaseModel):
    name: str
    note: str | None = None
    date: JournalDate
    location: Location | None = None
    transition_from_previous: str | None = None
