"""Media data models."""

from __future__ import annotations

from pydantic import BaseModel


class Media(BaseModel):
    id: int
    url: str
    caption: str | None = None


class MediaCreate(BaseModel):
    event_id: int
    base64_data: str
    caption: str | None = None


class MediaUpdate(BaseModel):
    caption: str | None = None
