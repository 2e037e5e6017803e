"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel

from trip_journal.utils.dates import JournalDate, utc_now

# Lifetime assigned to every token the server issues; server-side expiry is ignored.
DEFAULT_VALIDITY_WINDOW = timedelta(hours=1)


class Token(BaseModel):
    """Bearer credential returned by the register and token endpoints."""
    access_token: str
    token_type: str = "bearer"
    expiration_date: JournalDate | None = None

    @staticmethod
    def default_expiration_date(now: datetime | None = None) -> datetime:
        return (now or utc_now()) + DEFAULT_VALIDITY_WINDOW


class LoginRequest(BaseModel):
    """JSON body of the register endpoint."""
    username: str
    password: str


class TokenStatus(BaseModel):
    """Current state of the held token."""
    authenticated: bool
    session_expired: bool = False
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
