"""Bearer token lifecycle for the Trip Journal API.

Holds the current token, persists it to the credential store, detects
expiry, and publishes the authentication status.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable

from trip_journal.models.auth import Token, TokenStatus
from trip_journal.store import CredentialStore
from trip_journal.utils.dates import utc_now
from trip_journal.utils.errors import StoreError
from trip_journal.utils.signal import AuthStatusSignal

logger = logging.getLogger(__name__)


def is_token_expired(token: Token, now: datetime) -> bool:
    """A token without an expiration date never expires."""
    if token.expiration_date is None:
        return False
    return token.expiration_date <= now


class TokenManager:
    """Owns the current token.

    Every read-modify-write of the token, and the store write that follows
    it, happens under one lock so the store and the published status never
    fall behind the latest completed mutation.
    """

    def __init__(
        self,
        store: CredentialStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._clock = clock
        self._token: Token | None = None
        self._session_expired = False
        self._lock = asyncio.Lock()
        self._status = AuthStatusSignal(False)

    @property
    def token(self) -> Token | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def session_expired(self) -> bool:
        """True once a held or stored token has been found expired."""
        return self._session_expired

    def now(self) -> datetime:
        return self._clock()

    def observe(self) -> AuthStatusSignal:
        """Authentication status signal; subscribers get the current value first."""
        return self._status

    async def initialize(self) -> None:
        """Load the token saved by a previous launch.

        An expired stored token is dropped from memory but left in the store.
        """
        async with self._lock:
            try:
                saved = await asyncio.to_thread(self._store.get)
            except StoreError as e:
                logger.warning(f"Could not load saved token: {e}")
                saved = None

            if saved is None:
                self._token = None
            elif is_token_expired(saved, self._clock()):
                logger.info(f"Saved token expired at {saved.expiration_date}; login required")
                self._session_expired = True
                self._token = None
            else:
                self._token = saved

            self._status.publish(self._token is not None)

    async def set_token(self, token: Token | None) -> None:
        """Replace the held token and sync the credential store.

        Runs to completion even if the caller is cancelled.
        """
        await asyncio.shield(self._set_token(token))

    async def log_out(self) -> None:
        await self.set_token(None)

    async def check_expiration(self) -> None:
        """Clear the held token if it has expired. No-op otherwise."""
        await asyncio.shield(self._check_expiration())

    async def _check_expiration(self) -> None:
        async with self._lock:
            if self._token is not None and is_token_expired(self._token, self._clock()):
                logger.info(f"Token expired at {self._token.expiration_date}")
                self._session_expired = True
                await self._apply(None)

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        if self._token is None:
            return TokenStatus(authenticated=False, session_expired=self._session_expired)

        expires_at = self._token.expiration_date
        seconds_remaining = None
        if expires_at is not None:
            seconds_remaining = max(0, int((expires_at - self._clock()).total_seconds()))

        return TokenStatus(
            authenticated=True,
            session_expired=self._session_expired,
            expires_at=expires_at,
            seconds_remaining=seconds_remaining,
        )

    async def _set_token(self, token: Token | None) -> None:
        async with self._lock:
            await self._apply(token)

    async def _apply(self, token: Token | None) -> None:
        # Caller holds the lock and runs shielded.
        self._token = token
        try:
            if token is not None:
                await asyncio.to_thread(self._store.save, token)
            else:
                await asyncio.to_thread(self._store.delete)
        except StoreError as e:
            logger.warning(f"Credential store out of sync: {e}")
        self._status.publish(token is not None)
