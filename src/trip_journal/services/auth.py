"""Account registration, login and logout."""

from __future__ import annotations

from trip_journal.client import JournalClient
from trip_journal.endpoints import Route
from trip_journal.models.auth import LoginRequest, Token


class AuthService:
    """Service for obtaining and discarding the bearer token."""

    def __init__(self, client: JournalClient) -> None:
        self._client = client

    async def register(self, username: str, password: str) -> Token:
        """Create an account; the returned token is held and saved."""
        request = await self._client.build_request(
            "POST", Route.REGISTER,
            json_body=LoginRequest(username=username, password=password),
            authenticated=False,
        )
        return await self._client.execute(request, Token)

    async def log_in(self, username: str, password: str) -> Token:
        """Exchange credentials for a token via the OAuth2 password form."""
        request = await self._client.build_request(
            "POST", Route.LOGIN,
            form={"grant_type": "", "username": username, "password": password},
            authenticated=False,
        )
        return await self._client.execute(request, Token)

    async def log_out(self) -> None:
        await self._client.tokens.log_out()
