"""Event management service."""

from __future__ import annotations

from trip_journal.client import JournalClient
from trip_journal.endpoints import Route
from trip_journal.models.events import Event, EventCreate, EventUpdate


class EventService:
    """Service for event CRUD operations."""

    def __init__(self, client: JournalClient) -> None:
        self._client = client

    async def list(self) -> list[Event]:
        request = await self._client.build_request("GET", Route.EVENTS)
        return await self._client.execute(request, list[Event])

    async def get(self, event_id: int) -> Event:
        request = await self._client.build_request("GET", Route.EVENT, event_id)
        return await self._client.execute(request, Event)

    async def create(self, event: EventCreate) -> Event:
        """Add an event to the trip named by ``event.trip_id``."""
        request = await self._client.build_request("POST", Route.EVENTS, json_body=event)
        return await self._client.execute(request, Event)

    async def update(self, event_id: int, event: EventUpdate) -> Event:
        request = await self._client.build_request("PUT", Route.EVENT, event_id, json_body=event)
        return await self._client.execute(request, Event)

    async def delete(self, event_id: int) -> None:
        request = await self._client.build_request("DELETE", Route.EVENT, event_id)
        await self._client.execute_void(request)
