"""Trip management service."""

from __future__ import annotations

from trip_journal.client import JournalClient
from trip_journal.endpoints import Route
from trip_journal.models.trips import Trip, TripCreate, TripUpdate


class TripService:
    """Service for trip CRUD operations."""

    def __init__(self, client: JournalClient) -> None:
        self._client = client

    async def list(self) -> list[Trip]:
        """List the user's trips with their events."""
        request = await self._client.build_request("GET", Route.TRIPS)
        return await self._client.execute(request, list[Trip])

    async def get(self, trip_id: int) -> Trip:
        request = await self._client.build_request("GET", Route.TRIP, trip_id)
        return await self._client.execute(request, Trip)

    async def create(self, trip: TripCreate) -> Trip:
        request = await self._client.build_request("POST", Route.TRIPS, json_body=trip)
        return await self._client.execute(request, Trip)

    async def update(self, trip_id: int, trip: TripUpdate) -> Trip:
        request = await self._client.build_request("PUT", Route.TRIP, trip_id, json_body=trip)
        return await self._client.execute(request, Trip)

    async def delete(self, trip_id: int) -> None:
        """Delete a trip and everything in it."""
        request = await self._client.build_request("DELETE", Route.TRIP, trip_id)
        await self._client.execute_void(request)
