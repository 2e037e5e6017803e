"""Media management service."""

from __future__ import annotations

from trip_journal.client import JournalClient
from trip_journal.endpoints import Route
from trip_journal.models.media import Media, MediaCreate, MediaUpdate


class MediaService:
    """Service for media CRUD operations."""

    def __init__(self, client: JournalClient) -> None:
        self._client = client

    async def list(self) -> list[Media]:
        request = await self._client.build_request("GET", Route.MEDIA)
        return await self._client.execute(request, list[Media])

    async def get(self, media_id: int) -> Media:
        request = await self._client.build_request("GET", Route.MEDIA_ITEM, media_id)
        return await self._client.execute(request, Media)

    async def create(self, media: MediaCreate) -> Media:
        """Upload base64-encoded media and attach it to ``media.event_id``."""
        request = await self._client.build_request("POST", Route.MEDIA, json_body=media)
        return await self._client.execute(request, Media)

    async def update(self, media_id: int, media: MediaUpdate) -> Media:
        request = await self._client.build_request("PUT", Route.MEDIA_ITEM, media_id, json_body=media)
        return await self._client.execute(request, Media)

    async def delete(self, media_id: int) -> None:
        request = await self._client.build_request("DELETE", Route.MEDIA_ITEM, media_id)
        await self._client.execute_void(request)
