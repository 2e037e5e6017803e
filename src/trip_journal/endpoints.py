"""Route table for the Trip Journal API."""

from __future__ import annotations

from enum import Enum

import httpx

from trip_journal.utils.errors import InvalidTarget


class Route(str, Enum):
    REGISTER = "register"
    LOGIN = "token"
    TRIPS = "trips"
    TRIP = "trips/{id}"
    EVENTS = "events"
    EVENT = "events/{id}"
    MEDIA = "media"
    MEDIA_ITEM = "media/{id}"

    @property
    def needs_id(self) -> bool:
        return "{id}" in self.value


class Endpoints:
    """Resolves routes against a single base address."""

    def __init__(self, base_url: str) -> None:
        self._base = base_url if base_url.endswith("/") else base_url + "/"

    @property
    def base_url(self) -> str:
        return self._base

    def resolve(self, route: Route, item_id: int | None = None) -> str:
        """Build the absolute URL for a route.

        Raises:
            InvalidTarget: If the id is missing, not an integer, or given to a
                route that takes none, or if the result is not an absolute
                http(s) URL.
        """
        if route.needs_id:
            if isinstance(item_id, bool) or not isinstance(item_id, int):
                raise InvalidTarget(f"Route '{route.value}' needs an integer id, got {item_id!r}")
            path = route.value.format(id=item_id)
        elif item_id is not None:
            raise InvalidTarget(f"Route '{route.value}' takes no id, got {item_id!r}")
        else:
            path = route.value

        raw = self._base + path
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise InvalidTarget(f"Invalid URL {raw!r}: {e}") from e

        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidTarget(f"Invalid URL {raw!r}: expected an absolute http(s) address")
        return str(url)
