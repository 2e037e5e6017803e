"""HTTP client for the Trip Journal API.

Builds requests, attaches the bearer token, validates status codes, decodes
typed responses, and stores any token found in a response.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from types import MappingProxyType
from typing import Any, AsyncIterator, Mapping, NamedTuple
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from trip_journal.auth import TokenManager
from trip_journal.config import Config, get_config
from trip_journal.endpoints import Endpoints, Route
from trip_journal.models.auth import Token
from trip_journal.store import FileCredentialStore
from trip_journal.utils.errors import BadResponse, FailedToDecodeResponse

logger = logging.getLogger(__name__)

JSON = "application/json"
FORM = "application/x-www-form-urlencoded"

OK_STATUSES = frozenset({200})
VOID_OK_STATUSES = frozenset({200, 204})


class RequestDescriptor(BaseModel):
    """A fully built request. Never mutated after construction."""
    method: str
    url: str
    headers: Mapping[str, str]
    body: bytes | None = None

    model_config = {"frozen": True}

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class DecodedResponse(NamedTuple):
    """Decoded body tagged with whether it is a bearer token."""
    value: Any
    is_credential: bool = False


def decode_response(body: bytes, response_type: Any) -> DecodedResponse:
    """Decode a JSON body into ``response_type``.

    Every failure (malformed JSON, wrong shape, unparseable date) becomes
    ``FailedToDecodeResponse``; the detail is logged and kept as the cause.
    """
    try:
        value = TypeAdapter(response_type).validate_json(body)
    except ValidationError as e:
        logger.debug(f"Decoding {response_type!r} failed: {e}")
        raise FailedToDecodeResponse(f"Failed to decode response as {_type_name(response_type)}") from e
    return DecodedResponse(value=value, is_credential=response_type is Token)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or str(response_type)


class JournalClient:
    """Async HTTP client for the journal API with token handling."""

    def __init__(
        self,
        config: Config,
        tokens: TokenManager,
        server: str | None = None,
        verbose: bool = False,
    ) -> None:
        self._config = config
        self._tokens = tokens
        self._verbose = verbose
        self._endpoints = Endpoints(config.get_server(server).base_url)
        self._resource_timeout = config.settings.resource_timeout
        self._http = httpx.AsyncClient(timeout=httpx.Timeout(config.settings.request_timeout))

    @property
    def tokens(self) -> TokenManager:
        return self._tokens

    @property
    def endpoints(self) -> Endpoints:
        return self._endpoints

    async def build_request(
        self,
        method: str,
        route: Route,
        item_id: int | None = None,
        *,
        json_body: BaseModel | None = None,
        form: dict[str, str] | None = None,
        authenticated: bool = True,
    ) -> RequestDescriptor:
        """Resolve a route and build a request descriptor.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            route: Logical API route.
            item_id: Identifier for single-item routes.
            json_body: Model serialized as the JSON body (dates as ISO-8601).
            form: Fields sent as an url-encoded form body.
            authenticated: Attach ``Authorization: Bearer <token>``. The
                header is sent with an empty token when none is held.

        Raises:
            InvalidTarget: If the route cannot be resolved.
        """
        url = self._endpoints.resolve(route, item_id)
        headers: dict[str, str] = {}
        body: bytes | None = None

        if authenticated:
            await self._tokens.check_expiration()
            token = self._tokens.token
            headers["Authorization"] = f"Bearer {token.access_token if token else ''}"

        if json_body is not None:
            headers["Accept"] = JSON
            headers["Content-Type"] = JSON
            body = json_body.model_dump_json().encode()
        elif form is not None:
            headers["Accept"] = JSON
            headers["Content-Type"] = FORM
            body = urlencode(form).encode()

        return RequestDescriptor(method=method.upper(), url=url, headers=headers, body=body)

    async def execute(self, request: RequestDescriptor, response_type: Any) -> Any:
        """Send a request and decode the 200 response into ``response_type``.

        A decoded ``Token`` gets a fresh local expiration date and replaces
        the held token; the stored token is returned.

        Raises:
            BadResponse: On transport failure, timeout, or a status other than 200.
            FailedToDecodeResponse: If the body does not match ``response_type``.
        """
        response = await self._send(request)
        self._validate(request, response, OK_STATUSES)

        decoded = decode_response(response.content, response_type)
        if not decoded.is_credential:
            return decoded.value

        expires = Token.default_expiration_date(self._tokens.now())
        token = decoded.value.model_copy(update={"expiration_date": expires})
        # Once decoded, memory and store are updated together even if the caller is cancelled.
        await self._tokens.set_token(token)
        return token

    async def execute_void(self, request: RequestDescriptor) -> None:
        """Send a request whose response body is ignored (200 or 204)."""
        response = await self._send(request)
        self._validate(request, response, VOID_OK_STATUSES)

    async def _send(self, request: RequestDescriptor) -> httpx.Response:
        if self._verbose:
            logger.info(f"{request.method} {request.url}")

        try:
            http_request = self._http.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except UnicodeEncodeError as e:
            logger.warning(f"{request.method} {request.url} has a header that is not ASCII: {e}")
            raise BadResponse(f"{request.method} {request.url} could not be encoded") from e

        try:
            return await asyncio.wait_for(self._http.send(http_request), timeout=self._resource_timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"{request.method} {request.url} timed out after {self._resource_timeout:.0f}s")
            raise BadResponse(f"{request.method} {request.url} timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"{request.method} {request.url} failed: {e}")
            raise BadResponse(f"{request.method} {request.url} failed") from e

    def _validate(
        self,
        request: RequestDescriptor,
        response: httpx.Response,
        accepted: frozenset[int],
    ) -> None:
        if self._verbose:
            logger.info(f"Response: {response.status_code}")

        if response.status_code not in accepted:
            logger.warning(f"{request.method} {request.url} rejected with HTTP {response.status_code}")
            raise BadResponse(f"Bad response from {request.method} {request.url}")

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> JournalClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


@asynccontextmanager
async def open_client(server: str | None = None, verbose: bool = False) -> AsyncIterator[JournalClient]:
    """Client wired to the configured credential file, token loaded."""
    config = get_config()
    tokens = TokenManager(FileCredentialStore(config.settings.credential_path))
    await tokens.initialize()

    async with JournalClient(config, tokens, server=server, verbose=verbose) as client:
        yield client
