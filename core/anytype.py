# =============================================================================
# core/anytype.py  —  Anytype Local API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the Anytype desktop app's local HTTP API.  Two layers:
#
#     AnytypeTransport  An httpx transport that stamps every outgoing
#                       request with the API version, the bearer key and
#                       the JSON content-negotiation headers.
#     Anytype           The client.  get()/post() primitives plus the two
#                       read operations the bridge needs: get_object()
#                       and search().
#
# HOW IT WORKS (the flow):
#   1. get_object()/search() build the path, query and body
#   2. get()/post() send it through a shared httpx.AsyncClient
#   3. AnytypeTransport copies the request and adds the headers
#   4. A 200 body is decoded into the caller's model (core/models.py);
#      any other status is decoded into an AnytypeError and raised
#
# FAILURE KINDS:
#   AnytypeError         The server rejected the call (non-200 + envelope)
#   ResponseDecodeError  A body was not the JSON we expected
#   httpx.HTTPError      Connection refused, timeout, ... (raised as-is)
#
#   Nothing here retries, caches or follows pagination: one call is one
#   HTTP round trip.
# =============================================================================

import json
import logging
from typing import Any, Mapping, Optional, Protocol, TypeVar

import httpx

from core.config import AnytypeConfig
from core.errors import AnytypeError, ResponseDecodeError
from core.models import GetObjectOutput, SearchOutput

logger = logging.getLogger(__name__)

# Version of the Anytype API this client speaks, sent on every request.
API_VERSION = "2025-05-20"


class _Decodable(Protocol):
    @classmethod
    def from_dict(cls, data: Any) -> Any: ...


T = TypeVar("T", bound=_Decodable)


# =============================================================================
# Transport
# =============================================================================
class AnytypeTransport(httpx.AsyncBaseTransport):
    """Adds Anytype's required headers before handing the request on.

    The incoming request is never modified; a copy with the extra headers
    is sent instead.
    """

    def __init__(
        self,
        api_key: str,
        api_version: str = API_VERSION,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._api_version = api_version
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        headers = request.headers.copy()
        headers["Anytype-Version"] = self._api_version
        headers["Authorization"] = f"Bearer {self._api_key}"
        headers["Accept"] = "application/json"
        if request.content:
            headers["Content-Type"] = "application/json"

        authorized = httpx.Request(
            method=request.method,
            url=request.url,
            headers=headers,
            stream=request.stream,
            extensions=request.extensions,
        )
        return await self._transport.handle_async_request(authorized)

    async def aclose(self) -> None:
        await self._transport.aclose()


# =============================================================================
# Client
# =============================================================================
class Anytype:
    """Async client for the Anytype local API.

    Construct once per process and share it; it holds no per-call state.

    Example:
        ```python
        async with Anytype(AnytypeConfig(api_key="...")) as anytype:
            found = await anytype.search("meeting notes", offset=0)
        ```
    """

    def __init__(
        self,
        config: AnytypeConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            config: API key, base URL and timeout.
            transport: Inner transport the authenticated requests are sent
                through.  Defaults to a real network transport; tests pass
                an ``httpx.MockTransport``.
        """
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_server,
            transport=AnytypeTransport(config.api_key, transport=transport),
            timeout=config.timeout,
        )

    @property
    def config(self) -> AnytypeConfig:
        return self._config

    async def __aenter__(self) -> "Anytype":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------
    async def get(
        self,
        path: str,
        result_type: type[T],
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """GET ``path`` and decode a 200 body with ``result_type.from_dict``.

        Raises:
            AnytypeError: The server answered with any other status.
            ResponseDecodeError: A body could not be decoded.
            httpx.HTTPError: The request never completed.
        """
        response = await self._client.get(path, params=params)
        return self._decode(response, result_type)

    async def post(
        self,
        path: str,
        payload: Any,
        result_type: type[T],
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """POST ``payload`` as JSON to ``path``.  Same decoding rules as get()."""
        body = json.dumps(payload).encode("utf-8")
        response = await self._client.post(path, content=body, params=params)
        return self._decode(response, result_type)

    def _decode(self, response: httpx.Response, result_type: type[T]) -> T:
        logger.debug("%s %s -> %d", response.request.method, response.request.url, response.status_code)
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"invalid JSON in response to {response.request.method} "
                f"{response.request.url.path} (status {response.status_code}): {e}"
            ) from e

        if response.status_code != httpx.codes.OK:
            error = AnytypeError.from_dict(data)
            logger.debug("Anytype API error: %r", error)
            raise error

        return result_type.from_dict(data)

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    async def get_object(self, space_id: str, object_id: str) -> GetObjectOutput:
        """Fetch one object, including its markdown and all of its properties."""
        return await self.get(f"/v1/spaces/{space_id}/objects/{object_id}", GetObjectOutput)

    async def search(self, query: str, offset: int = 0) -> SearchOutput:
        """Search objects across all spaces, returning one page of results."""
        return await self.post(
            "/v1/search",
            {"query": query},
            SearchOutput,
            params={"offset": offset},
        )
