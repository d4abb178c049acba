"""Async JSON transport for the /records endpoint."""

import logging
from typing import Any, Optional, Protocol

import httpx

from managed_records.common.exceptions import (
    ConnectionFailedError,
    InvalidResponseError,
    RequestTimeoutError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can GET a URL and hand back its parsed JSON body."""

    async def fetch_json(self, url: str) -> Any: ...

    async def aclose(self) -> None: ...


class HttpTransport:
    """
    httpx-backed transport.

    No retries: every failure surfaces as a TransportError subclass with the
    original httpx exception attached as ``cause``.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "managed-records/0.1.0",
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )

    async def fetch_json(self, url: str) -> Any:
        """GET ``url`` and return the parsed JSON body.

        Raises:
            RequestTimeoutError: the request timed out
            ConnectionFailedError: any other httpx transport failure
            UpstreamStatusError: non-2xx status; the parsed body (or raw text
                when it is not JSON) is attached as ``payload``
            InvalidResponseError: 2xx status with a body that is not JSON
        """
        try:
            resp = await self._http.get(url)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"Timed out fetching {url}", cause=e) from e
        except httpx.HTTPError as e:
            raise ConnectionFailedError(f"Failed to fetch {url}: {e}", cause=e) from e

        try:
            data = resp.json()
        except ValueError as e:
            if not resp.is_success:
                raise UpstreamStatusError(resp.status_code, payload=resp.text) from e
            raise InvalidResponseError(
                f"Response from {url} is not valid JSON",
                cause=e,
                status_code=resp.status_code,
            ) from e

        if not resp.is_success:
            logger.warning("Records endpoint returned HTTP %s for %s", resp.status_code, url)
            raise UpstreamStatusError(resp.status_code, payload=data)

        return data

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._http.aclose()
