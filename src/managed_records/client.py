"""
RecordsClient: async client for the paginated /records endpoint.

Builds the query for a page, fetches it, and returns a PageSummary.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from managed_records.common.config import RecordsSettings, get_settings
from managed_records.common.exceptions import MalformedPageError
from managed_records.records.query import build_query
from managed_records.records.schemas import PageRequest, PageSummary
from managed_records.records.transform import transform_page
from managed_records.transport.http import HttpTransport, Transport
from managed_records.transport.urls import build_url

logger = logging.getLogger(__name__)

RequestLike = Union[PageRequest, Mapping[str, Any], None]


def _coerce_request(request: RequestLike) -> Optional[PageRequest]:
    if request is None or isinstance(request, PageRequest):
        return request
    return PageRequest.model_validate(dict(request))


class RecordsClient:
    """
    Async client for the /records endpoint.

    Holds no per-call state, so one instance can serve concurrent
    ``retrieve`` calls.
    """

    def __init__(
        self,
        settings: Optional[RecordsSettings] = None,
        transport: Optional[Transport] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpTransport(
            timeout=self.settings.timeout,
            user_agent=self.settings.user_agent,
        )

    def url_for(self, request: RequestLike = None) -> str:
        """The URL ``retrieve`` would fetch for ``request``."""
        return build_url(self.settings.base_url, build_query(_coerce_request(request)))

    async def retrieve(self, request: RequestLike = None) -> PageSummary:
        """Fetch one page and summarise it.

        Transport errors propagate unchanged. A page that cannot be
        summarised is logged and raised as MalformedPageError.
        """
        query = build_query(_coerce_request(request))
        url = build_url(self.settings.base_url, query)
        logger.debug("Fetching records page %d from %s", query.page, url)

        data = await self._transport.fetch_json(url)

        try:
            return transform_page(data, query.page)
        except MalformedPageError:
            logger.exception("Failed to transform records page %d", query.page)
            raise

    # ── Lifecycle ──

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "RecordsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


async def retrieve(
    request: RequestLike = None,
    *,
    settings: Optional[RecordsSettings] = None,
    transport: Optional[Transport] = None,
) -> PageSummary:
    """Retrieve and summarise one page using a short-lived client."""
    async with RecordsClient(settings=settings, transport=transport) as client:
        return await client.retrieve(request)
