"""managed-records: paginated /records retrieval and page summaries."""

from managed_records.client import RecordsClient, retrieve
from managed_records.common.exceptions import (
    ConnectionFailedError,
    InvalidResponseError,
    MalformedPageError,
    RecordsError,
    RequestTimeoutError,
    TransportError,
    UpstreamStatusError,
)
from managed_records.records.query import build_query
from managed_records.records.schemas import PageRequest, PageSummary, QueryParams, Record
from managed_records.records.transform import transform_page
from managed_records.transport.urls import build_url

__all__ = [
    "RecordsClient",
    "retrieve",
    "build_query",
    "transform_page",
    "build_url",
    "PageRequest",
    "PageSummary",
    "QueryParams",
    "Record",
    "RecordsError",
    "TransportError",
    "UpstreamStatusError",
    "RequestTimeoutError",
    "ConnectionFailedError",
    "InvalidResponseError",
    "MalformedPageError",
]
__version__ = "0.1.0"
