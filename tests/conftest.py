"""Shared test fixtures for managed-records."""

import json
import logging
from typing import Any, Optional

import httpx
import pytest

from managed_records.common.config import RecordsSettings


BASE_URL = "http://records.test/records"
COLORS = ["red", "brown", "blue", "yellow", "green"]


def make_records(count: int, start: int = 1) -> list[dict[str, Any]]:
    """Deterministic dataset resembling the /records endpoint."""
    return [
        {
            "id": i,
            "color": COLORS[i % len(COLORS)],
            "disposition": "open" if i % 2 else "closed",
        }
        for i in range(start, start + count)
    ]


class FakeRecordsServer:
    """In-process stand-in for the /records endpoint, served via httpx.MockTransport."""

    def __init__(self, records: list[dict[str, Any]]):
        self.records = records
        self.requests: list[httpx.Request] = []
        self.respond_with: Optional[httpx.Response] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.respond_with is not None:
            return self.respond_with

        colors = request.url.params.get_list("color[]")
        limit = int(request.url.params.get("limit", 100))
        offset = int(request.url.params.get("offset", 0))

        matching = [r for r in self.records if not colors or r["color"] in colors]
        return httpx.Response(200, content=json.dumps(matching[offset:offset + limit]))


@pytest.fixture
def settings():
    return RecordsSettings(base_url=BASE_URL, timeout=1.0)


@pytest.fixture
def records_server():
    return FakeRecordsServer(make_records(25))


@pytest.fixture
async def http_client(records_server):
    async with httpx.AsyncClient(transport=httpx.MockTransport(records_server)) as client:
        yield client


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog keeps receiving package records."""
    logger = logging.getLogger("managed_records")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
