"""Tests for cli.py: records query / fetch commands."""

import json
from unittest.mock import AsyncMock, patch

import httpx
from typer.testing import CliRunner

from managed_records.cli import app
from managed_records.common.exceptions import UpstreamStatusError
from managed_records.records.schemas import PageRequest, PageSummary

runner = CliRunner()
URL = "http://records.test/records"


class TestQueryCommand:
    def test_prints_url(self):
        result = runner.invoke(app, ["query", "--page", "3", "-c", "red", "-c", "blue", "--url", URL])
        assert result.exit_code == 0
        url = httpx.URL(result.output.strip())
        assert url.params.get("offset") == "20"
        assert url.params.get_list("color[]") == ["red", "blue"]

    def test_rejects_page_zero(self):
        result = runner.invoke(app, ["query", "--page", "0", "--url", URL])
        assert result.exit_code != 0


class TestFetchCommand:
    def test_prints_summary_json(self):
        summary = PageSummary(ids=[1, 2], closed_primary_count=1, previous_page=1, next_page=3)
        with patch("managed_records.cli.retrieve", new=AsyncMock(return_value=summary)) as mock_retrieve:
            result = runner.invoke(app, ["fetch", "--page", "2", "--url", URL])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "ids": [1, 2],
            "open": [],
            "closedPrimaryCount": 1,
            "previousPage": 1,
            "nextPage": 3,
        }
        request = mock_retrieve.await_args.args[0]
        assert request == PageRequest(page=2)
        assert mock_retrieve.await_args.kwargs["settings"].base_url == URL

    def test_records_error_exits_1(self):
        error = UpstreamStatusError(503, payload={"error": "down"})
        with patch("managed_records.cli.retrieve", new=AsyncMock(side_effect=error)):
            result = runner.invoke(app, ["fetch", "--url", URL])

        assert result.exit_code == 1
        assert "UPSTREAM_STATUS" in result.output
