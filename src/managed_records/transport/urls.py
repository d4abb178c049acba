"""Serialize QueryParams into a /records URL."""

import httpx

from managed_records.records.constants import COLOR_PARAM
from managed_records.records.schemas import QueryParams


def query_pairs(params: QueryParams) -> list[tuple[str, str | int]]:
    """Flatten params into ordered query pairs, one ``color[]`` pair per color."""
    pairs: list[tuple[str, str | int]] = [(COLOR_PARAM, color) for color in params.color_filter]
    pairs.extend([
        ("page", params.page),
        ("limit", params.limit),
        ("offset", params.offset),
    ])
    return pairs


def build_url(base_url: str, params: QueryParams) -> str:
    """
    Build the request URL for a page.

    Query parameters already present on ``base_url`` are kept unless they
    collide with a pagination key, in which case the pagination value wins.
    An empty color filter emits no ``color[]`` key at all.
    """
    url = httpx.URL(base_url)
    return str(url.copy_merge_params(httpx.QueryParams(query_pairs(params))))
