"""Derive /records query parameters from a page request."""

from typing import Optional

from managed_records.records.constants import FIRST_PAGE, LIMIT, LOOKAHEAD
from managed_records.records.schemas import PageRequest, QueryParams


def page_offset(page: int) -> int:
    """Offset of the first record on ``page``.

    Pages step by ``LIMIT - LOOKAHEAD`` so the lookahead record of one page
    is the first record of the next.
    """
    return (page - 1) * (LIMIT - LOOKAHEAD)


def build_query(request: Optional[PageRequest] = None) -> QueryParams:
    """
    Build the query parameters for a page request.

    Args:
        request: Requested page and color filter; ``None`` means the first
            page with no filter.

    Returns:
        QueryParams ready for URL serialization
    """
    if request is None:
        return QueryParams(color_filter=[], page=FIRST_PAGE, limit=LIMIT, offset=0)

    return QueryParams(
        color_filter=list(request.colors),
        page=request.page,
        limit=LIMIT,
        offset=page_offset(request.page),
    )
