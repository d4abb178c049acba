"""
Page transformer: turn a raw /records page into a PageSummary.

Cursors are decided on the untrimmed page, then the lookahead record is
dropped and the remaining records are summarised in a single pass.
"""

from collections.abc import Mapping
from typing import Any

from managed_records.common.exceptions import MalformedPageError
from managed_records.records.constants import (
    DISPOSITION_CLOSED,
    DISPOSITION_OPEN,
    FIRST_PAGE,
    PAGE_SIZE,
    PRIMARY_COLORS,
)
from managed_records.records.schemas import PageSummary, Record


def is_primary_color(color: Any) -> bool:
    """True iff ``color`` is one of the primary colors."""
    return isinstance(color, str) and color in PRIMARY_COLORS


def page_cursors(count: int, page: int) -> tuple[int | None, int | None]:
    """Return ``(previous_page, next_page)`` for a page of ``count`` fetched records."""
    if count == 0 and page == FIRST_PAGE:
        return None, None

    previous_page = None if page == FIRST_PAGE else page - 1
    next_page = page + 1 if count > PAGE_SIZE else None
    return previous_page, next_page


def _to_record(item: Any, position: int) -> Record:
    if not isinstance(item, Mapping):
        raise MalformedPageError(
            f"Record at position {position} is not an object (got {type(item).__name__})"
        )
    return Record.model_validate({**item, "isPrimary": is_primary_color(item.get("color"))})


def transform_page(data: Any, page: int) -> PageSummary:
    """
    Summarise one fetched page of records.

    Args:
        data: Parsed JSON body returned for the page
        page: The page number that was requested

    Returns:
        PageSummary with ids, open records, closed primary count and cursors

    Raises:
        MalformedPageError: if ``data`` is not an array of objects
    """
    if not isinstance(data, (list, tuple)):
        raise MalformedPageError(
            f"Expected a JSON array of records, got {type(data).__name__}"
        )

    items = list(data)
    previous_page, next_page = page_cursors(len(items), page)
    if next_page is not None:
        # Drop the lookahead record
        items.pop()

    summary = PageSummary(previous_page=previous_page, next_page=next_page)
    for position, item in enumerate(items):
        record = _to_record(item, position)
        summary.ids.append(record.id)
        if record.disposition == DISPOSITION_OPEN:
            summary.open.append(record)
        if record.disposition == DISPOSITION_CLOSED and record.is_primary:
            summary.closed_primary_count += 1

    return summary
