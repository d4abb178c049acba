"""Pydantic schemas for page requests, query parameters, and page summaries."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from managed_records.records.constants import FIRST_PAGE, LIMIT, LOOKAHEAD


class PageRequest(BaseModel):
    """Caller input for a single page of records."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=FIRST_PAGE, ge=FIRST_PAGE)
    colors: list[str] = Field(default_factory=list)


class QueryParams(BaseModel):
    """Concrete query parameters sent to the /records endpoint."""

    model_config = ConfigDict(frozen=True)

    color_filter: list[str] = Field(default_factory=list)
    page: int = FIRST_PAGE
    limit: int = LIMIT
    offset: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_offset(self) -> "QueryParams":
        expected = (self.page - 1) * (self.limit - LOOKAHEAD)
        if self.offset != expected:
            raise ValueError(
                f"offset must be (page - 1) * (limit - {LOOKAHEAD}) = {expected}, got {self.offset}"
            )
        return self


class Record(BaseModel):
    """A record as served by the endpoint, plus the derived ``isPrimary`` flag.

    Unknown server fields are preserved so the record round-trips intact.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = None
    color: Any = None
    disposition: Any = None
    is_primary: bool = Field(default=False, alias="isPrimary")


class PageSummary(BaseModel):
    """Client-ready summary of one page of records."""

    model_config = ConfigDict(populate_by_name=True)

    ids: list[Any] = Field(default_factory=list)
    open: list[Record] = Field(default_factory=list)
    closed_primary_count: int = Field(default=0, ge=0, alias="closedPrimaryCount")
    previous_page: Optional[int] = Field(default=None, alias="previousPage")
    next_page: Optional[int] = Field(default=None, alias="nextPage")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the endpoint's camelCase keys."""
        return self.model_dump(by_alias=True)
