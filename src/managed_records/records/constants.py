"""
Pagination constants for the /records endpoint.

Every page is fetched with one extra record beyond what is shown. That
lookahead record only proves a next page exists and is dropped before the
page is summarised, so both the offset step and the trim threshold are
``LIMIT - LOOKAHEAD``.
"""

PAGE_SIZE = 10
LOOKAHEAD = 1
LIMIT = PAGE_SIZE + LOOKAHEAD

FIRST_PAGE = 1

PRIMARY_COLORS: frozenset[str] = frozenset({"red", "blue", "yellow"})

DISPOSITION_OPEN = "open"
DISPOSITION_CLOSED = "closed"

# Query-string key for the color filter, repeated once per color
COLOR_PARAM = "color[]"
