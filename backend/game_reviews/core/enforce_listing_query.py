"""Listing Query Enforcement — validates sort, order and pagination parameters.

Invariants:
    - validate_* functions are PURE: they return a result descriptor, never raise or do IO
    - Result is {"status": "ok", ...} or {"status": "error", "error_code": ..., "message": ...}
    - INVALID_QUERY (sort_by/order) is checked before INVALID_INPUT (p/limit)
    - p/limit above MAX_STORED_INT are INVALID_INPUT, never passed to the store
    - category existence is NOT checked here (needs IO); the route does it afterwards

Design Decisions:
    - Query params arrive as raw strings: FastAPI coercion would answer 422/400 for
      every failure, but sort_by/order must answer 404
    - to_error() is the single mapping from error_code to exception class
"""

from dataclasses import dataclass

from game_reviews.core.domain_types import (
    MAX_STORED_INT, ReviewSortColumn, SortOrder,
)
from game_reviews.core.errors import (
    INVALID_INPUT_MESSAGE,
    INVALID_QUERY_MESSAGE,
    InvalidInputError,
    InvalidQueryError,
    ReviewsApiError,
)


DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10
DEFAULT_SORT_COLUMN = ReviewSortColumn.CREATED_AT
DEFAULT_SORT_ORDER = SortOrder.DESC


@dataclass(frozen=True)
class PageWindow:
    """1-based page and page size."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class ReviewListingQuery:
    sort_by: ReviewSortColumn = DEFAULT_SORT_COLUMN
    order: SortOrder = DEFAULT_SORT_ORDER
    category: str | None = None
    window: PageWindow = PageWindow()


def parse_positive_int(raw: str) -> int | None:
    """Return raw as a positive int the store can hold, or None."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_STORED_INT else None


def validate_page_window(
    p: str | None, limit: str | None, default_limit: int = DEFAULT_LIMIT,
) -> dict:
    """Validate page/limit. Absent values fall back to defaults."""
    values = {}
    for name, raw, default in (
        ("p", p, DEFAULT_PAGE), ("limit", limit, default_limit),
    ):
        if raw is None:
            values[name] = default
            continue
        parsed = parse_positive_int(raw)
        if parsed is None:
            return _error("INVALID_INPUT", name, INVALID_INPUT_MESSAGE)
        values[name] = parsed
    return {
        "status": "ok",
        "window": PageWindow(page=values["p"], limit=values["limit"]),
    }


def validate_review_listing(
    sort_by: str | None,
    order: str | None,
    category: str | None,
    p: str | None,
    limit: str | None,
    default_limit: int = DEFAULT_LIMIT,
) -> dict:
    """Validate every review-listing parameter except category existence."""
    sort_column = DEFAULT_SORT_COLUMN
    if sort_by is not None:
        try:
            sort_column = ReviewSortColumn(sort_by)
        except ValueError:
            return _error("INVALID_QUERY", "sort_by", INVALID_QUERY_MESSAGE)

    sort_order = DEFAULT_SORT_ORDER
    if order is not None:
        try:
            sort_order = SortOrder(order)
        except ValueError:
            return _error("INVALID_QUERY", "order", INVALID_QUERY_MESSAGE)

    window_result = validate_page_window(p, limit, default_limit)
    if window_result["status"] == "error":
        return window_result

    return {
        "status": "ok",
        "query": ReviewListingQuery(
            sort_by=sort_column,
            order=sort_order,
            category=category,
            window=window_result["window"],
        ),
    }


def to_error(result: dict) -> ReviewsApiError:
    """Exception matching an error result descriptor."""
    if result["error_code"] == "INVALID_QUERY":
        return InvalidQueryError(result["parameter"])
    return InvalidInputError(result["parameter"])


def _error(error_code: str, parameter: str, message: str) -> dict:
    return {
        "status": "error",
        "error_code": error_code,
        "parameter": parameter,
        "message": message,
    }
