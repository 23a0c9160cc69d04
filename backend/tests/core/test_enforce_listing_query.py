"""Listing Query Enforcement — tests for pure sort/order/page validation.

Tests cover:
    - Defaults: created_at DESC, page 1, limit 10
    - sort_by/order outside the allow-list → INVALID_QUERY
    - p/limit not positive integers → INVALID_INPUT
    - INVALID_QUERY wins when both kinds of problem are present
    - to_error maps result descriptors to exception classes
"""

import pytest

from game_reviews.core.domain_types import ReviewSortColumn, SortOrder
from game_reviews.core.enforce_listing_query import (
    PageWindow,
    parse_positive_int,
    to_error,
    validate_page_window,
    validate_review_listing,
)
from game_reviews.core.errors import InvalidInputError, InvalidQueryError


# ─── parse_positive_int ──────────────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("25", 25), ("0", None), ("-1", None), ("1.5", None),
     ("wrong", None), ("", None), (str(2**31 - 1), 2**31 - 1),
     (str(2**31), None), ("99999999999999999999", None)],
)
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw) == expected


# ─── validate_page_window ────────────────────────────────────────

def test_page_window_defaults():
    result = validate_page_window(None, None)
    assert result["status"] == "ok"
    assert result["window"] == PageWindow(page=1, limit=10)
    assert result["window"].offset == 0


def test_page_window_uses_given_default_limit():
    result = validate_page_window(None, None, default_limit=5)
    assert result["window"].limit == 5


def test_page_window_offset():
    result = validate_page_window("3", "5")
    assert result["window"].offset == 10


@pytest.mark.parametrize("p, limit, parameter", [
    ("0", None, "p"), (None, "wrong", "limit"), ("-2", "5", "p"),
])
def test_page_window_rejects_non_positive(p, limit, parameter):
    result = validate_page_window(p, limit)
    assert result["status"] == "error"
    assert result["error_code"] == "INVALID_INPUT"
    assert result["parameter"] == parameter
    assert result["message"] == "Invalid input"


# ─── validate_review_listing ─────────────────────────────────────

def test_listing_defaults():
    result = validate_review_listing(None, None, None, None, None)
    assert result["status"] == "ok"
    query = result["query"]
    assert query.sort_by is ReviewSortColumn.CREATED_AT
    assert query.order is SortOrder.DESC
    assert query.category is None
    assert query.window == PageWindow()


def test_listing_accepts_every_parameter():
    result = validate_review_listing(
        "votes", "ASC", "social deduction", "2", "3",
    )
    query = result["query"]
    assert query.sort_by is ReviewSortColumn.VOTES
    assert query.order is SortOrder.ASC
    assert query.category == "social deduction"
    assert query.window == PageWindow(page=2, limit=3)


@pytest.mark.parametrize("sort_by, order, parameter", [
    ("wrong", None, "sort_by"),
    (None, "asc", "order"),
    (None, "sideways", "order"),
    ("review_body", "ASC", "sort_by"),
])
def test_listing_rejects_unknown_sort(sort_by, order, parameter):
    result = validate_review_listing(sort_by, order, None, None, None)
    assert result["status"] == "error"
    assert result["error_code"] == "INVALID_QUERY"
    assert result["parameter"] == parameter
    assert result["message"] == "Input query not found"


def test_listing_query_error_checked_before_page_error():
    result = validate_review_listing("wrong", None, None, "0", "wrong")
    assert result["error_code"] == "INVALID_QUERY"


def test_listing_rejects_bad_limit():
    result = validate_review_listing("votes", "ASC", None, None, "0")
    assert result["error_code"] == "INVALID_INPUT"
    assert result["parameter"] == "limit"


# ─── to_error ────────────────────────────────────────────────────

def test_to_error_maps_codes():
    query_error = to_error(validate_review_listing("x", None, None, None, None))
    input_error = to_error(validate_page_window("x", None))
    assert isinstance(query_error, InvalidQueryError)
    assert query_error.http_status == 404
    assert isinstance(input_error, InvalidInputError)
    assert input_error.http_status == 400
