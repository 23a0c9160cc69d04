"""Domain Types — verifies enum values and Lookup table/column split.

Tests:
    - Sort columns are exactly the nine accepted values
    - SortOrder accepts upper-case only
    - Lookup exposes the table label of each pair
"""

import pytest

from game_reviews.core.domain_types import (
    Lookup, ReviewId, ReviewSortColumn, SortOrder, Username,
)


def test_identity_types_wrap_primitives():
    assert ReviewId(3) == 3
    assert Username("mallionaire") == "mallionaire"


def test_sort_columns():
    assert {c.value for c in ReviewSortColumn} == {
        "owner", "title", "review_id", "category", "designer",
        "review_img_url", "created_at", "votes", "comment_count",
    }


def test_sort_order_is_case_sensitive():
    assert SortOrder("ASC") is SortOrder.ASC
    with pytest.raises(ValueError):
        SortOrder("asc")


@pytest.mark.parametrize(
    "lookup, table",
    [
        (Lookup.USERNAME, "users"),
        (Lookup.CATEGORY_SLUG, "categories"),
        (Lookup.REVIEW_ID, "reviews"),
        (Lookup.REVIEW_CATEGORY, "reviews"),
        (Lookup.COMMENT_ID, "comments"),
    ],
)
def test_lookup_table(lookup, table):
    assert lookup.table == table
