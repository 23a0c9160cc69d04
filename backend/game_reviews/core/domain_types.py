"""Domain Types — rich types that replace bare primitives in service signatures.

Invariants:
    - ReviewId, CommentId wrap ints; Username, CategorySlug wrap strs
    - Integer ids and page values never exceed MAX_STORED_INT
    - Every accepted sort column and direction is an Enum member; no raw string matching
    - Lookup is the closed set of table/column pairs the existence checker understands

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values are the exact strings clients send in query parameters
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ReviewId = NewType("ReviewId", int)
CommentId = NewType("CommentId", int)
Username = NewType("Username", str)
CategorySlug = NewType("CategorySlug", str)

# Largest value an INTEGER column holds (PostgreSQL int4)
MAX_STORED_INT: int = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ReviewSortColumn(str, Enum):
    """Columns a review listing may be sorted by."""
    OWNER = "owner"
    TITLE = "title"
    REVIEW_ID = "review_id"
    CATEGORY = "category"
    DESIGNER = "designer"
    REVIEW_IMG_URL = "review_img_url"
    CREATED_AT = "created_at"
    VOTES = "votes"
    COMMENT_COUNT = "comment_count"


class SortOrder(str, Enum):
    """Sort direction. Case-sensitive: only upper-case values are accepted."""
    ASC = "ASC"
    DESC = "DESC"


class Lookup(str, Enum):
    """Table/column pairs an existence check can target ("<table>.<column>")."""
    USERNAME = "users.username"
    CATEGORY_SLUG = "categories.slug"
    REVIEW_ID = "reviews.review_id"
    REVIEW_CATEGORY = "reviews.category"
    COMMENT_ID = "comments.comment_id"

    @property
    def table(self) -> str:
        """Table label used in not-found messages."""
        return self.value.split(".")[0]
