"""Existence Checker — tells "well-formed but absent" (404) apart from malformed input (400).

Invariants:
    - Only Lookup members can be checked: no table or column names travel as strings
    - ensure_exists raises ResourceNotFoundError naming lookup.table; exists() never raises
    - Integers outside the INTEGER range are reported absent without querying
    - Read-only: never commits

Design Decisions:
    - Lookup.REVIEW_CATEGORY resolves against categories.slug: a category filter is valid
      for every existing category, even one without reviews, but the failure is reported
      against the table being listed ('reviews')
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import MAX_STORED_INT, Lookup
from game_reviews.core.errors import ResourceNotFoundError
from game_reviews.models.category import Category
from game_reviews.models.comment import Comment
from game_reviews.models.review import Review
from game_reviews.models.user import User

logger = logging.getLogger(__name__)

_LOOKUP_COLUMNS = {
    Lookup.USERNAME: User.username,
    Lookup.CATEGORY_SLUG: Category.slug,
    Lookup.REVIEW_ID: Review.review_id,
    Lookup.REVIEW_CATEGORY: Category.slug,
    Lookup.COMMENT_ID: Comment.comment_id,
}


class ExistenceChecker:
    """Row-existence checks over the closed Lookup set."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, lookup: Lookup, value: object) -> bool:
        if isinstance(value, int) and abs(value) > MAX_STORED_INT:
            return False
        column = _LOOKUP_COLUMNS[lookup]
        result = await self.db.execute(
            select(column).where(column == value).limit(1),
        )
        return result.first() is not None

    async def ensure_exists(self, lookup: Lookup, value: object) -> None:
        """Raise ResourceNotFoundError unless a row matches."""
        if not await self.exists(lookup, value):
            logger.info(
                f"Lookup miss: {lookup.value} = {value!r}",
                extra={"resource": lookup.table},
            )
            raise ResourceNotFoundError(lookup.table, value)
