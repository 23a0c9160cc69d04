"""Review Queries — data access for reviews, including the paginated listing.

Invariants:
    - comment_count is always aggregated from comments (LEFT JOIN + COUNT), never stored
    - total_count is a window count over the filtered, grouped rows, so it ignores LIMIT/OFFSET
    - Listing order: sort column in the requested direction, then review_id in the same
      direction, so consecutive pages never overlap
    - Vote changes are a single UPDATE ... SET votes = votes + :delta (store-atomic)
    - Deleting a review deletes its comments in the same transaction

Design Decisions:
    - Column selects returning dicts instead of ORM entities: aggregated fields
      (comment_count, total_count) have no place on the entity
    - GROUP BY the primary key only: PostgreSQL and SQLite both allow selecting the
      other review columns (functional dependency)
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import (
    CategorySlug, ReviewId, ReviewSortColumn, SortOrder, Username,
)
from game_reviews.core.enforce_listing_query import ReviewListingQuery
from game_reviews.models.comment import Comment
from game_reviews.models.review import Review

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = (
    Review.owner, Review.title, Review.review_id, Review.category,
    Review.review_img_url, Review.created_at, Review.votes,
)
DETAIL_COLUMNS = SUMMARY_COLUMNS + (Review.review_body, Review.designer)


def _comment_count():
    return func.count(Comment.comment_id).label("comment_count")


def _with_comment_count(*columns):
    comment_count = _comment_count()
    stmt = (
        select(*columns, comment_count)
        .outerjoin(Comment, Comment.review_id == Review.review_id)
        .group_by(Review.review_id)
    )
    return stmt, comment_count


def _order_by(query: ReviewListingQuery, comment_count):
    if query.sort_by is ReviewSortColumn.COMMENT_COUNT:
        primary = comment_count
    else:
        primary = getattr(Review, query.sort_by.value)
    if query.order is SortOrder.ASC:
        return primary.asc(), Review.review_id.asc()
    return primary.desc(), Review.review_id.desc()


class ReviewQueries:
    """Read, create, patch and delete reviews."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_reviews(self, query: ReviewListingQuery) -> list[dict]:
        """One page of review summaries, each carrying the unpaginated total_count."""
        stmt, comment_count = _with_comment_count(*SUMMARY_COLUMNS)
        stmt = stmt.add_columns(func.count().over().label("total_count"))
        if query.category is not None:
            stmt = stmt.where(Review.category == query.category)
        stmt = (
            stmt.order_by(*_order_by(query, comment_count))
            .limit(query.window.limit)
            .offset(query.window.offset)
        )
        result = await self.db.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def get_review(self, review_id: ReviewId) -> dict | None:
        """Full review with comment_count."""
        stmt, _ = _with_comment_count(*DETAIL_COLUMNS)
        result = await self.db.execute(
            stmt.where(Review.review_id == review_id),
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def create_review(
        self,
        owner: Username,
        title: str,
        review_body: str,
        designer: str,
        category: CategorySlug,
        review_img_url: str | None = None,
    ) -> dict:
        review = Review(
            owner=owner, title=title, review_body=review_body,
            designer=designer, category=category,
        )
        if review_img_url is not None:
            review.review_img_url = review_img_url
        self.db.add(review)
        await self.db.commit()
        logger.info(
            f"Review {review.review_id} created",
            extra={"resource": "reviews", "resource_id": review.review_id},
        )
        return await self.get_review(review.review_id)

    async def update_review(
        self,
        review_id: ReviewId,
        inc_votes: int | None = None,
        review_body: str | None = None,
    ) -> dict | None:
        """Apply a vote delta and/or body replacement; returns the review without comment_count."""
        values = {}
        if inc_votes:
            values["votes"] = Review.votes + inc_votes
        if review_body is not None:
            values["review_body"] = review_body
        if values:
            await self.db.execute(
                update(Review)
                .where(Review.review_id == review_id)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
            logger.info(
                f"Review {review_id} updated: {sorted(values)}",
                extra={"resource": "reviews", "resource_id": review_id},
            )
        result = await self.db.execute(
            select(*DETAIL_COLUMNS).where(Review.review_id == review_id),
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def delete_review(self, review_id: ReviewId) -> None:
        await self.db.execute(
            delete(Comment).where(Comment.review_id == review_id),
        )
        await self.db.execute(
            delete(Review).where(Review.review_id == review_id),
        )
        await self.db.commit()
        logger.info(
            f"Review {review_id} deleted with its comments",
            extra={"resource": "reviews", "resource_id": review_id},
        )
