"""Comment Queries — data access for comments under a review.

Invariants:
    - Listing returns {comment_id, votes, created_at, author, body}, newest first
    - Single comment returns the listing fields plus review_id
    - Vote changes are a single UPDATE ... SET votes = votes + :delta (store-atomic)
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import CommentId, ReviewId, Username
from game_reviews.core.enforce_listing_query import PageWindow
from game_reviews.models.comment import Comment

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = (
    Comment.comment_id, Comment.votes, Comment.created_at,
    Comment.author, Comment.body,
)
DETAIL_COLUMNS = SUMMARY_COLUMNS + (Comment.review_id,)


class CommentQueries:
    """Read, create, patch and delete comments."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_for_review(
        self, review_id: ReviewId, window: PageWindow,
    ) -> list[dict]:
        result = await self.db.execute(
            select(*SUMMARY_COLUMNS)
            .where(Comment.review_id == review_id)
            .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
            .limit(window.limit)
            .offset(window.offset),
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_comment(self, comment_id: CommentId) -> dict | None:
        result = await self.db.execute(
            select(*DETAIL_COLUMNS).where(Comment.comment_id == comment_id),
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def create_comment(
        self, review_id: ReviewId, author: Username, body: str,
    ) -> dict:
        comment = Comment(review_id=review_id, author=author, body=body)
        self.db.add(comment)
        await self.db.commit()
        logger.info(
            f"Comment {comment.comment_id} added to review {review_id}",
            extra={"resource": "comments", "resource_id": comment.comment_id},
        )
        return await self.get_comment(comment.comment_id)

    async def update_comment(
        self,
        comment_id: CommentId,
        inc_votes: int | None = None,
        body: str | None = None,
    ) -> dict | None:
        values = {}
        if inc_votes:
            values["votes"] = Comment.votes + inc_votes
        if body is not None:
            values["body"] = body
        if values:
            await self.db.execute(
                update(Comment)
                .where(Comment.comment_id == comment_id)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
            logger.info(
                f"Comment {comment_id} updated: {sorted(values)}",
                extra={"resource": "comments", "resource_id": comment_id},
            )
        return await self.get_comment(comment_id)

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self.db.execute(
            delete(Comment).where(Comment.comment_id == comment_id),
        )
        await self.db.commit()
        logger.info(
            f"Comment {comment_id} deleted",
            extra={"resource": "comments", "resource_id": comment_id},
        )
