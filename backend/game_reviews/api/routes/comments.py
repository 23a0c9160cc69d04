"""Comments Routes — fetch, patch and delete a single comment.

Invariants:
    - Non-integer comment_id → 400; unknown comment_id → 404 ('comments')
    - PATCH: inc_votes must be an integer; body replaces the text; unknown keys ignored
    - DELETE answers 204 with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import Lookup
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.comment import CommentEnvelope, CommentUpdate
from game_reviews.services.check_exists import ExistenceChecker
from game_reviews.services.query_comments import CommentQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("/{comment_id}", response_model=CommentEnvelope)
async def get_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    """Fetch one comment."""
    await ExistenceChecker(db).ensure_exists(Lookup.COMMENT_ID, comment_id)
    return {"comment": await CommentQueries(db).get_comment(comment_id)}


@router.patch("/{comment_id}", response_model=CommentEnvelope)
async def update_comment(
    comment_id: int,
    body: CommentUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Add inc_votes to votes and/or replace the comment body."""
    await ExistenceChecker(db).ensure_exists(Lookup.COMMENT_ID, comment_id)
    body = body or CommentUpdate()
    comment = await CommentQueries(db).update_comment(
        comment_id, inc_votes=body.inc_votes, body=body.body,
    )
    return {"comment": comment}


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    """Delete one comment."""
    await ExistenceChecker(db).ensure_exists(Lookup.COMMENT_ID, comment_id)
    await CommentQueries(db).delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
