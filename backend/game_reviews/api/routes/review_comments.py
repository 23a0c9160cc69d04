"""Review Comments Routes — list and post the comments of one review.

Invariants:
    - review_id validated (400) and checked to exist (404) before comments are touched
    - p/limit validated like the review listing (400 on anything but a positive integer)
    - POST requires username and body; the author must be an existing user
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.config import Settings, get_settings
from game_reviews.core.domain_types import Lookup
from game_reviews.core.enforce_listing_query import (
    to_error, validate_page_window,
)
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.comment import (
    CommentCreate, CommentEnvelope, CommentListEnvelope,
)
from game_reviews.services.check_exists import ExistenceChecker
from game_reviews.services.query_comments import CommentQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reviews", tags=["comments"])


@router.get("/{review_id}/comments", response_model=CommentListEnvelope)
async def list_review_comments(
    review_id: int,
    p: str | None = None,
    limit: str | None = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List one page of a review's comments, newest first."""
    result = validate_page_window(p, limit, settings.default_page_limit)
    if result["status"] == "error":
        raise to_error(result)

    await ExistenceChecker(db).ensure_exists(Lookup.REVIEW_ID, review_id)
    comments = await CommentQueries(db).list_for_review(
        review_id, result["window"],
    )
    return {"comments": comments}


@router.post(
    "/{review_id}/comments",
    response_model=CommentEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_review_comment(
    review_id: int,
    body: CommentCreate,
    db: AsyncSession = Depends(get_db),
):
    """Post a comment on a review as an existing user."""
    checker = ExistenceChecker(db)
    await checker.ensure_exists(Lookup.REVIEW_ID, review_id)
    await checker.ensure_exists(Lookup.USERNAME, body.username)
    comment = await CommentQueries(db).create_comment(
        review_id, author=body.username, body=body.body,
    )
    return {"comment": comment}
