"""Reviews Routes — paginated listing, fetch, create, patch and delete reviews.

Invariants:
    - Listing validation order: sort_by/order (404), p/limit (400), then category (404)
    - Non-integer review_id → 400 (path validation); unknown review_id → 404 ('reviews')
    - PATCH ignores unknown keys; its response omits comment_count
    - DELETE answers 204 with an empty body and removes the review's comments too

Design Decisions:
    - Listing query params accepted as raw strings and validated by
      core.enforce_listing_query, so bad sort_by/order can answer 404
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.config import Settings, get_settings
from game_reviews.core.domain_types import Lookup
from game_reviews.core.enforce_listing_query import (
    to_error, validate_review_listing,
)
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.review import (
    ReviewCreate,
    ReviewEnvelope,
    ReviewListEnvelope,
    ReviewPatchedEnvelope,
    ReviewUpdate,
)
from game_reviews.services.check_exists import ExistenceChecker
from game_reviews.services.query_reviews import ReviewQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.get("", response_model=ReviewListEnvelope)
async def list_reviews(
    sort_by: str | None = None,
    order: str | None = None,
    category: str | None = None,
    p: str | None = None,
    limit: str | None = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """List reviews with optional sorting, category filter and pagination."""
    result = validate_review_listing(
        sort_by, order, category, p, limit,
        default_limit=settings.default_page_limit,
    )
    if result["status"] == "error":
        raise to_error(result)

    query = result["query"]
    if query.category is not None:
        await ExistenceChecker(db).ensure_exists(
            Lookup.REVIEW_CATEGORY, query.category,
        )
    return {"reviews": await ReviewQueries(db).list_reviews(query)}


@router.post(
    "", response_model=ReviewEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_review(
    body: ReviewCreate, db: AsyncSession = Depends(get_db),
):
    """Create a review; owner and category must already exist."""
    checker = ExistenceChecker(db)
    await checker.ensure_exists(Lookup.USERNAME, body.owner)
    await checker.ensure_exists(Lookup.CATEGORY_SLUG, body.category)
    review = await ReviewQueries(db).create_review(
        owner=body.owner,
        title=body.title,
        review_body=body.review_body,
        designer=body.designer,
        category=body.category,
        review_img_url=body.review_img_url,
    )
    return {"review": review}


@router.get("/{review_id}", response_model=ReviewEnvelope)
async def get_review(review_id: int, db: AsyncSession = Depends(get_db)):
    """Fetch one review with its comment_count."""
    await ExistenceChecker(db).ensure_exists(Lookup.REVIEW_ID, review_id)
    return {"review": await ReviewQueries(db).get_review(review_id)}


@router.patch("/{review_id}", response_model=ReviewPatchedEnvelope)
async def update_review(
    review_id: int,
    body: ReviewUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Add inc_votes to votes and/or replace review_body."""
    await ExistenceChecker(db).ensure_exists(Lookup.REVIEW_ID, review_id)
    body = body or ReviewUpdate()
    review = await ReviewQueries(db).update_review(
        review_id, inc_votes=body.inc_votes, review_body=body.review_body,
    )
    return {"review": review}


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(review_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a review and its comments."""
    await ExistenceChecker(db).ensure_exists(Lookup.REVIEW_ID, review_id)
    await ReviewQueries(db).delete_review(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
