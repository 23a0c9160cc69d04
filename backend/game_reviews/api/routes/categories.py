"""Categories Routes — list and create categories.

Invariants:
    - POST requires slug and description (schema-enforced, 400 otherwise)
    - Duplicate slug → DuplicateKeyError (400) checked before insert
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import Lookup
from game_reviews.core.errors import DuplicateKeyError
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.category import (
    CategoryCreate, CategoryEnvelope, CategoryListEnvelope,
)
from game_reviews.services.check_exists import ExistenceChecker
from game_reviews.services.query_categories import CategoryQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=CategoryListEnvelope)
async def list_categories(db: AsyncSession = Depends(get_db)):
    """List every category."""
    return {"categories": await CategoryQueries(db).list_categories()}


@router.post(
    "", response_model=CategoryEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate, db: AsyncSession = Depends(get_db),
):
    """Create a category from slug and description."""
    if await ExistenceChecker(db).exists(Lookup.CATEGORY_SLUG, body.slug):
        raise DuplicateKeyError("Category already exists")
    category = await CategoryQueries(db).create_category(
        body.slug, body.description,
    )
    return {"category": category}
