"""Category Queries — data access for the categories table."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import CategorySlug
from game_reviews.core.errors import DuplicateKeyError
from game_reviews.models.category import Category

logger = logging.getLogger(__name__)


class CategoryQueries:
    """Read and create categories. Categories are immutable once created."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> list[dict]:
        result = await self.db.execute(
            select(Category.slug, Category.description).order_by(Category.slug),
        )
        return [dict(row) for row in result.mappings().all()]

    async def create_category(self, slug: CategorySlug, description: str) -> dict:
        category = Category(slug=slug, description=description)
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateKeyError("Category already exists")
        logger.info(
            f"Category '{slug}' created",
            extra={"resource": "categories", "resource_id": slug},
        )
        return {"slug": category.slug, "description": category.description}
