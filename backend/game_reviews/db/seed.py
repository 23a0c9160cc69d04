"""Seed Loader — inserts a dataset of categories, users, reviews and comments.

Invariants:
    - Insert order follows foreign keys: categories, users, reviews, comments
    - review_id/comment_id are NOT taken from the data: the store assigns them in list
      order, so comments reference reviews by their 1-based position
    - created_at values are epoch milliseconds (UTC)

Design Decisions:
    - ORM inserts, not raw SQL: same code path for PostgreSQL and SQLite
    - Flush between tables so autoincrement ids exist before dependants are added
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models.category import Category
from game_reviews.models.comment import Comment
from game_reviews.models.review import Review
from game_reviews.models.user import User

logger = logging.getLogger(__name__)

SEED_TABLES = ("categories", "users", "reviews", "comments")


def from_epoch_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


async def seed_database(session: AsyncSession, data: dict) -> None:
    """Insert every row of data and commit."""
    session.add_all(Category(**row) for row in data.get("categories", []))
    session.add_all(User(**row) for row in data.get("users", []))
    await session.flush()

    for row in data.get("reviews", []):
        session.add(Review(**_with_timestamp(row)))
    await session.flush()

    for row in data.get("comments", []):
        session.add(Comment(**_with_timestamp(row)))
    await session.commit()

    counts = {table: len(data.get(table, [])) for table in SEED_TABLES}
    logger.info(f"Database seeded: {counts}")


def _with_timestamp(row: dict) -> dict:
    row = dict(row)
    if "created_at" in row:
        row["created_at"] = from_epoch_ms(row["created_at"])
    return row
