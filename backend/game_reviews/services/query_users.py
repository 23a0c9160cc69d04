"""User Queries — data access for the users table.

Invariants:
    - Rows returned as plain dicts: {username, name, avatar_url}
    - Callers check existence first (ExistenceChecker); these methods assume it
    - create_user raises DuplicateKeyError if the username was taken in the meantime
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import Username
from game_reviews.core.errors import DuplicateKeyError
from game_reviews.models.user import User

logger = logging.getLogger(__name__)

USER_COLUMNS = (User.username, User.name, User.avatar_url)


class UserQueries:
    """Read and write users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[dict]:
        result = await self.db.execute(
            select(*USER_COLUMNS).order_by(User.username),
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_user(self, username: Username) -> dict | None:
        result = await self.db.execute(
            select(*USER_COLUMNS).where(User.username == username),
        )
        row = result.mappings().first()
        return dict(row) if row else None

    async def create_user(
        self, username: Username, name: str, avatar_url: str,
    ) -> dict:
        user = User(username=username, name=name, avatar_url=avatar_url)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateKeyError("Username already exists")
        logger.info(
            f"User '{username}' created",
            extra={"resource": "users", "resource_id": username},
        )
        return {
            "username": user.username,
            "name": user.name,
            "avatar_url": user.avatar_url,
        }

    async def update_user(self, username: Username, changes: dict) -> dict | None:
        """Apply name/avatar_url changes; other keys are dropped."""
        values = {
            key: value for key, value in changes.items()
            if key in ("name", "avatar_url") and value is not None
        }
        if values:
            await self.db.execute(
                update(User)
                .where(User.username == username)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
            logger.info(
                f"User '{username}' updated: {sorted(values)}",
                extra={"resource": "users", "resource_id": username},
            )
        return await self.get_user(username)
