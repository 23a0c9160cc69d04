"""Users Routes — list, fetch, create and patch users.

Invariants:
    - Any string is a well-formed username; absence → 404 ('users')
    - POST checks uniqueness before insert → DuplicateKeyError "Username already exists"
    - PATCH changes only name/avatar_url; unknown keys ignored
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.core.domain_types import Lookup
from game_reviews.core.errors import DuplicateKeyError
from game_reviews.infrastructure.database import get_db
from game_reviews.schemas.user import (
    UserCreate, UserEnvelope, UserListEnvelope, UserUpdate,
)
from game_reviews.services.check_exists import ExistenceChecker
from game_reviews.services.query_users import UserQueries

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListEnvelope)
async def list_users(db: AsyncSession = Depends(get_db)):
    """List every user."""
    return {"users": await UserQueries(db).list_users()}


@router.post(
    "", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user; the username must be unused."""
    if await ExistenceChecker(db).exists(Lookup.USERNAME, body.username):
        raise DuplicateKeyError("Username already exists")
    user = await UserQueries(db).create_user(
        body.username, body.name, body.avatar_url,
    )
    return {"user": user}


@router.get("/{username}", response_model=UserEnvelope)
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    """Fetch one user by username."""
    await ExistenceChecker(db).ensure_exists(Lookup.USERNAME, username)
    return {"user": await UserQueries(db).get_user(username)}


@router.patch("/{username}", response_model=UserEnvelope)
async def update_user(
    username: str,
    body: UserUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Change a user's name and/or avatar_url."""
    await ExistenceChecker(db).ensure_exists(Lookup.USERNAME, username)
    changes = body.model_dump(exclude_unset=True) if body else {}
    return {"user": await UserQueries(db).update_user(username, changes)}
