"""User and Category Queries — inserts that lose a uniqueness race.

Tests cover:
    - create_user with a taken username raises DuplicateKeyError, not DatabaseError
    - create_category with a taken slug raises DuplicateKeyError
    - The session stays usable after the failed insert
"""

import pytest

from game_reviews.core.errors import DuplicateKeyError
from game_reviews.services.query_categories import CategoryQueries
from game_reviews.services.query_users import UserQueries


async def test_create_user_with_taken_username(test_db):
    queries = UserQueries(test_db)
    with pytest.raises(DuplicateKeyError) as exc_info:
        await queries.create_user("mallionaire", "someone else", "www.url.com")
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Username already exists"

    user = await queries.get_user("mallionaire")
    assert user["name"] == "haz"


async def test_create_category_with_taken_slug(test_db):
    queries = CategoryQueries(test_db)
    with pytest.raises(DuplicateKeyError) as exc_info:
        await queries.create_category("euro game", "again")
    assert exc_info.value.to_response() == {"msg": "Category already exists"}

    assert len(await queries.list_categories()) == 4
