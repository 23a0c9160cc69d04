"""Request bodies — required keys, ignored extras and type checks.

Tests cover:
    - Missing required keys raise ValidationError
    - Unknown keys are dropped, not rejected
    - inc_votes must be a JSON integer (no bool, string or float); usernames must be strings
"""

import pytest
from pydantic import ValidationError

from game_reviews.schemas.category import CategoryCreate
from game_reviews.schemas.comment import CommentCreate, CommentUpdate
from game_reviews.schemas.review import ReviewCreate, ReviewUpdate
from game_reviews.schemas.user import UserCreate, UserUpdate


REVIEW = {
    "owner": "mallionaire",
    "title": "Catan",
    "review_body": "trade wheat for sheep",
    "designer": "Klaus Teuber",
    "category": "euro game",
}


def test_review_create_ignores_extras():
    body = ReviewCreate(**REVIEW, extra="dropped")
    assert body.review_img_url is None
    assert "extra" not in body.model_dump()


@pytest.mark.parametrize("missing", sorted(REVIEW))
def test_review_create_requires_every_field(missing):
    data = {k: v for k, v in REVIEW.items() if k != missing}
    with pytest.raises(ValidationError):
        ReviewCreate(**data)


@pytest.mark.parametrize("inc_votes", ["wrong", "5", True, 1.5])
def test_review_update_rejects_non_integer_votes(inc_votes):
    with pytest.raises(ValidationError):
        ReviewUpdate(inc_votes=inc_votes)


def test_review_update_all_optional():
    body = ReviewUpdate()
    assert body.inc_votes is None
    assert body.review_body is None


def test_comment_create_requires_username_and_body():
    with pytest.raises(ValidationError):
        CommentCreate(body="text")
    with pytest.raises(ValidationError):
        CommentCreate(username="dav3rid")


@pytest.mark.parametrize("inc_votes", ["wrong", True, False])
def test_comment_update_rejects_non_integer_votes(inc_votes):
    with pytest.raises(ValidationError):
        CommentUpdate(inc_votes=inc_votes)


def test_user_create_requires_string_username():
    with pytest.raises(ValidationError):
        UserCreate(username=123, name="n", avatar_url="a")


def test_user_update_tracks_set_fields():
    body = UserUpdate(name="new name", wrong="x")
    assert body.model_dump(exclude_unset=True) == {"name": "new name"}


def test_category_create_requires_both_fields():
    with pytest.raises(ValidationError):
        CategoryCreate(slug="only slug")
