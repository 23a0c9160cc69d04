"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - comments.review_id cascades on delete of its review

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from game_reviews.models.user import User  # noqa: F401
from game_reviews.models.category import Category  # noqa: F401
from game_reviews.models.review import Review  # noqa: F401
from game_reviews.models.comment import Comment  # noqa: F401
