"""Review ORM — a board game review, the primary content entity.

Invariants:
    - review_id assigned by the store (autoincrement), immutable afterwards
    - owner references users.username, category references categories.slug
    - comment_count is NOT a column: always aggregated from comments at query time

Design Decisions:
    - No ORM relationship to comments: deletion is explicit in ReviewQueries.delete_review,
      with ON DELETE CASCADE on comments.review_id as the store-level guarantee
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


DEFAULT_REVIEW_IMG_URL = (
    "https://images.pexels.com/photos/163064/"
    "play-stone-network-networked-interactive-163064.jpeg"
)


class Review(Base):
    __tablename__ = "reviews"

    review_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    designer: Mapped[str] = mapped_column(String(200), nullable=False)
    owner: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    review_img_url: Mapped[str] = mapped_column(
        Text, nullable=False, default=DEFAULT_REVIEW_IMG_URL,
    )
    review_body: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(
        String(100), ForeignKey("categories.slug"), nullable=False,
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
