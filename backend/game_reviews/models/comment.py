"""Comment ORM — a reply attached to exactly one review.

Invariants:
    - comment_id assigned by the store (autoincrement), immutable afterwards
    - review_id must reference an existing review at creation time
    - author references users.username
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class Comment(Base):
    __tablename__ = "comments"

    comment_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    review_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reviews.review_id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False,
    )
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
