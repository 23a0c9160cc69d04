"""Category ORM — a board game genre that reviews are filed under."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
