"""User ORM — a reviewer or commenter, keyed by username.

Invariants:
    - username is the primary key and never changes
    - avatar_url is stored as given (no format validation)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from game_reviews.db.base import Base


class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    avatar_url: Mapped[str] = mapped_column(Text, nullable=False)
