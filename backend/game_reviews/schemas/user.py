"""User Schemas — POST/PATCH bodies and response envelopes for /api/users.

Invariants:
    - UserCreate requires username, name, avatar_url (all strings)
    - UserUpdate fields are optional; only name and avatar_url can change
"""

from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str
    name: str
    avatar_url: str


class UserUpdate(BaseModel):
    name: str | None = None
    avatar_url: str | None = None


class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListEnvelope(BaseModel):
    users: list[UserResponse]
