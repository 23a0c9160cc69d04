"""Comment Schemas — bodies and response shapes for comments.

Invariants:
    - CommentCreate requires username and body; extras ignored
    - CommentUpdate.inc_votes must be a JSON integer when present (no bool or string coercion)
    - CommentSummary (listing under a review): 5 fields, no review_id
    - CommentResponse (single comment): 6 fields
"""

from datetime import datetime

from pydantic import BaseModel, StrictInt


class CommentCreate(BaseModel):
    username: str
    body: str


class CommentUpdate(BaseModel):
    inc_votes: StrictInt | None = None
    body: str | None = None


class CommentSummary(BaseModel):
    comment_id: int
    votes: int
    created_at: datetime
    author: str
    body: str


class CommentResponse(CommentSummary):
    review_id: int


class CommentListEnvelope(BaseModel):
    comments: list[CommentSummary]


class CommentEnvelope(BaseModel):
    comment: CommentResponse
