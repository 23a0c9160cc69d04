"""Review Schemas — bodies and response shapes for /api/reviews.

Invariants:
    - ReviewCreate requires owner, title, review_body, designer, category
    - ReviewUpdate.inc_votes must be a JSON integer when present (no bool or string coercion)
    - ReviewSummary (listing): 9 fields, carries total_count, no body/designer
    - ReviewDetail (GET/POST): 10 fields, carries comment_count
    - ReviewPatched (PATCH): 9 fields, no comment_count

Design Decisions:
    - PATCH response keeps omitting comment_count: existing clients read it that way
"""

from datetime import datetime

from pydantic import BaseModel, StrictInt


class ReviewCreate(BaseModel):
    owner: str
    title: str
    review_body: str
    designer: str
    category: str
    review_img_url: str | None = None


class ReviewUpdate(BaseModel):
    inc_votes: StrictInt | None = None
    review_body: str | None = None


class ReviewSummary(BaseModel):
    owner: str
    title: str
    review_id: int
    category: str
    review_img_url: str
    created_at: datetime
    votes: int
    comment_count: int
    total_count: int


class ReviewPatched(BaseModel):
    owner: str
    title: str
    review_id: int
    review_body: str
    designer: str
    review_img_url: str
    category: str
    created_at: datetime
    votes: int


class ReviewDetail(ReviewPatched):
    comment_count: int


class ReviewListEnvelope(BaseModel):
    reviews: list[ReviewSummary]


class ReviewEnvelope(BaseModel):
    review: ReviewDetail


class ReviewPatchedEnvelope(BaseModel):
    review: ReviewPatched
