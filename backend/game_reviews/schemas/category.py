"""Category Schemas — POST body and response envelopes for /api/categories."""

from pydantic import BaseModel


class CategoryCreate(BaseModel):
    slug: str
    description: str


class CategoryResponse(BaseModel):
    slug: str
    description: str


class CategoryEnvelope(BaseModel):
    category: CategoryResponse


class CategoryListEnvelope(BaseModel):
    categories: list[CategoryResponse]
