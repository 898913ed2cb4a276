"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
Field rules are not repeated here: the command pipeline's validator
reports every violation in one response.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateReviewRequest(BaseModel):
    product_id: int
    rating: int
    review_text: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewResponse(BaseModel):
    id: str
    product_id: int
    user_id: str
    rating: int
    review_text: str | None = None
    created_at: datetime


class ReviewSummaryResponse(BaseModel):
    product_id: int
    average_rating: float
    total_reviews: int


class ViolationSchema(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    error: str = "Validation failed"
    violations: list[ViolationSchema]
