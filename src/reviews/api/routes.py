"""FastAPI routes for the Reviews bounded context.

Each route translates between Pydantic schemas (external contract) and
the command pipeline or query service. The caller's identity arrives as
an opaque ``X-User-Id`` header set by the identity layer in front of us.
"""

from threading import Event

from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from reviews.api.schemas import (
    CreateReviewRequest,
    ReviewResponse,
    ReviewSummaryResponse,
    ValidationErrorResponse,
)
from reviews.review.errors import CommandCancelled, PersistenceFailed, ValidationFailed
from reviews.review.pipeline import create_review as create_review_command
from reviews.review.queries import ReviewQueries
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

review_router = APIRouter(prefix="/api/reviews", tags=["reviews"])


def current_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """Opaque id of the authenticated caller, or None."""
    return x_user_id or None


def _to_response(review) -> ReviewResponse:
    return ReviewResponse(
        id=str(review.id),
        product_id=review.product_id,
        user_id=review.user_id,
        rating=review.rating,
        review_text=review.review_text,
        created_at=review.created_at,
    )


@review_router.post("", status_code=201, response_model=ReviewResponse)
async def create_review(
    request: Request,
    body: CreateReviewRequest,
    user_id: str | None = Depends(current_user_id),
) -> ReviewResponse:
    """Create a new product review with rating and optional text."""
    if not user_id:
        raise HTTPException(status_code=400, detail="User must be authenticated")

    # A client that is already gone never reaches the handler
    cancel_token = Event()
    if await request.is_disconnected():
        cancel_token.set()

    review = create_review_command(
        product_id=body.product_id,
        user_id=user_id,
        rating=body.rating,
        review_text=body.review_text,
        cancel_token=cancel_token,
    )
    return _to_response(review)


@review_router.get("/product/{product_id}", response_model=list[ReviewResponse])
async def reviews_by_product(product_id: int) -> list[ReviewResponse]:
    """All reviews of a product, newest first."""
    return [_to_response(review) for review in ReviewQueries().reviews_by_product(product_id)]


@review_router.get("/product/{product_id}/summary", response_model=ReviewSummaryResponse)
async def product_summary(product_id: int) -> ReviewSummaryResponse:
    """Average rating and review count of a product."""
    summary = ReviewQueries().summary(product_id)
    return ReviewSummaryResponse(
        product_id=summary.product_id,
        average_rating=summary.average_rating,
        total_reviews=summary.total_reviews,
    )


@review_router.get("/user", response_model=list[ReviewResponse])
async def reviews_by_user(user_id: str | None = Depends(current_user_id)) -> list[ReviewResponse]:
    """Reviews written by the caller; empty when the caller is anonymous."""
    if not user_id:
        return []
    return [_to_response(review) for review in ReviewQueries().reviews_by_user(user_id)]


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------
def register_exception_handlers(app: FastAPI) -> None:
    """Map Reviews domain errors onto HTTP responses."""

    @app.exception_handler(ValidationFailed)
    async def validation_failed(_request: Request, exc: ValidationFailed):
        body = ValidationErrorResponse(violations=[violation._asdict() for violation in exc.violations])
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(ValidationError)
    async def invalid_data(_request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": exc.messages})

    @app.exception_handler(PersistenceFailed)
    async def persistence_failed(_request: Request, exc: PersistenceFailed):
        logger.error("create_review_persistence_failed", error=str(exc.cause))
        return JSONResponse(status_code=503, content={"error": "Review could not be saved, try again later"})

    @app.exception_handler(CommandCancelled)
    async def command_cancelled(_request: Request, _exc: CommandCancelled):
        return JSONResponse(status_code=499, content={"error": "Request cancelled"})
