"""BDD tests for review creation."""

from pytest_bdd import parsers, scenarios, when
from reviews.review.errors import ReviewsError, ValidationFailed
from reviews.review.pipeline import create_review

scenarios("features/review_creation.feature")


def _attempt(pipeline, error, **fields):
    try:
        return create_review(pipeline=pipeline, **fields)
    except (ValidationFailed, ReviewsError) as exc:
        error["exc"] = exc
        return None


@when(
    parsers.cfparse('user "{user_id}" reviews product {product_id:d} with rating {rating:d} and text "{text}"'),
    target_fixture="review",
)
def review_with_text(pipeline, error, user_id, product_id, rating, text):
    return _attempt(pipeline, error, product_id=product_id, user_id=user_id, rating=rating, review_text=text)


@when(
    parsers.cfparse('user "{user_id}" reviews product {product_id:d} with rating {rating:d}'),
    target_fixture="review",
)
def review_without_text(pipeline, error, user_id, product_id, rating):
    return _attempt(pipeline, error, product_id=product_id, user_id=user_id, rating=rating)
