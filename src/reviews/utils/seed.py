"""Sample reviews for development and demo environments.

Samples go through the command pipeline like any other review, with a
clock that backdates them, and only when the store is still empty.
"""

from datetime import UTC, datetime, timedelta

from protean.utils.globals import current_domain

from reviews.review.pipeline import create_review, create_review_pipeline
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_REVIEWS = [
    {
        "product_id": 1,
        "user_id": "test-user-1",
        "rating": 5,
        "review_text": "Excellent product! Highly recommended.",
        "days_ago": 10,
    },
    {
        "product_id": 1,
        "user_id": "test-user-2",
        "rating": 4,
        "review_text": "Good quality, fast delivery.",
        "days_ago": 5,
    },
    {
        "product_id": 2,
        "user_id": "test-user-1",
        "rating": 3,
        "review_text": "Average product, could be better.",
        "days_ago": 3,
    },
]


def seed_reviews(publisher=None, now=None) -> list[Review]:
    """Create the sample reviews unless the store already holds reviews."""
    repo = current_domain.repository_for(Review)
    if repo._dao.query.limit(1).all().items:
        logger.info("seed_skipped", reason="store not empty")
        return []

    now = now or datetime.now(UTC)
    created = []
    for sample in SAMPLE_REVIEWS:
        created_at = now - timedelta(days=sample["days_ago"])
        pipeline = create_review_pipeline(publisher=publisher, clock=lambda ts=created_at: ts)
        created.append(
            create_review(
                product_id=sample["product_id"],
                user_id=sample["user_id"],
                rating=sample["rating"],
                review_text=sample["review_text"],
                pipeline=pipeline,
            )
        )

    logger.info("seed_completed", count=len(created))
    return created
