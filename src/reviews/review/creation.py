"""CreateReview — record a customer's review of a product.

The handler runs two steps with independent failure domains: the
review is persisted first, then a ReviewCreated event is published on a
best-effort basis. A failed write publishes nothing and surfaces as
``PersistenceFailed``; a failed publish is logged and the stored review
is still returned, since every read recomputes from the store.
"""

from datetime import UTC, datetime
from uuid import uuid4

from protean.fields import Integer, Text
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.errors import PersistenceFailed, StoreUnavailable
from reviews.review.events import ReviewCreated
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


# Unconstrained and unescaped; validate_create_review owns the input rules.
@reviews.command(part_of="Review")
class CreateReview:
    product_id = Integer()
    user_id = Text(sanitize=False)
    rating = Integer()
    review_text = Text(sanitize=False)


class CreateReviewHandler:
    """Persist a review, then publish ``ReviewCreated``.

    Args:
        repository: the review store; defaults to the domain's ReviewRepository.
        publisher: an EventPublisher; defaults to the configured adapter.
        clock: returns the UTC timestamp stamped on reviews and events.
    """

    def __init__(self, repository=None, publisher=None, clock=utc_now):
        self._repository = repository
        self._publisher = publisher
        self._clock = clock

    @property
    def repository(self):
        if self._repository is None:
            return current_domain.repository_for(Review)
        return self._repository

    @property
    def publisher(self):
        if self._publisher is None:
            from reviews.publisher import get_publisher

            return get_publisher()
        return self._publisher

    def __call__(self, command: CreateReview) -> Review:
        review = Review.create(
            product_id=command.product_id,
            user_id=command.user_id,
            rating=command.rating,
            review_text=command.review_text,
            created_at=self._clock(),
        )

        try:
            stored = self.repository.create(review)
        except StoreUnavailable as exc:
            raise PersistenceFailed(exc) from exc

        logger.info(
            "review_created",
            review_id=str(stored.id),
            product_id=stored.product_id,
            user_id=stored.user_id,
        )

        self._publish_created(stored)
        return stored

    def _publish_created(self, review: Review) -> None:
        event_id = str(uuid4())
        try:
            event = ReviewCreated(
                event_id=event_id,
                review_id=str(review.id),
                product_id=review.product_id,
                user_id=review.user_id,
                rating=review.rating,
                occurred_at=self._clock(),
            )
            self.publisher.publish(event)
        except Exception as exc:
            # The review is already committed; consumers may miss this event.
            logger.warning(
                "review_created_publication_failed",
                review_id=str(review.id),
                event_id=event_id,
                error=str(exc),
                exc_info=True,
            )
