"""Review aggregate: a customer's star rating of a product.

Reviews are write-once. There are no state transitions, edits or
removals; a review is built by the CreateReview handler, persisted by
the ReviewRepository and only ever read afterwards.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String, Text

from reviews.domain import reviews

MIN_RATING = 1
MAX_RATING = 5
MAX_USER_ID_LENGTH = 256
MAX_REVIEW_TEXT_LENGTH = 2000


@reviews.aggregate
class Review:
    """A customer's review of a product.

    ``id`` is generated when the review is built and never changes;
    ``created_at`` comes from the handler's clock, never from the client.
    """

    product_id = Integer(required=True)
    user_id = String(required=True, max_length=MAX_USER_ID_LENGTH, sanitize=False)
    rating = Integer(required=True)
    review_text = Text(sanitize=False)
    created_at = DateTime(required=True)

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def product_id_must_be_positive(self):
        if self.product_id is not None and self.product_id <= 0:
            raise ValidationError({"product_id": ["ProductId must be greater than 0"]})

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    @invariant.post
    def review_text_within_limit(self):
        if self.review_text and len(self.review_text) > MAX_REVIEW_TEXT_LENGTH:
            raise ValidationError(
                {"review_text": [f"Review text must not exceed {MAX_REVIEW_TEXT_LENGTH} characters"]}
            )

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, product_id, user_id, rating, review_text=None, created_at=None):
        """Build a new review, stamped with ``created_at`` (defaults to now)."""
        return cls(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            review_text=review_text,
            created_at=created_at or datetime.now(UTC),
        )
