"""Integration events emitted by the Reviews domain.

Events are versioned, immutable facts. They are not raised through the
aggregate's unit of work: the CreateReview handler builds them after the
review is persisted and hands them to the configured EventPublisher.
"""

from protean.fields import DateTime, Identifier, Integer, String

from reviews.domain import reviews
from reviews.review.review import MAX_USER_ID_LENGTH


@reviews.event(part_of="Review")
class ReviewCreated:
    """A customer created a review. ``event_id`` lets consumers dedupe."""

    __version__ = "v1"

    event_id = Identifier(required=True)
    review_id = Identifier(required=True)
    product_id = Integer(required=True)
    user_id = String(required=True, max_length=MAX_USER_ID_LENGTH, sanitize=False)
    rating = Integer(required=True)
    occurred_at = DateTime(required=True)
