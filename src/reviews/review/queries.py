"""Read side of the Reviews domain.

Nothing here is stored: listings come straight from the ReviewRepository
and summaries are recomputed from the product's reviews on every call,
so they can never drift from the store of record.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from reviews.review.review import Review


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregate rating of one product."""

    product_id: int
    average_rating: float
    total_reviews: int


def summarize(product_id: int, reviews) -> ReviewSummary:
    """Arithmetic mean and count of ``reviews``. No reviews gives 0.0 and 0."""
    ratings = [review.rating for review in reviews]
    if not ratings:
        return ReviewSummary(product_id=product_id, average_rating=0.0, total_reviews=0)
    return ReviewSummary(
        product_id=product_id,
        average_rating=sum(ratings) / len(ratings),
        total_reviews=len(ratings),
    )


class ReviewQueries:
    def __init__(self, repository=None):
        self._repository = repository

    @property
    def repository(self):
        if self._repository is None:
            return current_domain.repository_for(Review)
        return self._repository

    def reviews_by_product(self, product_id: int) -> list[Review]:
        return self.repository.list_by_product(product_id)

    def reviews_by_user(self, user_id: str) -> list[Review]:
        return self.repository.list_by_user(user_id)

    def summary(self, product_id: int) -> ReviewSummary:
        return summarize(product_id, self.repository.list_by_product(product_id))
