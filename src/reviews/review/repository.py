"""ReviewRepository: the store of record for reviews.

Reviews are never updated or deleted, so the repository only exposes
creation and the two newest-first listings on top of Protean's base
repository.
"""

from protean.exceptions import ValidationError

from reviews.domain import reviews
from reviews.review.errors import StoreUnavailable
from reviews.review.review import Review
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


def newest_first(items) -> list[Review]:
    """Sort by ``created_at`` descending. Equal timestamps keep the order the store returned."""
    return sorted(items, key=lambda review: review.created_at, reverse=True)


@reviews.repository(part_of=Review)
class ReviewRepository:
    def create(self, review: Review) -> Review:
        """Persist a new review, raising ``StoreUnavailable`` if the provider fails."""
        try:
            return self.add(review)
        except ValidationError:
            raise
        except Exception as exc:
            logger.error("review_store_unavailable", review_id=str(review.id), error=str(exc))
            raise StoreUnavailable(str(exc)) from exc

    def list_by_product(self, product_id: int) -> list[Review]:
        return newest_first(self._listing(product_id=product_id))

    def list_by_user(self, user_id: str) -> list[Review]:
        return newest_first(self._listing(user_id=user_id))

    def _listing(self, **filters) -> list[Review]:
        # Every match, not the aggregate's default page of 100
        return self._dao.query.filter(**filters).order_by("-created_at").limit(None).all().items
