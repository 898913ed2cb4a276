"""Reviews bounded context: product reviews and rating summaries.

Reviews are created through an explicit command pipeline (logging,
validation, persistence, then best-effort publication of a ReviewCreated
integration event). Read paths recompute everything from the store of
record on each call.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
