"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from pytest_bdd import given, parsers, then
from reviews.review.errors import PersistenceFailed, StoreUnavailable, ValidationFailed
from reviews.review.events import ReviewCreated
from reviews.review.pipeline import create_review_pipeline
from reviews.review.queries import ReviewQueries


class DownStore:
    def create(self, review):
        raise StoreUnavailable("connection refused")


@pytest.fixture()
def error():
    """Container for captured pipeline errors."""
    return {"exc": None}


@pytest.fixture()
def pipeline_options():
    """Collaborator overrides applied when the When step builds its pipeline."""
    return {}


@pytest.fixture()
def pipeline(pipeline_options, clock):
    return create_review_pipeline(clock=clock, **pipeline_options)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the event broker is down")
def broker_down(publisher):
    publisher.configure(should_succeed=False)


@given("the review store is down")
def store_down(pipeline_options):
    pipeline_options["repository"] = DownStore()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the review is stored with rating {rating:d}"))
def review_stored(review, rating):
    assert review is not None
    listed = ReviewQueries().reviews_by_product(review.product_id)
    assert [r.id for r in listed] == [review.id]
    assert listed[0].rating == rating


@then(parsers.cfparse('the review is rejected with "{message}"'))
def review_rejected(error, message):
    assert isinstance(error["exc"], ValidationFailed)
    assert message in [violation.message for violation in error["exc"].violations]


@then("the review is rejected as not persisted")
def review_not_persisted(error):
    assert isinstance(error["exc"], PersistenceFailed)


@then(parsers.cfparse("product {product_id:d} has no reviews"))
def product_has_no_reviews(product_id):
    assert ReviewQueries().reviews_by_product(product_id) == []


@then(parsers.cfparse("a ReviewCreated event is published for product {product_id:d}"))
def event_published(publisher, product_id):
    assert len(publisher.published_events) == 1
    event = publisher.published_events[0]
    assert isinstance(event, ReviewCreated)
    assert event.product_id == product_id


@then("no event is published")
def no_event_published(publisher):
    assert publisher.published_events == []
