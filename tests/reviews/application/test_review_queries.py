"""Application tests for the review query service."""

import pytest
from reviews.review.pipeline import create_review, create_review_pipeline
from reviews.review.queries import ReviewQueries, ReviewSummary


def _create(pipeline=None, **overrides):
    defaults = {"product_id": 1, "user_id": "user-001", "rating": 5, "review_text": None}
    defaults.update(overrides)
    return create_review(pipeline=pipeline, **defaults)


class TestReviewsByProduct:
    def test_newest_first(self, clock):
        pipeline = create_review_pipeline(clock=clock)
        first = _create(pipeline, product_id=2, user_id="user-a")
        second = _create(pipeline, product_id=2, user_id="user-b")

        listed = ReviewQueries().reviews_by_product(2)
        assert [r.id for r in listed] == [second.id, first.id]

    def test_only_reviews_of_the_product(self):
        _create(product_id=1)
        _create(product_id=2)
        listed = ReviewQueries().reviews_by_product(1)
        assert [r.product_id for r in listed] == [1]

    def test_lists_more_than_a_hundred_reviews(self):
        for index in range(105):
            _create(product_id=5, user_id=f"user-{index}")
        assert len(ReviewQueries().reviews_by_product(5)) == 105

    def test_unknown_product_has_no_reviews(self):
        assert ReviewQueries().reviews_by_product(404) == []


class TestReviewsByUser:
    def test_only_reviews_of_the_user_newest_first(self, clock):
        pipeline = create_review_pipeline(clock=clock)
        older = _create(pipeline, product_id=1, user_id="user-x")
        _create(pipeline, product_id=1, user_id="user-y")
        newer = _create(pipeline, product_id=2, user_id="user-x")

        listed = ReviewQueries().reviews_by_user("user-x")
        assert [r.id for r in listed] == [newer.id, older.id]

    def test_lists_more_than_a_hundred_reviews(self):
        for product_id in range(1, 106):
            _create(product_id=product_id, user_id="prolific")
        assert len(ReviewQueries().reviews_by_user("prolific")) == 105

    def test_unknown_user_has_no_reviews(self):
        assert ReviewQueries().reviews_by_user("nobody") == []


class TestSummary:
    def test_three_reviews(self):
        for rating in (5, 4, 5):
            _create(product_id=3, rating=rating)

        summary = ReviewQueries().summary(3)
        assert summary.product_id == 3
        assert summary.total_reviews == 3
        assert summary.average_rating == pytest.approx(14 / 3)

    def test_summary_counts_every_review_past_the_first_hundred(self):
        for _ in range(100):
            _create(product_id=3, rating=5)
        _create(product_id=3, rating=1)

        summary = ReviewQueries().summary(3)
        assert summary.total_reviews == 101
        assert summary.average_rating == pytest.approx(501 / 101)

    def test_product_without_reviews(self):
        assert ReviewQueries().summary(42) == ReviewSummary(product_id=42, average_rating=0.0, total_reviews=0)

    def test_other_products_do_not_count(self):
        _create(product_id=3, rating=1)
        _create(product_id=4, rating=5)
        summary = ReviewQueries().summary(4)
        assert summary.total_reviews == 1
        assert summary.average_rating == 5.0

    def test_summary_reflects_new_reviews_immediately(self):
        _create(product_id=6, rating=2)
        assert ReviewQueries().summary(6).average_rating == 2.0

        _create(product_id=6, rating=4)
        summary = ReviewQueries().summary(6)
        assert summary.average_rating == 3.0
        assert summary.total_reviews == 2

    def test_summary_counts_reviews_whose_event_was_lost(self, publisher):
        publisher.configure(should_succeed=False)
        _create(product_id=8, rating=4)
        assert ReviewQueries().summary(8).total_reviews == 1


class FakeStore:
    def __init__(self, reviews):
        self.reviews = reviews
        self.calls = []

    def list_by_product(self, product_id):
        self.calls.append(("product", product_id))
        return self.reviews

    def list_by_user(self, user_id):
        self.calls.append(("user", user_id))
        return self.reviews


class TestDelegation:
    def test_queries_delegate_to_the_store(self):
        store = FakeStore([])
        queries = ReviewQueries(repository=store)
        queries.reviews_by_product(1)
        queries.reviews_by_user("user-001")
        queries.summary(1)
        assert store.calls == [("product", 1), ("user", "user-001"), ("product", 1)]

    def test_summary_is_recomputed_on_every_call(self, clock):
        store = FakeStore([])
        queries = ReviewQueries(repository=store)
        assert queries.summary(1).total_reviews == 0

        store.reviews = [_create(pipeline=create_review_pipeline(clock=clock), rating=3)]
        assert queries.summary(1).total_reviews == 1
