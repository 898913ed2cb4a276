"""Reviews load test scenarios.

ReviewerJourney is a stateful SequentialTaskSet: write a review, then
read it back through the product listing, the summary and the
reviewer's own listing. ReviewBrowserUser models read-heavy traffic and
ReviewFloodUser saturates the write path.
"""

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import invalid_review_data, product_id, review_data, reviewer_id
from loadtests.helpers.state import ReviewerState


class ReviewerJourney(SequentialTaskSet):
    """Create Review -> List Product -> Summary -> List Mine.

    Generates 1 event: ReviewCreated.
    """

    def on_start(self):
        self.state = ReviewerState(user_id=reviewer_id(), product_id=product_id())

    @task
    def create_review(self):
        with self.client.post(
            "/api/reviews",
            json=review_data(self.state.product_id),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/reviews",
        ) as resp:
            if resp.status_code == 201:
                self.state.review_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Create review failed: {resp.status_code}")
                self.interrupt()

    @task
    def list_product_reviews(self):
        with self.client.get(
            f"/api/reviews/product/{self.state.product_id}",
            catch_response=True,
            name="GET /api/reviews/product/{id}",
        ) as resp:
            ids = [review["id"] for review in resp.json()] if resp.status_code == 200 else []
            if self.state.review_ids[-1] not in ids:
                resp.failure("Created review missing from product listing")

    @task
    def product_summary(self):
        with self.client.get(
            f"/api/reviews/product/{self.state.product_id}/summary",
            catch_response=True,
            name="GET /api/reviews/product/{id}/summary",
        ) as resp:
            if resp.status_code != 200 or resp.json()["total_reviews"] < 1:
                resp.failure(f"Summary failed: {resp.status_code}")

    @task
    def list_my_reviews(self):
        with self.client.get(
            "/api/reviews/user",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/reviews/user",
        ) as resp:
            if resp.status_code != 200 or len(resp.json()) != len(self.state.review_ids):
                resp.failure("Reviewer listing does not match reviews written")

    @task
    def submit_invalid_review(self):
        with self.client.post(
            "/api/reviews",
            json=invalid_review_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/reviews [invalid]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Invalid review not rejected: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ReviewWorkloadUser(HttpUser):
    """Full reviewer journeys at a human pace."""

    wait_time = between(1, 3)
    tasks = [ReviewerJourney]


class ReviewBrowserUser(HttpUser):
    """Read-heavy traffic: shoppers browsing listings and summaries."""

    wait_time = between(0.5, 2)

    @task(3)
    def browse_product(self):
        self.client.get(
            f"/api/reviews/product/{product_id()}",
            name="GET /api/reviews/product/{id}",
        )

    @task(5)
    def view_summary(self):
        self.client.get(
            f"/api/reviews/product/{product_id()}/summary",
            name="GET /api/reviews/product/{id}/summary",
        )


class ReviewFloodUser(HttpUser):
    """Stress test: maximum review throughput, one ReviewCreated per request."""

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task
    def create_review(self):
        self.client.post(
            "/api/reviews",
            json=review_data(),
            headers={"X-User-Id": reviewer_id()},
            name="[STRESS] POST /api/reviews",
        )
