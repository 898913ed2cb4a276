"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the review rules (product id
above zero, rating 1 to 5, text up to 2000 characters) and match the
field names of the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

# Small catalog so summaries accumulate enough reviews to be meaningful
PRODUCT_ID_RANGE = (1, 50)


def reviewer_id() -> str:
    """Generate opaque user ids like 'LT-jdoe-a1b2c3d4'."""
    return f"LT-{fake.user_name()[:20]}-{uuid.uuid4().hex[:8]}"


def product_id() -> int:
    return random.randint(*PRODUCT_ID_RANGE)


def review_data(product: int | None = None) -> dict:
    """Generate CreateReviewRequest payload matching schema field names."""
    return {
        "product_id": product or product_id(),
        "rating": random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 5])[0],
        "review_text": random.choice([None, fake.paragraph(nb_sentences=3)[:2000]]),
    }


def invalid_review_data() -> dict:
    """Payload the API must reject with 400."""
    return {
        "product_id": product_id(),
        "rating": random.choice([0, 6, -1, 10]),
        "review_text": fake.sentence(),
    }
