"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, with no cross-user
sharing. State records what a simulated reviewer has written so later
reads can be checked against it.
"""

from dataclasses import dataclass, field


@dataclass
class ReviewerState:
    """Tracks state for a single simulated reviewer."""

    user_id: str
    product_id: int
    review_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-User-Id": self.user_id}
