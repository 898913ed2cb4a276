"""Fake event publisher — records published events for testing."""

from reviews.publisher.port import EventPublisher
from reviews.review.errors import PublicationFailed


class FakeEventPublisher(EventPublisher):
    """Publisher that keeps events in memory for test assertions."""

    def __init__(self):
        self.published_events: list = []
        self.should_succeed = True
        self.failure_reason = "Broker unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Broker unavailable"):
        """Configure the fake publisher behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def publish(self, event) -> None:
        if not self.should_succeed:
            raise PublicationFailed(self.failure_reason)
        self.published_events.append(event)

    def reset(self):
        """Clear published events (useful between tests)."""
        self.published_events.clear()
        self.should_succeed = True
        self.failure_reason = "Broker unavailable"
