"""Event publisher adapter registry — pluggable integration event delivery.

Uses FakeEventPublisher by default. In production, set
REVIEWS_EVENT_PUBLISHER=broker to publish through the domain's broker.
"""

import os

_publisher_instance = None


def get_publisher():
    """Return the configured event publisher (singleton)."""
    global _publisher_instance
    if _publisher_instance is None:
        adapter = os.environ.get("REVIEWS_EVENT_PUBLISHER", "fake")
        if adapter == "fake":
            from reviews.publisher.fake_publisher import FakeEventPublisher

            _publisher_instance = FakeEventPublisher()
        elif adapter == "broker":
            from reviews.publisher.broker_publisher import BrokerEventPublisher

            _publisher_instance = BrokerEventPublisher()
        else:
            raise ValueError(f"Unknown event publisher: {adapter}")
    return _publisher_instance


def reset_publisher():
    """Reset the publisher singleton (useful for testing)."""
    global _publisher_instance
    _publisher_instance = None
