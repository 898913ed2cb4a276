"""Broker event publisher — hands events to the domain's configured broker.

The broker is whatever ``[brokers.default]`` names in domain.toml: the
inline broker in development and tests, Redis Streams in production.
Each event type gets its own stream, e.g. ``reviews::ReviewCreated``.
"""

import json

from protean.utils.globals import current_domain

from reviews.publisher.port import EventPublisher
from reviews.review.errors import PublicationFailed
from reviews.utils.logging import get_logger

logger = get_logger(__name__)


def stream_for(event) -> str:
    return f"reviews::{type(event).__name__}"


def serialize(event) -> dict:
    """Event payload as a JSON-safe dict."""
    return json.loads(json.dumps(event.to_dict(), default=str))


class BrokerEventPublisher(EventPublisher):
    def __init__(self, broker=None, broker_name: str = "default"):
        self._broker = broker
        self._broker_name = broker_name

    @property
    def broker(self):
        if self._broker is None:
            return current_domain.brokers[self._broker_name]
        return self._broker

    def publish(self, event) -> None:
        stream = stream_for(event)
        try:
            message_id = self.broker.publish(stream, serialize(event))
        except Exception as exc:
            raise PublicationFailed(exc) from exc
        logger.debug("event_published", stream=stream, message_id=message_id)
