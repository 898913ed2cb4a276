"""Event publisher port — abstract interface for integration event delivery.

The CreateReview handler programs against this port; adapters are
swapped via configuration. Delivery guarantees (at-least-once, retries,
backoff) belong to the transport behind an adapter, not to the port.
"""

from abc import ABC, abstractmethod


class EventPublisher(ABC):
    """Abstract interface for event publisher adapters."""

    @abstractmethod
    def publish(self, event) -> None:
        """Hand ``event`` to the transport.

        Raises:
            PublicationFailed: when the transport did not accept the event.
        """
        ...
