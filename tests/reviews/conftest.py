from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def reviews_bed():
    from reviews.domain import reviews

    bed = DomainFixture(reviews)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reviews_bed, monkeypatch):
    from reviews.publisher import reset_publisher

    monkeypatch.delenv("REVIEWS_EVENT_PUBLISHER", raising=False)
    reset_publisher()

    with reviews_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()

    reset_publisher()


@pytest.fixture()
def publisher():
    """The configured (fake) event publisher the pipeline uses by default."""
    from reviews.publisher import get_publisher

    return get_publisher()


class SteppingClock:
    """Deterministic UTC clock that advances one second per call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        self.step = step
        self.calls = 0

    def __call__(self):
        current = self.now
        self.now = self.now + self.step
        self.calls += 1
        return current


@pytest.fixture()
def clock():
    return SteppingClock()


@pytest.fixture()
def fixed_clock():
    """A clock that never advances: every review gets the same timestamp."""
    return SteppingClock(step=timedelta(0))
