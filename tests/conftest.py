"""Shared pytest fixtures for the test suite."""

from datetime import datetime

import pytest

from payment_gateways.infrastructure.id_provider import SequenceIdProvider
from payment_gateways.infrastructure.output_sink import MemoryOutputSink
from payment_gateways.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed local timestamp for deterministic log lines."""
    return datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def sink() -> MemoryOutputSink:
    """An in-memory sink recording every console line."""
    return MemoryOutputSink()


@pytest.fixture
def id_provider() -> SequenceIdProvider:
    """An identifier source with one known uuid, then counters."""
    return SequenceIdProvider(["1a2b3c4d-0000-4000-8000-000000000000"])
