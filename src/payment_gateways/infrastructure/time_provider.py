from datetime import datetime

from payment_gateways.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Production time provider using the local system clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedTimeProvider(TimeProvider):
    """Test time provider with controllable fixed timestamp.

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time for testing scenarios."""
        self._fixed_time = new_time
