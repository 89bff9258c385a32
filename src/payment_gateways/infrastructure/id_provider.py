from __future__ import annotations

from uuid import uuid4

from payment_gateways.application.ports import IdProvider


class UuidIdProvider(IdProvider):
    """Production identifier source backed by uuid4()."""

    def new_id(self) -> str:
        return str(uuid4())


class SequenceIdProvider(IdProvider):
    """Test identifier source returning predictable identifiers.

    Yields the given identifiers in order, then falls back to
    zero-padded counters ("00000001", "00000002", ...).
    """

    def __init__(self, identifiers: list[str] | None = None) -> None:
        self._pending = list(identifiers or [])
        self._counter = 0

    def new_id(self) -> str:
        if self._pending:
            return self._pending.pop(0)
        self._counter += 1
        return f"{self._counter:08d}"
