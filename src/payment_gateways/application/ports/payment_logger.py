from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentLogger(ABC):
    """Port for the gateway's transaction log.

    Each line carries the gateway tag, the current local time and the message.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Write one timestamped, gateway-tagged line."""
