from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal


class TransactionProcessor(ABC):
    """Port for charging a card.

    Contract:
    - process_transaction() always succeeds; there is no failure mode
    - The returned reference is "<PREFIX>-" followed by exactly 8 characters
    - amount is NOT validated; zero and negative values are processed as given
    """

    @abstractmethod
    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        """Charge the card and return a fresh transaction reference.

        Args:
            amount: Amount to charge, in the gateway's currency.
            card_number: Card previously accepted by the family's validator.

        Returns:
            The transaction reference string.
        """
