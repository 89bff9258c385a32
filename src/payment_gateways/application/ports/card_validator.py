from __future__ import annotations

from abc import ABC, abstractmethod


class CardValidator(ABC):
    """Port for gateway-specific card validation.

    Contract:
    - validate_card() MUST NOT raise for malformed input (None, "", short strings)
    - validate_card() returns False for anything the gateway would refuse
    - The only side effect allowed is an informational trace line
    """

    @abstractmethod
    def validate_card(self, card_number: str) -> bool:
        """Return True if the gateway accepts the card number."""
