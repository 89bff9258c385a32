from __future__ import annotations

from dataclasses import dataclass

from payment_gateways.domain.exceptions import InvalidCardRuleError

CARD_NUMBER_LENGTH = 16
VISIBLE_DIGITS = 4


@dataclass(frozen=True, slots=True)
class CardRule:
    """Acceptance rule for card numbers.

    Only the length and the leading characters are checked. Digits are
    not required and no checksum is computed.

    accepts() never raises: None, empty and short strings are simply
    not accepted.
    """

    length: int = CARD_NUMBER_LENGTH
    required_prefix: str | None = None

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise InvalidCardRuleError(f"Card length must be greater than 0, got {self.length}")

        if self.required_prefix is not None and not self.required_prefix:
            raise InvalidCardRuleError("Required prefix cannot be empty; use None for no prefix")

    def accepts(self, card_number: str | None) -> bool:
        """Check a card number against this rule.

        Args:
            card_number: The raw card number. Any non-str value is rejected.

        Returns:
            True if the length matches and the required prefix (if any) leads.
        """
        if not isinstance(card_number, str) or not card_number:
            return False

        if len(card_number) != self.length:
            return False

        if self.required_prefix is None:
            return True

        return card_number.startswith(self.required_prefix)


def mask_card_number(card_number: object) -> str:
    """Hide all but the last digits of a card number for log records."""
    if not isinstance(card_number, str):
        return f"<{type(card_number).__name__}>"
    if not card_number:
        return "<empty>"
    if len(card_number) <= VISIBLE_DIGITS:
        return "*" * len(card_number)
    return "*" * (len(card_number) - VISIBLE_DIGITS) + card_number[-VISIBLE_DIGITS:]
