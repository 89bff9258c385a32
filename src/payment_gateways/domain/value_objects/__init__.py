"""Value objects - Immutable objects defined by their attributes."""

from payment_gateways.domain.value_objects.card_rule import CardRule, mask_card_number
from payment_gateways.domain.value_objects.transaction_reference import TransactionReference

__all__ = [
    "CardRule",
    "TransactionReference",
    "mask_card_number",
]
