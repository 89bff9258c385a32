from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_gateways.application.ports.card_validator import CardValidator
    from payment_gateways.application.ports.output_sink import OutputSink
    from payment_gateways.application.ports.payment_logger import PaymentLogger
    from payment_gateways.application.ports.transaction_processor import TransactionProcessor


class PaymentFactory(ABC):
    """Abstract factory for one gateway family.

    Contract:
    - Every create_*() call returns a NEW instance
    - The three products returned by one factory belong to the same family;
      a factory never mixes products from different gateways
    - gateway_name identifies the family for display only; clients must
      use it instead of inspecting the factory's concrete type
    - sink is the output every product of this factory writes to; clients
      write their own lines there too so one payment never splits its output
    """

    @property
    @abstractmethod
    def gateway_name(self) -> str:
        """Display name of the family (e.g. "Stripe")."""

    @property
    @abstractmethod
    def sink(self) -> OutputSink:
        """Output shared by the products of this factory."""

    @abstractmethod
    def create_validator(self) -> CardValidator:
        """Return a new validator of this family."""

    @abstractmethod
    def create_processor(self) -> TransactionProcessor:
        """Return a new processor of this family."""

    @abstractmethod
    def create_logger(self) -> PaymentLogger:
        """Return a new logger of this family."""
