"""Shared machinery for gateway families.

A family is a GatewayProfile plus one subclass each of GatewayValidator,
GatewayProcessor, GatewayLogger and GatewayFactory, all pointing at the
same profile. Adding a family means adding a module like stripe.py;
nothing in this file or in the existing families changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from payment_gateways.application.ports import (
    CardValidator,
    PaymentFactory,
    PaymentLogger,
    TransactionProcessor,
)
from payment_gateways.domain.value_objects import CardRule, TransactionReference
from payment_gateways.infrastructure.id_provider import UuidIdProvider
from payment_gateways.infrastructure.output_sink import ConsoleOutputSink
from payment_gateways.infrastructure.time_provider import SystemTimeProvider

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import IdProvider, OutputSink, TimeProvider

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True, slots=True)
class GatewayProfile:
    """Everything that differs between two gateway families.

    Attributes:
        name: Display name used in every console line (e.g. "MercadoPago").
        reference_prefix: Tag in front of transaction references (e.g. "MP").
        currency_format: Amount rendering; must contain "{amount}".
        card_rule: Cards the gateway accepts.
    """

    name: str
    reference_prefix: str
    currency_format: str
    card_rule: CardRule

    def format_amount(self, amount: Decimal) -> str:
        # fixed-point, never exponent notation
        return self.currency_format.format(amount=f"{amount:f}")


class GatewayValidator(CardValidator):
    profile: ClassVar[GatewayProfile]

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def validate_card(self, card_number: str) -> bool:
        self._sink.write_line(f"{self.profile.name}: Validando cartão...")
        return self.profile.card_rule.accepts(card_number)


class GatewayProcessor(TransactionProcessor):
    profile: ClassVar[GatewayProfile]

    def __init__(self, sink: OutputSink, id_provider: IdProvider) -> None:
        self._sink = sink
        self._id_provider = id_provider

    def process_transaction(self, amount: Decimal, card_number: str) -> str:  # noqa: ARG002
        self._sink.write_line(
            f"{self.profile.name}: Processando {self.profile.format_amount(amount)}..."
        )
        reference = TransactionReference.from_identifier(
            self.profile.reference_prefix, self._id_provider.new_id()
        )
        return str(reference)


class GatewayLogger(PaymentLogger):
    profile: ClassVar[GatewayProfile]

    def __init__(self, sink: OutputSink, time_provider: TimeProvider) -> None:
        self._sink = sink
        self._time_provider = time_provider

    def log(self, message: str) -> None:
        timestamp = self._time_provider.now().strftime(TIMESTAMP_FORMAT)
        self._sink.write_line(f"[{self.profile.name} Log] {timestamp}: {message}")


class GatewayFactory(PaymentFactory):
    """Base for concrete family factories.

    Subclasses set the profile and the three product classes. Collaborators
    default to the console, the system clock and uuid4(); tests inject
    deterministic ones. Every product of one factory shares them.
    """

    profile: ClassVar[GatewayProfile]
    validator_class: ClassVar[type[GatewayValidator]]
    processor_class: ClassVar[type[GatewayProcessor]]
    logger_class: ClassVar[type[GatewayLogger]]

    def __init__(
        self,
        sink: OutputSink | None = None,
        time_provider: TimeProvider | None = None,
        id_provider: IdProvider | None = None,
    ) -> None:
        self._sink = sink or ConsoleOutputSink()
        self._time_provider = time_provider or SystemTimeProvider()
        self._id_provider = id_provider or UuidIdProvider()

    @property
    def gateway_name(self) -> str:
        return self.profile.name

    @property
    def sink(self) -> OutputSink:
        return self._sink

    def create_validator(self) -> GatewayValidator:
        return self.validator_class(self._sink)

    def create_processor(self) -> GatewayProcessor:
        return self.processor_class(self._sink, self._id_provider)

    def create_logger(self) -> GatewayLogger:
        return self.logger_class(self._sink, self._time_provider)
