"""Ports - Abstract interfaces for gateway products and external collaborators.

Ports define the contracts that infrastructure adapters must implement.
PaymentService only ever sees these types, never a concrete gateway.
"""

from payment_gateways.application.ports.card_validator import CardValidator
from payment_gateways.application.ports.id_provider import IdProvider
from payment_gateways.application.ports.output_sink import OutputSink
from payment_gateways.application.ports.payment_factory import PaymentFactory
from payment_gateways.application.ports.payment_logger import PaymentLogger
from payment_gateways.application.ports.time_provider import TimeProvider
from payment_gateways.application.ports.transaction_processor import TransactionProcessor

__all__ = [
    "CardValidator",
    "IdProvider",
    "OutputSink",
    "PaymentFactory",
    "PaymentLogger",
    "TimeProvider",
    "TransactionProcessor",
]
