"""Use cases - Application workflows built on ports."""

from payment_gateways.application.use_cases.process_payment import PaymentService

__all__ = [
    "PaymentService",
]
