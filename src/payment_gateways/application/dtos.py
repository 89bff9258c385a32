"""Data Transfer Objects for use case output."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProcessPaymentResponse:
    """Output DTO for PaymentService.process_payment()."""

    gateway_name: str
    approved: bool
    reference: str | None = None  # None when the card was rejected
