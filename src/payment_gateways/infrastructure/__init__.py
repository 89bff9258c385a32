"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Gateways: The PagSeguro, MercadoPago and Stripe families and their registry
- Output Sinks: Console and in-memory line writers
- Id Provider: Random identifier source for transaction references
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_gateways.infrastructure.id_provider import SequenceIdProvider, UuidIdProvider
from payment_gateways.infrastructure.output_sink import ConsoleOutputSink, MemoryOutputSink
from payment_gateways.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "ConsoleOutputSink",
    "FixedTimeProvider",
    "MemoryOutputSink",
    "SequenceIdProvider",
    "SystemTimeProvider",
    "UuidIdProvider",
]
