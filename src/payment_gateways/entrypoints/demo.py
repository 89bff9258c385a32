"""Console walkthrough: one payment through PagSeguro, one through MercadoPago."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_gateways.application.use_cases import PaymentService
from payment_gateways.infrastructure import ConsoleOutputSink
from payment_gateways.infrastructure.gateways import MercadoPagoFactory, PagSeguroFactory

if TYPE_CHECKING:
    from payment_gateways.application.ports import OutputSink

HEADER = "=== Sistema de Pagamentos ==="

logger = logging.getLogger(__name__)


def run_demo(sink: OutputSink) -> None:
    sink.write_line(HEADER)
    sink.write_line("")

    pagseguro_service = PaymentService(PagSeguroFactory(sink=sink))
    pagseguro_service.process_payment(Decimal("150.00"), "1234567890123456")

    sink.write_line("")

    mercadopago_service = PaymentService(MercadoPagoFactory(sink=sink))
    mercadopago_service.process_payment(Decimal("200.00"), "5234567890123456")

    sink.write_line("")


def main() -> int:
    # stderr only; stdout carries the demo lines
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    run_demo(ConsoleOutputSink())
    logger.debug("Demo finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
