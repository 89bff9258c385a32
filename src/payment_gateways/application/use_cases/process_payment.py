from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_gateways.application.dtos import ProcessPaymentResponse
from payment_gateways.domain.value_objects import mask_card_number

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import PaymentFactory

logger = logging.getLogger(__name__)

PROCESSED_MESSAGE = "Transação processada: {reference}"
INVALID_CARD_MESSAGE = "{gateway}: Cartão inválido"


class PaymentService:
    """Orchestrates the single-payment workflow for one gateway family.

    Responsibilities:
    - Obtain a validator, processor and logger from the factory, once
    - Validate the card FIRST; an invalid card ends the workflow
    - Process the transaction, then log its reference
    - Write its own lines to the factory's sink, next to the products' lines

    The service depends only on ports. It never checks which concrete
    factory it was given; the display name comes from the factory's
    gateway_name or from the explicit gateway_name argument.
    """

    def __init__(
        self,
        factory: PaymentFactory,
        gateway_name: str | None = None,
    ) -> None:
        self._validator = factory.create_validator()
        self._processor = factory.create_processor()
        self._logger = factory.create_logger()
        self._sink = factory.sink
        self._gateway_name = gateway_name or factory.gateway_name
        logger.debug("Payment service ready for gateway %s", self._gateway_name)

    @property
    def gateway_name(self) -> str:
        return self._gateway_name

    def process_payment(self, amount: Decimal, card_number: str) -> ProcessPaymentResponse:
        """Execute the validate -> process -> log workflow.

        Args:
            amount: Amount to charge. Not validated.
            card_number: Card to charge.

        Returns:
            ProcessPaymentResponse with approved=False and no reference when
            the card is rejected, or approved=True with the reference.
        """
        # Step 1: Validate; rejection is an outcome, not an error
        if not self._validator.validate_card(card_number):
            logger.info(
                "Card %s rejected by %s", mask_card_number(card_number), self._gateway_name
            )
            self._sink.write_line(INVALID_CARD_MESSAGE.format(gateway=self._gateway_name))
            return ProcessPaymentResponse(gateway_name=self._gateway_name, approved=False)

        # Step 2: Process, then log the reference
        reference = self._processor.process_transaction(amount, card_number)
        self._logger.log(PROCESSED_MESSAGE.format(reference=reference))
        logger.debug("Payment %s processed by %s", reference, self._gateway_name)

        return ProcessPaymentResponse(
            gateway_name=self._gateway_name,
            approved=True,
            reference=reference,
        )
