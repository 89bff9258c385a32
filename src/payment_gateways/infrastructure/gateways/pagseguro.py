"""PagSeguro family: any 16-character card, amounts in reais."""

from payment_gateways.domain.value_objects import CardRule
from payment_gateways.infrastructure.gateways.base import (
    GatewayFactory,
    GatewayLogger,
    GatewayProcessor,
    GatewayProfile,
    GatewayValidator,
)

PAGSEGURO = GatewayProfile(
    name="PagSeguro",
    reference_prefix="PAGSEG",
    currency_format="R$ {amount}",
    card_rule=CardRule(),
)


class PagSeguroValidator(GatewayValidator):
    profile = PAGSEGURO


class PagSeguroProcessor(GatewayProcessor):
    profile = PAGSEGURO


class PagSeguroLogger(GatewayLogger):
    profile = PAGSEGURO


class PagSeguroFactory(GatewayFactory):
    profile = PAGSEGURO
    validator_class = PagSeguroValidator
    processor_class = PagSeguroProcessor
    logger_class = PagSeguroLogger
