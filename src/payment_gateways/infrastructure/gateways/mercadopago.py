"""MercadoPago family: 16-character cards starting with "5", amounts in reais."""

from payment_gateways.domain.value_objects import CardRule
from payment_gateways.infrastructure.gateways.base import (
    GatewayFactory,
    GatewayLogger,
    GatewayProcessor,
    GatewayProfile,
    GatewayValidator,
)

MERCADOPAGO = GatewayProfile(
    name="MercadoPago",
    reference_prefix="MP",
    currency_format="R$ {amount}",
    card_rule=CardRule(required_prefix="5"),
)


class MercadoPagoValidator(GatewayValidator):
    profile = MERCADOPAGO


class MercadoPagoProcessor(GatewayProcessor):
    profile = MERCADOPAGO


class MercadoPagoLogger(GatewayLogger):
    profile = MERCADOPAGO


class MercadoPagoFactory(GatewayFactory):
    profile = MERCADOPAGO
    validator_class = MercadoPagoValidator
    processor_class = MercadoPagoProcessor
    logger_class = MercadoPagoLogger
