"""Stripe family: 16-character cards starting with "4", amounts in dollars."""

from payment_gateways.domain.value_objects import CardRule
from payment_gateways.infrastructure.gateways.base import (
    GatewayFactory,
    GatewayLogger,
    GatewayProcessor,
    GatewayProfile,
    GatewayValidator,
)

STRIPE = GatewayProfile(
    name="Stripe",
    reference_prefix="STRIPE",
    currency_format="${amount}",
    card_rule=CardRule(required_prefix="4"),
)


class StripeValidator(GatewayValidator):
    profile = STRIPE


class StripeProcessor(GatewayProcessor):
    profile = STRIPE


class StripeLogger(GatewayLogger):
    profile = STRIPE


class StripeFactory(GatewayFactory):
    profile = STRIPE
    validator_class = StripeValidator
    processor_class = StripeProcessor
    logger_class = StripeLogger
