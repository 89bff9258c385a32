"""Gateway families and the factory registry.

Importing this package registers the built-in families:
- pagseguro   -> PagSeguroFactory
- mercadopago -> MercadoPagoFactory
- stripe      -> StripeFactory
"""

from payment_gateways.infrastructure.gateways.base import (
    GatewayFactory,
    GatewayLogger,
    GatewayProcessor,
    GatewayProfile,
    GatewayValidator,
)
from payment_gateways.infrastructure.gateways.mercadopago import MercadoPagoFactory
from payment_gateways.infrastructure.gateways.pagseguro import PagSeguroFactory
from payment_gateways.infrastructure.gateways.registry import (
    available_gateways,
    create_factory,
    get_factory_class,
    register_factory,
    unregister_factory,
)
from payment_gateways.infrastructure.gateways.stripe import StripeFactory

register_factory("pagseguro", PagSeguroFactory)
register_factory("mercadopago", MercadoPagoFactory)
register_factory("stripe", StripeFactory)

__all__ = [
    "GatewayFactory",
    "GatewayLogger",
    "GatewayProcessor",
    "GatewayProfile",
    "GatewayValidator",
    "MercadoPagoFactory",
    "PagSeguroFactory",
    "StripeFactory",
    "available_gateways",
    "create_factory",
    "get_factory_class",
    "register_factory",
    "unregister_factory",
]
