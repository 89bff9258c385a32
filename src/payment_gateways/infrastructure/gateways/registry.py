"""Factory registry: gateway key -> factory class.

Lookup by name lets callers pick a family from a plain string while
staying open for extension: a new family registers itself under a new
key and no existing code changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_gateways.domain.exceptions import DuplicateGatewayError, UnknownGatewayError

if TYPE_CHECKING:
    from payment_gateways.application.ports import IdProvider, OutputSink, TimeProvider
    from payment_gateways.infrastructure.gateways.base import GatewayFactory

logger = logging.getLogger(__name__)

_FACTORIES: dict[str, type[GatewayFactory]] = {}


def _normalize(key: str) -> str:
    return key.strip().lower()


def register_factory(key: str, factory_class: type[GatewayFactory]) -> None:
    """Register a factory class under a gateway key.

    Raises:
        DuplicateGatewayError: If the key is already taken.
    """
    normalized = _normalize(key)
    if normalized in _FACTORIES:
        raise DuplicateGatewayError(
            f"Gateway '{normalized}' already registered to {_FACTORIES[normalized].__name__}"
        )
    _FACTORIES[normalized] = factory_class
    logger.debug("Registered gateway %s -> %s", normalized, factory_class.__name__)


def unregister_factory(key: str) -> None:
    """Remove a registration. Unknown keys are ignored."""
    _FACTORIES.pop(_normalize(key), None)


def get_factory_class(key: str) -> type[GatewayFactory]:
    """Return the factory class registered under key.

    Raises:
        UnknownGatewayError: If nothing is registered under the key.
    """
    factory_class = _FACTORIES.get(_normalize(key))
    if factory_class is None:
        raise UnknownGatewayError(
            f"Unknown gateway: {key!r}; available: {', '.join(available_gateways())}"
        )
    return factory_class


def create_factory(
    key: str,
    sink: OutputSink | None = None,
    time_provider: TimeProvider | None = None,
    id_provider: IdProvider | None = None,
) -> GatewayFactory:
    """Instantiate the factory registered under key with the given collaborators."""
    factory_class = get_factory_class(key)
    return factory_class(sink=sink, time_provider=time_provider, id_provider=id_provider)


def available_gateways() -> list[str]:
    return sorted(_FACTORIES)
