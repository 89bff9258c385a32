from collections.abc import Iterator
from decimal import Decimal

import pytest

from payment_gateways.domain.exceptions import DuplicateGatewayError, UnknownGatewayError
from payment_gateways.domain.value_objects import CardRule
from payment_gateways.infrastructure.gateways import (
    GatewayFactory,
    GatewayLogger,
    GatewayProcessor,
    GatewayProfile,
    GatewayValidator,
    MercadoPagoFactory,
    PagSeguroFactory,
    StripeFactory,
    available_gateways,
    create_factory,
    get_factory_class,
    register_factory,
    unregister_factory,
)
from payment_gateways.infrastructure.output_sink import MemoryOutputSink

PIX = GatewayProfile(
    name="Pix",
    reference_prefix="PIX",
    currency_format="R$ {amount}",
    card_rule=CardRule(length=11),
)


class PixValidator(GatewayValidator):
    profile = PIX


class PixProcessor(GatewayProcessor):
    profile = PIX


class PixLogger(GatewayLogger):
    profile = PIX


class PixFactory(GatewayFactory):
    profile = PIX
    validator_class = PixValidator
    processor_class = PixProcessor
    logger_class = PixLogger


@pytest.fixture
def pix_registered() -> Iterator[None]:
    register_factory("pix", PixFactory)
    yield
    unregister_factory("pix")


class TestBuiltInGateways:
    def test_built_in_families_are_registered(self) -> None:
        assert {"mercadopago", "pagseguro", "stripe"} <= set(available_gateways())

    @pytest.mark.parametrize(
        ("key", "factory_class"),
        [
            ("pagseguro", PagSeguroFactory),
            ("mercadopago", MercadoPagoFactory),
            ("stripe", StripeFactory),
        ],
    )
    def test_get_factory_class(self, key: str, factory_class: type[GatewayFactory]) -> None:
        assert get_factory_class(key) is factory_class

    def test_keys_are_case_insensitive_and_trimmed(self) -> None:
        assert get_factory_class("  Stripe ") is StripeFactory

    def test_available_gateways_is_sorted(self) -> None:
        names = available_gateways()

        assert names == sorted(names)


class TestCreateFactory:
    def test_passes_collaborators(self) -> None:
        sink = MemoryOutputSink()

        factory = create_factory("mercadopago", sink=sink)
        factory.create_validator().validate_card("5234567890123456")

        assert isinstance(factory, MercadoPagoFactory)
        assert sink.lines == ["MercadoPago: Validando cartão..."]

    def test_unknown_gateway_raises(self) -> None:
        with pytest.raises(UnknownGatewayError, match="paypal"):
            create_factory("paypal")


class TestRegisterFactory:
    def test_duplicate_key_raises(self) -> None:
        with pytest.raises(DuplicateGatewayError):
            register_factory("STRIPE", PixFactory)

        assert get_factory_class("stripe") is StripeFactory

    @pytest.mark.usefixtures("pix_registered")
    def test_new_family_plugs_in_without_touching_existing_ones(self) -> None:
        sink = MemoryOutputSink()
        factory = create_factory("pix", sink=sink)

        accepted = factory.create_validator().validate_card("12345678901")
        reference = factory.create_processor().process_transaction(Decimal("0"), "12345678901")

        assert factory.gateway_name == "Pix"
        assert accepted is True
        assert reference.startswith("PIX-")
        assert get_factory_class("stripe") is StripeFactory

    def test_unregister_unknown_key_is_ignored(self) -> None:
        unregister_factory("does-not-exist")

        assert "does-not-exist" not in available_gateways()

    def test_unregister_removes_runtime_family(self) -> None:
        register_factory("Pix", PixFactory)

        unregister_factory(" PIX ")

        assert "pix" not in available_gateways()
        with pytest.raises(UnknownGatewayError):
            get_factory_class("pix")
