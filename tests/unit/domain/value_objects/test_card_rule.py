import pytest

from payment_gateways.domain.exceptions import InvalidCardRuleError
from payment_gateways.domain.value_objects import CardRule, mask_card_number
from payment_gateways.domain.value_objects.card_rule import CARD_NUMBER_LENGTH


class TestCardRuleCreation:
    def test_default_rule_requires_sixteen_characters(self) -> None:
        rule = CardRule()

        assert rule.length == CARD_NUMBER_LENGTH == 16
        assert rule.required_prefix is None

    def test_zero_length_raises(self) -> None:
        with pytest.raises(InvalidCardRuleError):
            CardRule(length=0)

    def test_negative_length_raises(self) -> None:
        with pytest.raises(InvalidCardRuleError):
            CardRule(length=-16)

    def test_empty_prefix_raises(self) -> None:
        with pytest.raises(InvalidCardRuleError):
            CardRule(required_prefix="")

    def test_rule_is_frozen(self) -> None:
        rule = CardRule()

        with pytest.raises(AttributeError):
            rule.length = 15  # type: ignore[misc]


class TestCardRuleLength:
    @pytest.mark.parametrize(
        "card_number",
        ["", "1", "1234567890", "123456789012345", "12345678901234567", "4" * 32],
    )
    def test_wrong_length_is_rejected(self, card_number: str) -> None:
        assert CardRule().accepts(card_number) is False
        assert CardRule(required_prefix="4").accepts(card_number) is False

    def test_sixteen_characters_are_accepted(self) -> None:
        assert CardRule().accepts("1234567890123456") is True

    def test_non_digits_are_not_checked(self) -> None:
        assert CardRule().accepts("abcdefghijklmnop") is True

    def test_none_is_rejected(self) -> None:
        assert CardRule().accepts(None) is False

    def test_non_string_is_rejected(self) -> None:
        assert CardRule().accepts(1234567890123456) is False  # type: ignore[arg-type]


class TestCardRulePrefix:
    def test_matching_prefix_is_accepted(self) -> None:
        assert CardRule(required_prefix="5").accepts("5234567890123456") is True

    @pytest.mark.parametrize("first_digit", ["0", "1", "2", "3", "4", "6", "7", "8", "9"])
    def test_other_first_digits_are_rejected(self, first_digit: str) -> None:
        card_number = first_digit + "234567890123456"

        assert CardRule(required_prefix="5").accepts(card_number) is False

    def test_short_card_with_matching_prefix_is_rejected(self) -> None:
        assert CardRule(required_prefix="4").accepts("4234567890") is False


class TestMaskCardNumber:
    def test_keeps_last_four_digits(self) -> None:
        assert mask_card_number("1234567890123456") == "************3456"

    def test_short_numbers_are_fully_masked(self) -> None:
        assert mask_card_number("123") == "***"

    def test_empty_string(self) -> None:
        assert mask_card_number("") == "<empty>"

    def test_non_string_values_show_only_their_type(self) -> None:
        assert mask_card_number(None) == "<NoneType>"
        assert mask_card_number(1234567890123456) == "<int>"
