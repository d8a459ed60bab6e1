"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from billing.domain.exceptions import InvalidQuantityError, ValidationError
from billing.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(9.99).amount == Decimal("9.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["Infinity", "inf", "-inf", "NaN", "sNaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(9.99)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("9.99") * 3 == Money.of("29.97")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1.00") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("44.97")) == "$44.97"
        assert str(Money.of("44.97", "EUR")) == "44.97 EUR"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="at least 1"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(2.5)

    def test_invalid_quantity_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Quantity(0)

    def test_str(self):
        assert str(Quantity(7)) == "7"
