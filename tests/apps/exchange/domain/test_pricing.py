import pytest
from decimal import Decimal

from apps.exchange.domain.pricing import PricingEngine


class TestPricingEngine:
    """Tests for PricingEngine.convert."""

    def test_convert_rounds_half_up(self):
        """10.005 * 1.2345 = 12.3511725 -> 12.35"""
        assert PricingEngine.convert(Decimal("10.005"), Decimal("1.2345")) == Decimal("12.35")

    def test_convert_exact(self):
        result = PricingEngine.convert(Decimal("10.00"), Decimal("7.5"))

        assert result == Decimal("75.00")
        assert str(result) == "75.00"

    def test_convert_half_up_not_bankers(self):
        """0.125 rounds to 0.13 (banker's rounding would give 0.12)."""
        assert PricingEngine.convert(Decimal("0.125"), Decimal("1")) == Decimal("0.13")
        assert PricingEngine.convert(Decimal("0.135"), Decimal("1")) == Decimal("0.14")

    def test_convert_always_two_decimals(self):
        assert PricingEngine.convert(Decimal("3"), Decimal("1.17")).as_tuple().exponent == -2

    def test_convert_accepts_floats_and_strings(self):
        assert PricingEngine.convert(10.005, "1.2345") == Decimal("12.35")

    def test_convert_is_deterministic(self):
        results = {PricingEngine.convert(Decimal("19.99"), Decimal("1.1697")) for _ in range(10)}

        assert results == {Decimal("23.38")}

    def test_convert_zero_amount(self):
        assert PricingEngine.convert(Decimal("0.00"), Decimal("1.17")) == Decimal("0.00")

    @pytest.mark.parametrize("amount,rate", [
        (Decimal("10"), Decimal("0")),
        (Decimal("10"), Decimal("-1.1")),
        (Decimal("-10"), Decimal("1.1")),
        (Decimal("NaN"), Decimal("1.1")),
    ])
    def test_convert_invalid_inputs(self, amount, rate):
        with pytest.raises(ValueError):
            PricingEngine.convert(amount, rate)
