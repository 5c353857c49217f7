from decimal import Decimal, ROUND_HALF_UP

from apps.exchange.domain.models import ConversionRequest


CENT = Decimal("0.01")


class PricingEngine:
    """
    Converts amounts with a middle rate.

    Results are rounded half-up to two decimals so the same inputs always give
    the same price.
    """

    @staticmethod
    def convert(source_amount: Decimal, rate: Decimal) -> Decimal:
        """
        Convert an amount with the given rate.

        Args:
            source_amount: Amount in the source currency (non-negative)
            rate: Middle rate (positive)

        Returns:
            Converted amount with exactly two decimal places

        Example:
            >>> PricingEngine.convert(Decimal("10.005"), Decimal("1.2345"))
            Decimal('12.35')
        """
        request = ConversionRequest(
            source_amount=Decimal(str(source_amount)),
            rate=Decimal(str(rate)),
        )
        return (request.source_amount * request.rate).quantize(CENT, rounding=ROUND_HALF_UP)
