"""
Mock provider for development and tests.
Serves fixed middle rates dated today, in the same textual form as HNB.
"""

import logging
from datetime import date
from typing import Callable, Dict, Optional

from apps.exchange.domain.exceptions import UpstreamEmptyResponse
from apps.exchange.domain.interfaces import BaseRateProvider
from apps.exchange.domain.models import RateRecord


logger = logging.getLogger(__name__)


class MockRateProvider(BaseRateProvider):
    """
    Offline provider that never touches the network.
    Useful for:
    - Running the service without access to the HNB API
    - Local development and demos
    """

    # Units of currency per 1 EUR (approximate real-world values)
    BASE_RATES: Dict[str, str] = {
        "USD": "1,1700",
        "GBP": "0,8650",
        "CHF": "0,9350",
        "JPY": "172,5000",
    }

    def __init__(
        self,
        rates: Optional[Dict[str, str]] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.rates = {**self.BASE_RATES, **(rates or {})}
        self._today = today or date.today

    def fetch_cached(self, currency_code: str) -> RateRecord:
        return self._record(currency_code)

    def fetch_fresh(self, currency_code: str) -> RateRecord:
        return self._record(currency_code)

    def _record(self, currency_code: str) -> RateRecord:
        middle_rate = self.rates.get(currency_code.upper())

        if middle_rate is None:
            logger.warning("MockRateProvider: unsupported currency %s", currency_code)
            raise UpstreamEmptyResponse(currency_code, f"No mock rate for {currency_code}")

        return RateRecord(
            currency_code=currency_code.upper(),
            middle_rate=middle_rate,
            application_date=self._today().isoformat(),
        )
