"""
Exchange bounded context errors.

Upstream errors describe transport/provider failures and never leave
ExchangeRateCache. RateUnavailable is the only error callers observe.
"""


class ExchangeError(Exception):
    """Base class for exchange errors."""


class UpstreamError(ExchangeError):
    """The rate provider could not deliver a record."""

    def __init__(self, currency_code: str, message: str):
        self.currency_code = currency_code
        super().__init__(message)


class UpstreamUnavailable(UpstreamError):
    pass


class UpstreamEmptyResponse(UpstreamError):
    pass


class MalformedRateRecord(ExchangeError, ValueError):
    """A rate record field is missing or cannot be parsed."""


class RateUnavailable(ExchangeError):
    """Neither the cached nor the refreshed rate is usable."""

    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(f"Exchange rate for {currency_code} is currently unavailable.")
