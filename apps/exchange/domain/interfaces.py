from abc import ABC, abstractmethod

from apps.exchange.domain.models import RateRecord


class BaseRateProvider(ABC):
    """
    Port for a daily exchange-rate source.

    Implementations perform exactly one outbound call per method and never
    retry. Raw textual fields are returned untouched.
    """

    @abstractmethod
    def fetch_cached(self, currency_code: str) -> RateRecord:
        """Rate as currently known to the provider (may be served from its cache)."""
        pass

    @abstractmethod
    def fetch_fresh(self, currency_code: str) -> RateRecord:
        """Authoritative current rate, bypassing any provider-side cache."""
        pass
