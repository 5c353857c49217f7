from django.apps import AppConfig
from django.utils import timezone


class ExchangeConfig(AppConfig):
    name = "apps.exchange"
    label = "exchange"
    verbose_name = "Exchange rates"

    # Process-wide cache, built once the registry is ready.
    rate_cache = None

    def ready(self):
        from apps.exchange.domain.services import ExchangeRateCache
        from apps.exchange.infrastructure.providers.registry import get_configured_provider

        self.rate_cache = ExchangeRateCache(get_configured_provider(), today=timezone.localdate)


def get_rate_cache():
    """Return the cache owned by the exchange app."""
    from django.apps import apps

    return apps.get_app_config("exchange").rate_cache
