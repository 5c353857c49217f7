"""
Provider Registry - Maps provider names to adapter classes.
This is the glue between the RATE_PROVIDER setting and the actual implementation.
"""

import logging
from enum import Enum

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.exchange.domain.interfaces import BaseRateProvider
from apps.exchange.infrastructure.providers.hnb import HnbRateProvider
from apps.exchange.infrastructure.providers.mock import MockRateProvider


logger = logging.getLogger(__name__)


class ProviderName(str, Enum):
    """
    Available providers.
    To add a new provider:
    1. Add an entry here
    2. Implement the BaseRateProvider interface
    3. Register it in PROVIDER_REGISTRY and build it in get_provider_instance
    """

    HNB = "hnb"
    MOCK = "mock"


PROVIDER_REGISTRY: dict[str, type[BaseRateProvider]] = {
    ProviderName.HNB.value: HnbRateProvider,
    ProviderName.MOCK.value: MockRateProvider,
}


def get_provider_instance(provider_name: str) -> BaseRateProvider | None:
    """
    Get an instance of a provider by its name, configured from settings.

    Args:
        provider_name: One of the ProviderName values

    Returns:
        Instance of the provider adapter, or None if not found
    """
    provider_class = PROVIDER_REGISTRY.get(provider_name)

    if provider_class is None:
        logger.error("Provider '%s' not found in registry", provider_name)
        return None

    if provider_class is HnbRateProvider:
        return HnbRateProvider(
            base_url=settings.HNB_API_URL,
            connect_timeout=settings.HNB_CONNECT_TIMEOUT,
            read_timeout=settings.HNB_READ_TIMEOUT,
        )
    if provider_class is MockRateProvider:
        return MockRateProvider(rates=settings.MOCK_RATES)
    return provider_class()


def get_configured_provider() -> BaseRateProvider:
    """
    Get the provider selected by the RATE_PROVIDER setting.

    Raises:
        ImproperlyConfigured: if the setting names an unknown provider
    """
    provider = get_provider_instance(settings.RATE_PROVIDER)
    if provider is None:
        raise ImproperlyConfigured(
            f"RATE_PROVIDER must be one of {sorted(PROVIDER_REGISTRY)}, got '{settings.RATE_PROVIDER}'"
        )
    logger.info("Using %s rate provider", provider.__class__.__name__)
    return provider
