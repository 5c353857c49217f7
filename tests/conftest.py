import pytest
from datetime import date
from unittest.mock import MagicMock

from django.apps import apps as django_apps
from rest_framework.test import APIClient

from apps.exchange.domain.interfaces import BaseRateProvider
from apps.exchange.domain.services import ExchangeRateCache


@pytest.fixture
def api_client():
    """DRF API client."""
    return APIClient()


@pytest.fixture
def rate_provider():
    """Provider double; configure fetch_cached / fetch_fresh per test."""
    return MagicMock(spec=BaseRateProvider)


@pytest.fixture
def rate_cache(rate_provider, monkeypatch):
    """Replace the exchange app's cache with one over the provider double."""
    cache = ExchangeRateCache(rate_provider, today=lambda: date(2024, 5, 21))
    monkeypatch.setattr(django_apps.get_app_config("exchange"), "rate_cache", cache)
    return cache
