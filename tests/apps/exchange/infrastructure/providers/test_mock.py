import pytest
from decimal import Decimal
from datetime import date

from apps.exchange.domain.exceptions import UpstreamEmptyResponse
from apps.exchange.infrastructure.providers.mock import MockRateProvider


@pytest.fixture
def provider():
    return MockRateProvider(today=lambda: date(2024, 5, 21))


def test_fetch_cached_success(provider):
    """
    Test that MockRateProvider serves a record dated today in HNB format.
    """
    rate_record = provider.fetch_cached("USD")

    assert rate_record.currency_code == "USD"
    assert rate_record.middle_rate == "1,1700"
    assert rate_record.application_date == "2024-05-21"
    assert rate_record.middle_rate_value == Decimal("1.1700")


def test_fetch_fresh_matches_cached(provider):
    assert provider.fetch_fresh("USD") == provider.fetch_cached("USD")


def test_different_currencies(provider):
    assert provider.fetch_cached("USD").middle_rate != provider.fetch_cached("GBP").middle_rate


def test_lowercase_code(provider):
    assert provider.fetch_cached("gbp").currency_code == "GBP"


def test_rate_overrides():
    provider = MockRateProvider(rates={"USD": "7,5"})

    assert provider.fetch_cached("USD").middle_rate_value == Decimal("7.5")
    assert provider.fetch_cached("GBP").middle_rate == "0,8650"


def test_unsupported_currency(provider):
    """
    Test that unsupported currency raises UpstreamEmptyResponse.
    """
    with pytest.raises(UpstreamEmptyResponse):
        provider.fetch_cached("XXX")
