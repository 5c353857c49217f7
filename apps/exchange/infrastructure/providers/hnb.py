import logging

import requests

from apps.exchange.domain.exceptions import UpstreamEmptyResponse, UpstreamUnavailable
from apps.exchange.domain.interfaces import BaseRateProvider
from apps.exchange.domain.models import RateRecord


logger = logging.getLogger(__name__)

CURRENCY_QUERY = "valuta"
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class HnbRateProvider(BaseRateProvider):
    """
    Croatian National Bank (HNB) exchange-rate list provider.
    See https://api.hnb.hr/ for the API documentation.

    Response format: a JSON array of rate objects, element 0 is the requested
    currency. Decimals use a comma separator, e.g. "1,1697".
    """

    def __init__(self, base_url: str, connect_timeout: float = 10, read_timeout: float = 270):
        self.base_url = base_url
        self.timeout = (connect_timeout, read_timeout)

    def fetch_cached(self, currency_code: str) -> RateRecord:
        logger.info("Getting exchange rate for %s", currency_code)
        return self._fetch(currency_code, headers=None)

    def fetch_fresh(self, currency_code: str) -> RateRecord:
        logger.info("Refreshing exchange rate for %s", currency_code)
        return self._fetch(currency_code, headers=NO_CACHE_HEADERS)

    def _fetch(self, currency_code: str, headers: dict | None) -> RateRecord:
        # Format: https://api.hnb.hr/tecajn-eur/v3?valuta=USD
        logger.info("Calling HNB API %s with %s=%s", self.base_url, CURRENCY_QUERY, currency_code)

        try:
            response = requests.get(
                self.base_url,
                params={CURRENCY_QUERY: currency_code},
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise UpstreamUnavailable(currency_code, f"Timeout calling HNB API for {currency_code}") from e
        except requests.exceptions.HTTPError as e:
            raise UpstreamUnavailable(currency_code, f"HTTP error from HNB: {e}") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(currency_code, f"Error calling HNB API: {e}") from e
        except ValueError as e:
            raise UpstreamUnavailable(currency_code, f"Invalid JSON from HNB: {e}") from e

        if not isinstance(data, list):
            raise UpstreamUnavailable(currency_code, f"Unexpected HNB payload type: {type(data).__name__}")
        if not data:
            raise UpstreamEmptyResponse(currency_code, f"HNB returned no rates for {currency_code}")
        if not isinstance(data[0], dict):
            raise UpstreamUnavailable(currency_code, "Unexpected HNB rate entry")

        returned_code = data[0].get(CURRENCY_QUERY)
        if returned_code is not None and str(returned_code).upper() != currency_code.upper():
            raise UpstreamUnavailable(
                currency_code, f"HNB returned a rate for {returned_code} instead of {currency_code}"
            )

        try:
            return self._to_record(currency_code, data[0])
        except ValueError as e:
            raise UpstreamUnavailable(currency_code, f"Cannot build rate record: {e}") from e

    @staticmethod
    def _to_record(currency_code: str, item: dict) -> RateRecord:
        return RateRecord(
            currency_code=currency_code,
            middle_rate=item.get("srednji_tecaj"),
            application_date=item.get("datum_primjene"),
            exchange_rate_number=item.get("broj_tecajnice"),
            country=item.get("drzava"),
            country_iso=item.get("drzava_iso"),
            buying_rate=item.get("kupovni_tecaj"),
            selling_rate=item.get("prodajni_tecaj"),
            currency_numeric_code=item.get("sifra_valute"),
        )
