"""
Domain services - Core business logic.
Implements the staleness-gated cache in front of the rate provider.
"""

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Optional

from apps.exchange.domain.exceptions import (
    MalformedRateRecord,
    RateUnavailable,
    UpstreamError,
)
from apps.exchange.domain.interfaces import BaseRateProvider
from apps.exchange.domain.models import CacheState, RateRecord, RateSnapshot


logger = logging.getLogger(__name__)


class ExchangeRateCache:
    """
    Serves a usable middle rate per currency, refreshing when the cached one is stale.

    Refresh strategy:
    1. Ask the provider for its cached record
    2. Use it if it parses and is dated today or later
    3. Otherwise force a refresh from the provider
    4. Fail with RateUnavailable if the refreshed record is unusable too

    The most recently observed record per currency is kept in a slot so the
    cache state can be inspected. A per-currency lock serialises the whole
    read/refresh sequence; different currencies never block each other.
    """

    def __init__(
        self,
        provider: BaseRateProvider,
        today: Optional[Callable[[], date]] = None,
    ):
        self.provider = provider
        self._today = today or date.today
        self._slots: Dict[str, RateRecord] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def get_middle_rate(self, currency_code: str) -> Decimal:
        """
        Get today's middle rate for a currency.

        Args:
            currency_code: ISO 4217 code (e.g. "USD")

        Returns:
            Middle rate as a positive Decimal

        Raises:
            RateUnavailable: if neither the cached nor the refreshed record is usable
        """
        return self.get_rate_snapshot(currency_code).middle_rate

    def get_rate_snapshot(self, currency_code: str) -> RateSnapshot:
        """
        Same as get_middle_rate, but also returns the record the rate came
        from and the slot state, all read under one lock.
        """
        code = currency_code.upper()
        if len(code) != 3 or not code.isalpha():
            logger.error("Invalid currency code '%s'", currency_code)
            raise RateUnavailable(code)

        with self._lock_for(code):
            rate = self._resolve(code)
            record = self._slots[code]
            return RateSnapshot(
                currency_code=code,
                middle_rate=rate,
                record=record,
                state=self._state_of(record),
            )

    def state(self, currency_code: str) -> CacheState:
        code = currency_code.upper()
        with self._lock_for(code):
            return self._state_of(self._slots.get(code))

    def cached_record(self, currency_code: str) -> Optional[RateRecord]:
        code = currency_code.upper()
        with self._lock_for(code):
            return self._slots.get(code)

    def _resolve(self, code: str) -> Decimal:
        # Caller holds the lock for `code`.
        try:
            record = self.provider.fetch_cached(code)
        except UpstreamError as e:
            logger.warning("Cached %s rate could not be fetched: %s", code, e)
        else:
            self._slots[code] = record
            rate = self._usable_rate(record)
            if rate is not None:
                logger.info("Using cached %s middle rate %s", code, rate)
                return rate

        logger.info("%s rate is missing or stale. Refreshing from provider...", code)
        try:
            record = self.provider.fetch_fresh(code)
        except UpstreamError as e:
            logger.error("Refreshing %s rate failed: %s", code, e)
            raise RateUnavailable(code) from e

        self._slots[code] = record
        try:
            rate = record.middle_rate_value
        except MalformedRateRecord as e:
            logger.error("Refreshed %s rate is malformed: %s", code, e)
            raise RateUnavailable(code) from e

        logger.info("Using refreshed %s middle rate %s", code, rate)
        return rate

    def _state_of(self, record: Optional[RateRecord]) -> CacheState:
        if record is None:
            return CacheState.EMPTY
        if self._usable_rate(record) is None:
            return CacheState.STALE
        return CacheState.FRESH

    def _usable_rate(self, record: RateRecord) -> Optional[Decimal]:
        # Same-day and future-dated records are fresh.
        try:
            rate = record.middle_rate_value
            applied_on = record.application_date_value
        except MalformedRateRecord as e:
            logger.info("Cached %s record is malformed: %s", record.currency_code, e)
            return None

        if applied_on < self._today():
            return None
        return rate

    def _lock_for(self, code: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(code)
            if lock is None:
                lock = self._locks[code] = threading.Lock()
            return lock
