"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum

from apps.exchange.domain.exceptions import MalformedRateRecord


class CacheState(str, Enum):
    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"


@dataclass(frozen=True)
class RateRecord:
    """
    One day's rate for a currency, as published by the provider.

    Values are kept in the provider's textual form. The parsed views
    (`middle_rate_value`, `application_date_value`) are computed on access so
    that malformed data surfaces where it is used, not where it is fetched.
    """

    currency_code: str
    middle_rate: str | None
    application_date: str | None
    exchange_rate_number: str | None = None
    country: str | None = None
    country_iso: str | None = None
    buying_rate: str | None = None
    selling_rate: str | None = None
    currency_numeric_code: str | None = None
    decimal_separator: str = ","

    def __post_init__(self):
        if len(self.currency_code) != 3:
            raise ValueError(f"Currency code must be exactly 3 characters, got '{self.currency_code}'")

    @property
    def middle_rate_value(self) -> Decimal:
        if self.middle_rate is None:
            raise MalformedRateRecord(f"Middle rate for {self.currency_code} is missing")
        if not isinstance(self.middle_rate, str):
            raise MalformedRateRecord(
                f"Middle rate for {self.currency_code} must be text, got {type(self.middle_rate).__name__}"
            )

        normalized = self.middle_rate.strip().replace(self.decimal_separator, ".")
        try:
            value = Decimal(normalized)
        except InvalidOperation:
            raise MalformedRateRecord(
                f"Middle rate '{self.middle_rate}' for {self.currency_code} is not a decimal"
            )

        if not value.is_finite() or value <= 0:
            raise MalformedRateRecord(
                f"Middle rate for {self.currency_code} must be positive, got {self.middle_rate}"
            )
        return value

    @property
    def application_date_value(self) -> date:
        if not self.application_date:
            raise MalformedRateRecord(f"Application date for {self.currency_code} is missing")
        if not isinstance(self.application_date, str):
            raise MalformedRateRecord(
                f"Application date for {self.currency_code} must be text, got {type(self.application_date).__name__}"
            )
        try:
            return date.fromisoformat(self.application_date.strip())
        except ValueError:
            raise MalformedRateRecord(
                f"Application date '{self.application_date}' for {self.currency_code} is not YYYY-MM-DD"
            )


@dataclass(frozen=True)
class ConversionRequest:

    source_amount: Decimal
    rate: Decimal

    def __post_init__(self):
        if not self.rate.is_finite() or self.rate <= 0:
            raise ValueError(f"rate must be positive, got {self.rate}")
        if not self.source_amount.is_finite() or self.source_amount < 0:
            raise ValueError(f"source_amount must not be negative, got {self.source_amount}")


@dataclass(frozen=True)
class RateSnapshot:
    """A served middle rate together with the slot it was read from."""

    currency_code: str
    middle_rate: Decimal
    record: RateRecord
    state: CacheState
