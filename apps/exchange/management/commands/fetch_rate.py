from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.exchange.domain.exceptions import MalformedRateRecord, UpstreamError
from apps.exchange.infrastructure.providers.registry import get_configured_provider


class Command(BaseCommand):
    help = 'Fetch the current exchange rate record from the configured provider'

    def add_arguments(self, parser):
        parser.add_argument(
            '--currency',
            dest='currency',
            type=str,
            default=settings.CATALOG_TARGET_CURRENCY,
            help='ISO 4217 currency code (defaults to CATALOG_TARGET_CURRENCY)'
        )
        parser.add_argument(
            '--fresh',
            action='store_true',
            help='Ask the provider to bypass its cache'
        )

    def handle(self, **options):
        currency = options['currency'].upper()
        if len(currency) != 3:
            raise CommandError('Currency code must be exactly 3 characters')

        provider = get_configured_provider()
        self.stdout.write(f'Fetching {currency} rate from {provider.__class__.__name__}...')

        try:
            if options['fresh']:
                record = provider.fetch_fresh(currency)
            else:
                record = provider.fetch_cached(currency)
        except UpstreamError as e:
            raise CommandError(f'Failed: {e}')

        try:
            middle_rate = record.middle_rate_value
        except MalformedRateRecord as e:
            raise CommandError(f'Provider returned a malformed record: {e}')

        self.stdout.write(
            self.style.SUCCESS(
                f'{currency} middle rate {middle_rate} (applies on {record.application_date})'
            )
        )
