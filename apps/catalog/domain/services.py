"""
Domain services - Core business logic.
Creates products priced in two currencies and serves them back.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.catalog.application.dto import CreateProductDTO, ProductPage
from apps.catalog.domain.exceptions import DuplicateCode, NotFound
from apps.catalog.infrastructure.persistence.models import Product
from apps.catalog.infrastructure.persistence.repositories import ProductRepository
from apps.exchange.domain.pricing import PricingEngine
from apps.exchange.domain.services import ExchangeRateCache


logger = logging.getLogger(__name__)


class CatalogService:
    """
    Domain service for the product catalog.

    Creation flow:
    1. Reject duplicate business codes before touching the rate pipeline
    2. Get today's middle rate for the target currency
    3. Convert the source price (half-up, 2 decimals)
    4. Save and return the product

    RateUnavailable from the cache propagates unchanged.
    """

    def __init__(
        self,
        rate_cache: ExchangeRateCache,
        repository: type[ProductRepository] = ProductRepository,
        target_currency: Optional[str] = None,
    ):
        self.rate_cache = rate_cache
        self.repository = repository
        self.target_currency = target_currency or settings.CATALOG_TARGET_CURRENCY

    def create_item(self, data: CreateProductDTO) -> Product:
        """
        Create a product and derive its converted price.

        Raises:
            DuplicateCode: if a product with the same code exists
            RateUnavailable: if no usable exchange rate can be obtained
        """
        logger.info("Creating product %s (%s)", data.code, data.name)

        if self.repository.exists_by_code(data.code):
            raise DuplicateCode(data.code)

        rate = self.rate_cache.get_middle_rate(self.target_currency)
        price_target = PricingEngine.convert(data.price_source, rate)

        try:
            with transaction.atomic():
                product = self.repository.create(
                    code=data.code,
                    name=data.name,
                    price_source=data.price_source,
                    price_target=price_target,
                    is_available=data.is_available,
                )
        except IntegrityError as e:
            # Lost a race with a concurrent create of the same code.
            logger.warning("Product %s was created concurrently: %s", data.code, e)
            raise DuplicateCode(data.code) from e
        logger.info("Product with ID: %s saved to database.", product.id)
        return product

    def get_item(self, product_id: int) -> Product:
        logger.info("Fetching product with ID: %s", product_id)
        product = self.repository.get_by_id(product_id)
        if product is None:
            raise NotFound(product_id)
        return product

    def list_items(self, page: int, size: int) -> ProductPage:
        """List products in storage order, `page` counted from zero."""
        if page < 0 or size <= 0:
            raise ValueError(f"Invalid page request: page={page}, size={size}")

        logger.info("Fetching all products - page: %s, size: %s", page, size)
        result = ProductPage(
            content=self.repository.get_page(offset=page * size, limit=size),
            page=page,
            size=size,
            total_elements=self.repository.count(),
        )
        logger.info("Fetched %s products from database.", result.number_of_elements)
        return result
