"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

from decimal import Decimal
from typing import List, Optional

from apps.catalog.infrastructure.persistence.models import Product


class ProductRepository:
    """Repository for Product aggregate."""

    @staticmethod
    def get_by_id(product_id: int) -> Optional[Product]:
        """Get product by id."""
        try:
            return Product.objects.get(id=product_id)
        except Product.DoesNotExist:
            return None

    @staticmethod
    def exists_by_code(code: str) -> bool:
        """Check if a product with this business code exists."""
        return Product.objects.filter(code=code).exists()

    @staticmethod
    def create(
        code: str,
        name: str,
        price_source: Decimal,
        price_target: Decimal,
        is_available: bool
    ) -> Product:
        """Create a new product."""
        return Product.objects.create(
            code=code,
            name=name,
            price_source=price_source,
            price_target=price_target,
            is_available=is_available
        )

    @staticmethod
    def get_page(offset: int, limit: int) -> List[Product]:
        """Get a slice of products in storage order."""
        return list(Product.objects.order_by("id")[offset:offset + limit])

    @staticmethod
    def count() -> int:
        """Count all products."""
        return Product.objects.count()
