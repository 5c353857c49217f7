"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from apps.catalog.infrastructure.persistence.models import Product


@dataclass(frozen=True)
class CreateProductDTO:
    """Input for product creation. The converted price is never supplied by the caller."""
    code: str
    name: str
    price_source: Decimal
    is_available: bool


@dataclass
class ProductPage:
    """One page of products, numbered from zero."""
    content: List[Product]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_elements // self.size) if self.size else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)
