import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from apps.catalog.application.dto import CreateProductDTO, ProductPage


class TestDataTransferObjects:
    """Tests for DTOs - mainly structure validation."""

    def test_create_product_dto(self):
        dto = CreateProductDTO(
            code="ABC1234567",
            name="Laptop",
            price_source=Decimal("9.99"),
            is_available=True
        )

        assert dto.code == "ABC1234567"
        assert dto.price_source == Decimal("9.99")

    def test_create_product_dto_is_immutable(self):
        dto = CreateProductDTO(code="ABC1234567", name="Laptop", price_source=Decimal("9.99"), is_available=True)

        with pytest.raises(FrozenInstanceError):
            dto.price_source = Decimal("1")

    @pytest.mark.parametrize("total,size,pages", [(0, 25, 0), (1, 25, 1), (25, 25, 1), (26, 25, 2), (5, 2, 3)])
    def test_product_page_total_pages(self, total, size, pages):
        page = ProductPage(content=[], page=0, size=size, total_elements=total)

        assert page.total_pages == pages

    def test_product_page_number_of_elements(self):
        page = ProductPage(content=["a", "b"], page=0, size=25, total_elements=2)

        assert page.number_of_elements == 2
